"""
Session state serialization.

The serialized form is JSON mirroring SessionState field for field, with
camelCase keys. Restoring validates every field before anything is built;
a failed restore never yields a partial state.
"""

import json
from typing import Union

from pydantic import ValidationError as PydanticValidationError

from .errors import MalformedInput, StateValidationError
from .models import SessionState


def serialize(state: SessionState) -> str:
    """Dump a session state to JSON text."""
    return state.model_dump_json(by_alias=True)


def deserialize(text: Union[str, bytes]) -> SessionState:
    """
    Parse and validate serialized session state.

    Raises:
        MalformedInput: If the text is not JSON or not a JSON object
        StateValidationError: If any field is missing or invalid; the
            error names the offending field path
    """
    try:
        data = json.loads(text)
    except (ValueError, RecursionError, TypeError) as e:
        raise MalformedInput(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedInput(f"Session state must be a JSON object, got {type(data).__name__}")

    try:
        return SessionState.model_validate(data)
    except PydanticValidationError as e:
        raise StateValidationError.from_pydantic(e) from e


def states_equal(first: SessionState, second: SessionState) -> bool:
    """Field-by-field comparison, including every grid cell."""
    return first.model_dump(by_alias=True) == second.model_dump(by_alias=True)
