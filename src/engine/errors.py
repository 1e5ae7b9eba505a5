"""Exception types raised by the game engine and the content layer."""

from typing import Any, Dict, List, Optional


class WordConnectError(Exception):
    """Base class for all engine errors."""


class SizeMismatch(WordConnectError, ValueError):
    """Tile count does not fit the requested board."""

    def __init__(self, rows: int, cols: int, tile_count: int, reason: Optional[str] = None):
        self.rows = rows
        self.cols = cols
        self.tile_count = tile_count
        message = reason or (
            f"Tile count ({tile_count}) does not match board size "
            f"{rows}x{cols} ({rows * cols} cells)"
        )
        super().__init__(message)


class BoardNotInitialized(WordConnectError, RuntimeError):
    """The board was used before `init_board` or `restore` laid out a grid."""


class MalformedInput(WordConnectError, ValueError):
    """Serialized state is not valid JSON or is not a JSON object."""


class StateValidationError(WordConnectError, ValueError):
    """
    A serialized session failed field validation.

    Attributes:
        field: Dotted path of the first offending field (e.g. "config.difficultyLevel")
        errors: Every error entry reported by pydantic, in validation order
    """

    def __init__(self, field: str, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        self.field = field
        self.errors = errors or []
        super().__init__(f"{field}: {message}" if field else message)

    @classmethod
    def from_pydantic(cls, exc: Any) -> "StateValidationError":
        """Build from a pydantic ValidationError, naming its first failure."""
        entries = exc.errors(include_url=False)
        first = entries[0]
        field = format_location(first["loc"])

        ctx = first.get("ctx") or {}
        if first["type"] == "value_error" and "error" in ctx:
            message = str(ctx["error"])
        else:
            message = first["msg"]

        return cls(field=field, message=message, errors=entries)


class ContentSupplyFailure(WordConnectError):
    """Neither the AI service nor the local word bank produced usable tiles."""


def format_location(loc: Any) -> str:
    """Render a pydantic error location as ``board.grid[0][1].kind``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path
