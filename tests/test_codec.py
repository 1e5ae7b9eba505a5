"""Tests for session state serialization."""

import json

import pytest

from src.engine import (
    MalformedInput,
    SelectedPosition,
    SessionState,
    StateValidationError,
    create_session_config,
    deserialize,
    serialize,
    states_equal,
)
from src.engine.models import Score, Tile

from .helpers import snapshot_from


def make_state(**overrides) -> SessionState:
    fields = dict(
        config=create_session_config("zh", "easy", "learning"),
        board=snapshot_from(["A.", "#a"]),
        score=Score(correct=3, wrong=1),
        elapsed_seconds=12.5,
        selected_position=None,
        is_complete=False,
    )
    fields.update(overrides)
    return SessionState(**fields)


def state_dict(**overrides) -> dict:
    data = json.loads(serialize(make_state()))
    data.update(overrides)
    return data


class TestSerialize:
    """Wire form of a session state."""

    def test_top_level_keys(self):
        data = json.loads(serialize(make_state()))
        assert set(data) == {"config", "board", "score", "elapsedSeconds", "selectedPosition", "isComplete"}

    def test_config_keys(self):
        config = json.loads(serialize(make_state()))["config"]
        assert config == {
            "languageMode": "zh",
            "difficultyLevel": "easy",
            "theme": "learning",
            "boardSize": {"rows": 4, "cols": 4},
        }

    def test_grid_cells(self):
        grid = json.loads(serialize(make_state()))["board"]["grid"]
        assert grid[0][1] is None
        assert grid[0][0]["kind"] == "Word"
        assert grid[0][0]["pairId"] == "A"
        assert "confuse" not in grid[0][0]

    def test_confuse_written_when_present(self):
        tile = Tile(id="t1", word="w", meaning="m", hint="h", confuse="c", kind="Meaning", pair_id="p")
        assert json.loads(tile.model_dump_json(by_alias=True))["confuse"] == "c"

    def test_selected_position_null(self):
        assert json.loads(serialize(make_state()))["selectedPosition"] is None


class TestRoundTrip:
    """deserialize(serialize(s)) equals s."""

    def test_plain_state(self):
        state = make_state()
        restored = deserialize(serialize(state))
        assert states_equal(state, restored)
        assert restored == state

    def test_with_selection_and_completion(self):
        state = make_state(
            board=snapshot_from(["..", ".."]),
            selected_position=SelectedPosition(row=1, col=0),
            is_complete=True,
        )
        restored = deserialize(serialize(state))
        assert restored.selected_position == SelectedPosition(row=1, col=0)
        assert restored.is_complete is True
        assert states_equal(state, restored)

    def test_with_confuse(self):
        tile = Tile(id="t1", word="w", meaning="m", hint="h", confuse="c", kind="Word", pair_id="p")
        twin = tile.model_copy(update={"id": "t2", "kind": "Meaning"})
        board = make_state().board.model_copy(update={"grid": ((tile, None), (None, twin))})
        state = make_state(board=board)

        restored = deserialize(serialize(state))
        assert restored.board.grid[0][0].confuse == "c"
        assert states_equal(state, restored)

    def test_bytes_input(self):
        state = make_state()
        assert states_equal(deserialize(serialize(state).encode("utf-8")), state)

    def test_states_equal_detects_cell_difference(self):
        first = make_state()
        second = make_state(board=snapshot_from(["A.", "#."]))
        assert not states_equal(first, second)

    def test_null_confuse_is_absent(self):
        data = state_dict()
        data["board"]["grid"][0][0]["confuse"] = None
        restored = deserialize(json.dumps(data))
        assert restored.board.grid[0][0].confuse is None


class TestMalformedInput:
    """Text that is not a JSON object."""

    @pytest.mark.parametrize("text", ["", "{", "not json", "{'a': 1}"])
    def test_invalid_json(self, text):
        with pytest.raises(MalformedInput):
            deserialize(text)

    @pytest.mark.parametrize("text", ["[]", "1", "\"state\"", "null"])
    def test_not_an_object(self, text):
        with pytest.raises(MalformedInput):
            deserialize(text)

    def test_deeply_nested_array(self):
        with pytest.raises(MalformedInput):
            deserialize("[" * 100000 + "]" * 100000)

    def test_oversized_integer_literal(self):
        """Integer literals past the interpreter's digit limit are not parseable."""
        with pytest.raises(MalformedInput):
            deserialize('{"a": ' + "9" * 5000 + "}")


class TestFieldValidation:
    """Missing or invalid fields name the offending path."""

    def restore_error(self, data) -> StateValidationError:
        with pytest.raises(StateValidationError) as exc_info:
            deserialize(json.dumps(data))
        return exc_info.value

    def test_grid_row_count_mismatch(self):
        """A board declaring 2 rows with a grid holding only 1."""
        data = state_dict()
        data["board"]["grid"] = data["board"]["grid"][:1]

        error = self.restore_error(data)
        assert error.field == "board"
        assert "grid must have 2 rows (found 1)" in str(error)

    def test_grid_column_count_mismatch(self):
        data = state_dict()
        data["board"]["grid"][1] = data["board"]["grid"][1][:1]

        error = self.restore_error(data)
        assert error.field == "board"
        assert "grid[1] must have 2 columns" in str(error)

    @pytest.mark.parametrize("key", ["config", "board", "score", "elapsedSeconds", "selectedPosition", "isComplete"])
    def test_missing_top_level_field(self, key):
        data = state_dict()
        del data[key]
        assert self.restore_error(data).field == key

    def test_unknown_difficulty(self):
        data = state_dict()
        data["config"]["difficultyLevel"] = "impossible"
        assert self.restore_error(data).field == "config.difficultyLevel"

    def test_unknown_language(self):
        data = state_dict()
        data["config"]["languageMode"] = "fr"
        assert self.restore_error(data).field == "config.languageMode"

    def test_empty_theme(self):
        data = state_dict()
        data["config"]["theme"] = ""
        assert self.restore_error(data).field == "config.theme"

    @pytest.mark.parametrize("value", [0, -2, "4", 2.5])
    def test_bad_board_size(self, value):
        data = state_dict()
        data["config"]["boardSize"]["rows"] = value
        assert self.restore_error(data).field == "config.boardSize.rows"

    def test_bad_tile_kind(self):
        data = state_dict()
        data["board"]["grid"][0][0]["kind"] = "Definition"
        assert self.restore_error(data).field == "board.grid[0][0].kind"

    def test_tile_missing_pair_id(self):
        data = state_dict()
        del data["board"]["grid"][1][1]["pairId"]
        assert self.restore_error(data).field == "board.grid[1][1].pairId"

    @pytest.mark.parametrize("value", [-1, "3", 1.5, True])
    def test_bad_score(self, value):
        data = state_dict()
        data["score"]["wrong"] = value
        assert self.restore_error(data).field == "score.wrong"

    @pytest.mark.parametrize("value", [-0.5, "12", True, None])
    def test_bad_elapsed(self, value):
        data = state_dict(elapsedSeconds=value)
        assert self.restore_error(data).field == "elapsedSeconds"

    def test_elapsed_too_large_for_float(self):
        error = self.restore_error(state_dict(elapsedSeconds=10 ** 400))
        assert error.field == "elapsedSeconds"
        assert "finite" in str(error)

    def test_integer_elapsed_accepted(self):
        assert deserialize(json.dumps(state_dict(elapsedSeconds=7))).elapsed_seconds == 7

    @pytest.mark.parametrize("value", ["yes", 1, None])
    def test_bad_is_complete(self, value):
        data = state_dict(isComplete=value)
        assert self.restore_error(data).field == "isComplete"

    def test_bad_selected_position(self):
        data = state_dict(selectedPosition={"row": -1, "col": 0})
        assert self.restore_error(data).field == "selectedPosition.row"

    def test_error_is_value_error(self):
        data = state_dict()
        del data["score"]
        with pytest.raises(ValueError):
            deserialize(json.dumps(data))
