import pytest

from helm.api.ai import create_blackboard


def test_put_get_take() -> None:
    board = create_blackboard()
    board.put(" target ", (1, 2))
    assert "target" in board
    assert len(board) == 1
    assert board.get("target") == (1, 2)
    assert board.require("target") == (1, 2)
    assert board.take("target") == (1, 2)
    assert "target" not in board
    assert board.get("target", "fallback") == "fallback"


def test_none_is_a_stored_value() -> None:
    board = create_blackboard()
    board.put("last_result", None)
    assert "last_result" in board
    assert board.require("last_result") is None


def test_missing_keys_raise_key_error() -> None:
    board = create_blackboard()
    with pytest.raises(KeyError):
        board.require("missing")
    with pytest.raises(KeyError):
        board.take("missing")
    board.discard("missing")


def test_empty_key_is_rejected() -> None:
    board = create_blackboard()
    with pytest.raises(ValueError):
        board.put("   ", 1)
    assert 3 not in board


def test_snapshot_is_deep_copy() -> None:
    board = create_blackboard()
    board.put("history", [1, 2])
    snapshot = board.snapshot()
    snapshot["history"].append(3)
    assert board.get("history") == [1, 2]
