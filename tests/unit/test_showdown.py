"""Tests for line oriented showdowns."""
import pytest

from poker_hands.core.errors import InvalidCardLength, InvalidSuit, WrongLength
from poker_hands.evaluation.category import HandCategory
from poker_hands.showdown import (
    ErrorPolicy, LineError, evaluate_line, run_showdown, split_hands
)


@pytest.fixture
def input_lines():
    """A mix of good, blank and malformed lines."""
    return [
        "2C 3C 6C 9C AC|KD AS 2C 6D QS\n",
        "\n",
        "2C 3C 6C 9C|KD AS 2C 6D QS\n",
        "2C 3D 6H 9S AC|2D 3H 6S 9C AD\n",
    ]


def test_split_hands():
    assert split_hands("2C 3C 6C 9C AC|KD AS 2C 6D QS") == ["2C 3C 6C 9C AC", "KD AS 2C 6D QS"]
    assert split_hands("2C 3C 6C 9C AC | KD AS 2C 6D QS ") == ["2C 3C 6C 9C AC", "KD AS 2C 6D QS"]
    assert split_hands("2C 3C 6C 9C AC;KD AS 2C 6D QS", ";") == ["2C 3C 6C 9C AC", "KD AS 2C 6D QS"]


def test_single_winner():
    result = evaluate_line("2C 3C 6C 9C AC|KD AS 2C 6D QS")
    assert [str(h) for h in result.winners] == ["2C 3C 6C 9C AC"]
    assert result.category == HandCategory.FLUSH
    assert not result.split
    assert result.format() == "2C 3C 6C 9C AC|KD AS 2C 6D QS, Winner: 2C 3C 6C 9C AC, Rank: Flush"


def test_tied_hands_are_all_winners():
    line = "2C 3D 6H 9S AC|KD 2S 3C 6D 9C|2D 3H 6S 9C AD"
    result = evaluate_line(line)
    assert result.split
    assert [str(h) for h in result.winners] == ["2C 3D 6H 9S AC", "2D 3H 6S 9C AD"]
    assert result.format() == f"{line}, Winner: 2C 3D 6H 9S AC, 2D 3H 6S 9C AD, Rank: High Card"


def test_single_hand_line():
    result = evaluate_line("5C 5S KC 5D KS")
    assert result.winners == result.hands
    assert result.format() == "5C 5S KC 5D KS, Winner: 5C 5S KC 5D KS, Rank: Full House"


def test_wheel_loses_to_six_high_straight():
    result = evaluate_line("AC 2D 3H 4S 5C|6C 2D 3H 4S 5C")
    assert [str(h) for h in result.winners] == ["6C 2D 3H 4S 5C"]
    assert result.category == HandCategory.STRAIGHT


def test_evaluate_line_propagates_parse_errors():
    with pytest.raises(WrongLength):
        evaluate_line("2C 3C 6C 9C|KD AS 2C 6D QS")
    with pytest.raises(InvalidSuit):
        evaluate_line("2C 3C 6C 9C AX|KD AS 2C 6D QS")


def test_evaluate_line_strict():
    assert evaluate_line("2CC 3C 6C 9C AC").category == HandCategory.FLUSH
    with pytest.raises(InvalidCardLength):
        evaluate_line("2CC 3C 6C 9C AC", strict=True)


def test_to_json():
    data = evaluate_line("2C 3C 6C 9C AC|KD AS 2C 6D QS").to_json()
    assert data == {
        "line": "2C 3C 6C 9C AC|KD AS 2C 6D QS",
        "hands": ["2C 3C 6C 9C AC", "KD AS 2C 6D QS"],
        "winners": ["2C 3C 6C 9C AC"],
        "category": "Flush",
        "split": False,
    }


def test_run_showdown_reports_errors(input_lines):
    outcomes = list(run_showdown(input_lines))
    assert len(outcomes) == 3
    assert [o.line_number for o in outcomes] == [1, 3, 4]
    assert [o.ok for o in outcomes] == [True, False, True]

    bad = outcomes[1]
    assert isinstance(bad.error, LineError)
    assert isinstance(bad.error.cause, WrongLength)
    assert bad.format().startswith("2C 3C 6C 9C|KD AS 2C 6D QS, Error: Wrong Length")
    assert bad.to_json()["error_type"] == "WrongLength"

    assert outcomes[2].result.split


def test_run_showdown_skips_errors(input_lines):
    outcomes = list(run_showdown(input_lines, on_error=ErrorPolicy.SKIP))
    assert [o.line_number for o in outcomes] == [1, 4]
    assert all(o.ok for o in outcomes)


def test_run_showdown_aborts(input_lines):
    outcomes = run_showdown(input_lines, on_error="abort")
    first = next(outcomes)
    assert first.ok
    with pytest.raises(LineError) as exc_info:
        next(outcomes)
    assert exc_info.value.line_number == 3
    assert isinstance(exc_info.value.cause, WrongLength)
    assert str(exc_info.value).startswith("Line 3:")


def test_run_showdown_custom_separator():
    outcomes = list(run_showdown(["5C 5S KC 5D 5H;5C 5S KC 5D KS"], separator=";"))
    assert outcomes[0].result.category == HandCategory.FOUR_OF_A_KIND


def test_run_showdown_rejects_unknown_policy():
    with pytest.raises(ValueError):
        list(run_showdown([], on_error="ignore"))
