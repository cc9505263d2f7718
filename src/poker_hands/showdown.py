"""Line oriented showdowns: pick the winning hand(s) among several."""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from poker_hands.core.errors import ParseError
from poker_hands.core.hand import Hand
from poker_hands.evaluation.category import HandCategory

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "|"


class ErrorPolicy(str, Enum):
    """What to do with a line whose hands fail to parse."""
    SKIP = 'skip'      # Log it and move on
    REPORT = 'report'  # Emit an error outcome in place of a result
    ABORT = 'abort'    # Stop the run by raising LineError


class LineError(ValueError):
    """
    A line of input could not be evaluated.

    Attributes:
        line_number: 1-based position of the line in the input
        line: The offending line
        cause: The parse error raised for it
    """

    def __init__(self, line_number: int, line: str, cause: ParseError):
        self.line_number = line_number
        self.line = line
        self.cause = cause
        super().__init__(f"Line {line_number}: {cause}")


@dataclass
class ShowdownResult:
    """The hands on one line and the ones that won."""

    line: str
    hands: list[Hand]
    winners: list[Hand]  # Every hand tied for best, in input order
    category: HandCategory

    @property
    def split(self) -> bool:
        """Whether more than one hand shares the win."""
        return len(self.winners) > 1

    def format(self) -> str:
        """Render as '<line>, Winner: <hand>[, <hand>...], Rank: <category>'."""
        winners = ", ".join(str(hand) for hand in self.winners)
        return f"{self.line}, Winner: {winners}, Rank: {self.category.display_name}"

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "line": self.line,
            "hands": [str(hand) for hand in self.hands],
            "winners": [str(hand) for hand in self.winners],
            "category": self.category.display_name,
            "split": self.split,
        }


@dataclass
class ShowdownOutcome:
    """Result or error for a single input line."""

    line_number: int
    line: str
    result: ShowdownResult | None = None
    error: LineError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def format(self) -> str:
        if self.result is not None:
            return self.result.format()
        return f"{self.line}, Error: {self.error.cause}"

    def to_json(self) -> dict:
        data = {"line_number": self.line_number, "line": self.line}
        if self.result is not None:
            data.update(self.result.to_json())
        else:
            data["error"] = str(self.error.cause)
            data["error_type"] = type(self.error.cause).__name__
        return data


def split_hands(line: str, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """Split a line into hand strings, trimming whitespace around each."""
    return [part.strip() for part in line.split(separator)]


def evaluate_line(line: str, strict: bool = False, separator: str = DEFAULT_SEPARATOR) -> ShowdownResult:
    """
    Parse every hand on a line and find the winner(s).

    Args:
        line: Hands separated by ``separator``, e.g. "2C 3C 6C 9C AC|KD AS 2C 6D QS"
        strict: Reject card tokens longer than two characters
        separator: Character between hands

    Returns:
        ShowdownResult with all hands tied for best as winners

    Raises:
        ParseError: If any hand on the line is malformed
    """
    hands = [Hand.parse(text, strict=strict) for text in split_hands(line, separator)]
    best = max(hands)
    winners = [hand for hand in hands if hand == best]
    category = best.category()

    if len(winners) > 1:
        logger.debug(f"Split between {len(winners)} hands with {category.display_name}")
    else:
        logger.debug(f"{best} wins with {category.display_name}")

    return ShowdownResult(line=line, hands=hands, winners=winners, category=category)


def run_showdown(
    lines: Iterable[str],
    on_error: ErrorPolicy = ErrorPolicy.REPORT,
    strict: bool = False,
    separator: str = DEFAULT_SEPARATOR,
) -> Iterator[ShowdownOutcome]:
    """
    Evaluate each non-blank line of input.

    Args:
        lines: Input lines, trailing newlines allowed
        on_error: Policy for lines that fail to parse
        strict: Reject card tokens longer than two characters
        separator: Character between hands on a line

    Yields:
        One ShowdownOutcome per evaluated (or reported) line

    Raises:
        LineError: First bad line when ``on_error`` is ABORT
    """
    on_error = ErrorPolicy(on_error)
    evaluated = 0
    failed = 0

    for line_number, raw in enumerate(lines, 1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        try:
            result = evaluate_line(line, strict=strict, separator=separator)
        except ParseError as e:
            failed += 1
            error = LineError(line_number, line, e)
            if on_error is ErrorPolicy.ABORT:
                logger.error(f"Aborting at line {line_number}: {e}")
                raise error from e
            logger.warning(f"Could not evaluate line {line_number} '{line}': {e}")
            if on_error is ErrorPolicy.REPORT:
                yield ShowdownOutcome(line_number=line_number, line=line, error=error)
            continue

        evaluated += 1
        yield ShowdownOutcome(line_number=line_number, line=line, result=result)

    logger.info(f"Showdown finished: {evaluated} lines evaluated, {failed} failed")
