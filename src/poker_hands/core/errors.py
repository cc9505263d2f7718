"""Errors raised while parsing cards and hands."""


class ParseError(ValueError):
    """
    Base class for card and hand parse failures.

    Attributes:
        text: The token or hand text that failed to parse
    """

    message = "Parse error"

    def __init__(self, text: str, detail: str = ""):
        self.text = text
        self.detail = detail
        suffix = f": {detail}" if detail else ""
        super().__init__(f"{self.message} in {text!r}{suffix}")


class NoRankFound(ParseError):
    """Card token was empty."""
    message = "No Rank Found"


class InvalidRank(ParseError):
    """First character of a card token is not a rank code."""
    message = "Invalid Rank"


class NoSuitFound(ParseError):
    """Card token had a rank but nothing after it."""
    message = "No Suit Found"


class InvalidSuit(ParseError):
    """Second character of a card token is not a suit code."""
    message = "Invalid Suit"


class InvalidCardLength(ParseError):
    """Card token longer than two characters (strict parsing only)."""
    message = "Invalid Card Length"


class WrongLength(ParseError):
    """Hand text did not contain exactly five cards."""
    message = "Wrong Length"
