"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

from .errors import InvalidCardLength, InvalidRank, InvalidSuit, NoRankFound, NoSuitFound


class Suit(Enum):
    """Card suits. Compared for equality only."""
    CLUBS = 'C'
    DIAMONDS = 'D'
    HEARTS = 'H'
    SPADES = 'S'

    def __str__(self) -> str:
        return self.value


@total_ordering
class Rank(Enum):
    """Card ranks, ordered by their numeric value."""
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = 'T'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    @property
    def numeric_value(self) -> int:
        """Face value used for ordering: Two is 2, Ace is 14."""
        return RANK_VALUES[self]

    @property
    def ordinal(self) -> int:
        """Zero-based slot of this rank, Two is 0 and Ace is 12."""
        return RANK_VALUES[self] - 2

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.numeric_value < other.numeric_value

    def __str__(self) -> str:
        return self.value


RANK_VALUES = {
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 11,
    Rank.QUEEN: 12,
    Rank.KING: 13,
    Rank.ACE: 14,
}

_RANKS_BY_CODE = {rank.value: rank for rank in Rank}
_SUITS_BY_CODE = {suit.value: suit for suit in Suit}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (clubs, diamonds, hearts, spades)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'AS' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    @classmethod
    def parse(cls, token: str, strict: bool = False) -> 'Card':
        """
        Create a Card from its two character code.

        Codes are case-sensitive: rank from '23456789TJQKA', suit from 'CDHS'.
        Characters past the second are ignored unless ``strict`` is set.

        Args:
            token: Card code such as 'AS' or 'TD'
            strict: Reject tokens longer than two characters

        Returns:
            Card instance

        Raises:
            NoRankFound: Token is empty
            InvalidRank: First character is not a rank code
            NoSuitFound: Token has a rank but no suit
            InvalidSuit: Second character is not a suit code
            InvalidCardLength: Token is longer than two characters in strict mode
        """
        if not token:
            raise NoRankFound(token)

        rank = _RANKS_BY_CODE.get(token[0])
        if rank is None:
            raise InvalidRank(token, f"unknown rank {token[0]!r}")

        if len(token) < 2:
            raise NoSuitFound(token)

        suit = _SUITS_BY_CODE.get(token[1])
        if suit is None:
            raise InvalidSuit(token, f"unknown suit {token[1]!r}")

        if strict and len(token) > 2:
            raise InvalidCardLength(token, f"expected 2 characters, got {len(token)}")

        return cls(rank=rank, suit=suit)
