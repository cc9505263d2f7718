"""Five card poker hand evaluation package."""

from poker_hands.core.card import Card, Rank, Suit
from poker_hands.core.errors import (
    InvalidCardLength,
    InvalidRank,
    InvalidSuit,
    NoRankFound,
    NoSuitFound,
    ParseError,
    WrongLength,
)
from poker_hands.core.hand import Hand
from poker_hands.evaluation.category import HandCategory
from poker_hands.evaluation.ranking import RankingKey

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Hand",
    "HandCategory",
    "RankingKey",
    "ParseError",
    "NoRankFound",
    "InvalidRank",
    "NoSuitFound",
    "InvalidSuit",
    "InvalidCardLength",
    "WrongLength",
]
