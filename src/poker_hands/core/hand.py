"""Five card poker hand."""

import logging
from functools import total_ordering
from typing import Iterable

from poker_hands.evaluation.category import HandCategory
from poker_hands.evaluation.ranking import RankingKey, categorize, ranking_key

from .card import Card
from .errors import WrongLength

logger = logging.getLogger(__name__)

HAND_SIZE = 5


@total_ordering
class Hand:
    """
    An immutable five card poker hand.

    Hands are ordered by category first and then by the ranks that break ties
    inside a category. Two hands with equal keys are equal, even when their
    cards differ (for example the same flush pattern in different suits).

    Attributes:
        cards: The five cards, in the order they were given
    """

    __slots__ = ('_cards', '_key')

    def __init__(self, cards: Iterable[Card]):
        """
        Initialize a hand.

        Raises:
            WrongLength: If not given exactly five cards
        """
        cards = tuple(cards)
        if len(cards) != HAND_SIZE:
            raise WrongLength(
                ' '.join(str(c) for c in cards),
                f"expected {HAND_SIZE} cards, got {len(cards)}",
            )
        self._cards = cards
        self._key = ranking_key(cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        return self._cards

    @classmethod
    def parse(cls, text: str, strict: bool = False) -> 'Hand':
        """
        Create a Hand from space separated card codes.

        Args:
            text: Hand string such as "2C 3C 6C 9C AC"
            strict: Reject card tokens longer than two characters

        Returns:
            Hand with the cards in their original order

        Raises:
            ParseError: The first card token that fails to parse
            WrongLength: Every token parsed but there were not five of them
        """
        cards = [Card.parse(token, strict=strict) for token in text.split(' ')]

        if len(cards) != HAND_SIZE:
            raise WrongLength(text, f"expected {HAND_SIZE} cards, got {len(cards)}")

        hand = cls(cards)
        logger.debug(f"Parsed hand '{text}': {hand}")
        return hand

    def category(self) -> HandCategory:
        """Get the poker category of this hand."""
        return categorize(self._cards)

    def tiebreak_value(self) -> RankingKey:
        """Get the key this hand is ordered by."""
        return self._key

    @property
    def key(self) -> RankingKey:
        return self._key

    def display_name(self) -> str:
        """Human readable name of this hand's category, e.g. 'Full House'."""
        return self.category().display_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(self._cards)

    def __str__(self) -> str:
        """Cards separated by spaces, e.g. 'AS KD 2C 2H 9S'."""
        return ' '.join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"Hand('{self}')"
