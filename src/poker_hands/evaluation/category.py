"""Poker hand categories."""
from enum import Enum
from functools import total_ordering


@total_ordering
class HandCategory(Enum):
    """Hand categories from weakest to strongest."""
    HIGH_CARD = 'high_card'
    PAIR = 'pair'
    TWO_PAIR = 'two_pair'
    THREE_OF_A_KIND = 'three_of_a_kind'
    STRAIGHT = 'straight'
    FLUSH = 'flush'
    FULL_HOUSE = 'full_house'
    FOUR_OF_A_KIND = 'four_of_a_kind'
    STRAIGHT_FLUSH = 'straight_flush'

    @property
    def severity(self) -> int:
        """Strength of the category, 0 for High Card up to 8 for Straight Flush."""
        return CATEGORY_SEVERITY[self]

    @property
    def display_name(self) -> str:
        return CATEGORY_NAMES[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandCategory):
            return NotImplemented
        return self.severity < other.severity

    def __str__(self) -> str:
        return self.display_name


CATEGORY_SEVERITY = {
    HandCategory.HIGH_CARD: 0,
    HandCategory.PAIR: 1,
    HandCategory.TWO_PAIR: 2,
    HandCategory.THREE_OF_A_KIND: 3,
    HandCategory.STRAIGHT: 4,
    HandCategory.FLUSH: 5,
    HandCategory.FULL_HOUSE: 6,
    HandCategory.FOUR_OF_A_KIND: 7,
    HandCategory.STRAIGHT_FLUSH: 8,
}

CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: 'High Card',
    HandCategory.PAIR: 'Pair',
    HandCategory.TWO_PAIR: 'Two Pair',
    HandCategory.THREE_OF_A_KIND: 'Three of a Kind',
    HandCategory.STRAIGHT: 'Straight',
    HandCategory.FLUSH: 'Flush',
    HandCategory.FULL_HOUSE: 'Full House',
    HandCategory.FOUR_OF_A_KIND: 'Four of a Kind',
    HandCategory.STRAIGHT_FLUSH: 'Straight Flush',
}
