"""Classification and ranking keys for five card hands."""
import logging
from typing import NamedTuple, Optional, Sequence

from poker_hands.core.card import Card, Rank, RANK_VALUES
from poker_hands.evaluation.category import HandCategory

logger = logging.getLogger(__name__)

NUM_RANKS = len(RANK_VALUES)

# Ranks indexed by ordinal, lowest first
RANKS_ASCENDING = tuple(sorted(RANK_VALUES, key=RANK_VALUES.get))

# A-2-3-4-5 plays as the lowest straight: the ace counts as 1
WHEEL_SINGLES = (5, 4, 3, 2, 1)


class RankingKey(NamedTuple):
    """
    Total order key for a hand, compared field by field.

    Rank fields hold face values (2-14), or 0 when the hand has no such group.
    Pairs and singles are stored highest first.
    """
    category_severity: int
    four_rank: int = 0
    three_rank: int = 0
    pair_high: int = 0
    pair_low: int = 0
    single_5: int = 0
    single_4: int = 0
    single_3: int = 0
    single_2: int = 0
    single_1: int = 0


class HandProfile(NamedTuple):
    """Shape of a hand that decides its category."""
    distinct_count: int
    max_multiplicity: int
    is_flush: bool
    is_straight: bool
    is_wheel: bool


def rank_multiplicities(cards: Sequence[Card]) -> list[int]:
    """Count cards per rank in a 13 slot list indexed by rank ordinal."""
    counts = [0] * NUM_RANKS
    for card in cards:
        counts[card.rank.ordinal] += 1
    return counts


def distinct_ranks(counts: Sequence[int]) -> list[Rank]:
    """Ranks present in the hand, lowest first."""
    return [rank for rank in RANKS_ASCENDING if counts[rank.ordinal]]


def is_flush(cards: Sequence[Card]) -> bool:
    suit = cards[0].suit
    return all(card.suit == suit for card in cards)


def is_wheel(ranks: Sequence[Rank]) -> bool:
    """Whether sorted distinct ranks form A-2-3-4-5."""
    if len(ranks) != 5:
        return False
    return ranks[3] is Rank.FIVE and ranks[4] is Rank.ACE


def is_straight(ranks: Sequence[Rank]) -> bool:
    """Whether sorted distinct ranks form five consecutive values or the wheel."""
    if len(ranks) != 5:
        return False
    return ranks[4].numeric_value - ranks[0].numeric_value == 4 or is_wheel(ranks)


def profile_hand(cards: Sequence[Card], counts: Optional[Sequence[int]] = None) -> HandProfile:
    """Compute everything classification needs in a single pass."""
    if counts is None:
        counts = rank_multiplicities(cards)
    ranks = distinct_ranks(counts)
    return HandProfile(
        distinct_count=len(ranks),
        max_multiplicity=max(counts),
        is_flush=is_flush(cards),
        is_straight=is_straight(ranks),
        is_wheel=is_wheel(ranks),
    )


def classify(profile: HandProfile) -> HandCategory:
    """
    Map a hand profile to its category.

    Checks run from the strongest category down and the first match wins.
    """
    distinct = profile.distinct_count
    most = profile.max_multiplicity

    if profile.is_straight and profile.is_flush:
        return HandCategory.STRAIGHT_FLUSH
    elif distinct == 2 and most == 4:
        return HandCategory.FOUR_OF_A_KIND
    elif distinct == 2 and most == 3:
        return HandCategory.FULL_HOUSE
    elif profile.is_flush:
        return HandCategory.FLUSH
    elif profile.is_straight:
        return HandCategory.STRAIGHT
    elif distinct == 3 and most == 3:
        return HandCategory.THREE_OF_A_KIND
    elif distinct == 3 and most == 2:
        return HandCategory.TWO_PAIR
    elif distinct == 4:
        return HandCategory.PAIR
    else:
        return HandCategory.HIGH_CARD


def categorize(cards: Sequence[Card]) -> HandCategory:
    """Get the category of a five card hand."""
    return classify(profile_hand(cards))


def ranking_key(cards: Sequence[Card]) -> RankingKey:
    """
    Build the ordering key for a five card hand.

    Groups are read from the rank counts: the quad rank, the trip rank, the
    pairs and the singles, each highest first. Ranks seen any other number of
    times (only possible with duplicated cards) count as singles.
    """
    counts = rank_multiplicities(cards)
    profile = profile_hand(cards, counts)
    category = classify(profile)

    if profile.is_wheel:
        key = RankingKey(category.severity, 0, 0, 0, 0, *WHEEL_SINGLES)
        logger.debug("Wheel %s keyed as %s", category.display_name, key)
        return key

    four_rank = 0
    three_rank = 0
    pairs: list[int] = []
    singles: list[int] = []
    for rank in reversed(RANKS_ASCENDING):
        count = counts[rank.ordinal]
        if count == 0:
            continue
        if count == 4:
            four_rank = rank.numeric_value
        elif count == 3:
            three_rank = rank.numeric_value
        elif count == 2:
            pairs.append(rank.numeric_value)
        else:
            singles.append(rank.numeric_value)

    pairs = (pairs + [0, 0])[:2]
    singles = (singles + [0] * 5)[:5]

    key = RankingKey(category.severity, four_rank, three_rank, *pairs, *singles)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Classified %s as %s: %s", ' '.join(str(c) for c in cards), category.display_name, key)
    return key
