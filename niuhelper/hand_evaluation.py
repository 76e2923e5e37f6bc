from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations, product
from typing import Sequence

from niuhelper.cards import Card, card_point_options, rank_numeric

logger = logging.getLogger(__name__)

HAND_SIZE = 5
BOTTOM_SIZE = 3


class HandCategory(IntEnum):
    PLAIN_NIU = 1
    PAIR_HAND = 2
    TOP_HAND = 3


@dataclass(frozen=True)
class EvaluatedHand:
    category: HandCategory
    pair_rank: int
    niu_value: int
    top: tuple[Card, ...]
    bottom: tuple[Card, ...]

    @property
    def title(self) -> str:
        if self.category == HandCategory.TOP_HAND:
            return "Top Hand (A♠ + J/Q/K)"
        if self.category == HandCategory.PAIR_HAND:
            rank = self.top[0].rank.value
            return f"Pair Hand ({rank}{rank})"
        if self.niu_value == 10:
            return "Niu Niu"
        return f"Niu {self.niu_value}"

    @property
    def is_gold(self) -> bool:
        return self.category != HandCategory.PLAIN_NIU or self.niu_value == 10

    def sort_key(self) -> tuple[int, int, int]:
        return (int(self.category), self.pair_rank, self.niu_value)


def all_sums(cards: Sequence[Card]) -> list[int]:
    """Every achievable total, one per choice of value for each dual-valued card."""
    return [sum(values) for values in product(*(card_point_options(card) for card in cards))]


def bottom_is_valid(cards: Sequence[Card]) -> bool:
    return any(total % 10 == 0 for total in all_sums(cards))


def best_niu_from_top(cards: Sequence[Card]) -> int:
    return max(total % 10 or 10 for total in all_sums(cards))


def is_top_hand(cards: Sequence[Card]) -> bool:
    if len(cards) != 2:
        return False
    return any(card.is_ace_of_spades for card in cards) and any(card.is_face for card in cards)


def is_pair(cards: Sequence[Card]) -> bool:
    return cards[0].rank == cards[1].rank and cards[0].suit != cards[1].suit


def compare_hands(a: EvaluatedHand | None, b: EvaluatedHand) -> EvaluatedHand:
    """Return the better of two candidates; ``a`` is kept on an exact tie."""
    if a is None:
        return b
    return b if b.sort_key() > a.sort_key() else a


def _evaluate_partition(top: tuple[Card, ...], bottom: tuple[Card, ...]) -> EvaluatedHand:
    top_hand = is_top_hand(top)
    pair = is_pair(top)
    if top_hand:
        category = HandCategory.TOP_HAND
    elif pair:
        category = HandCategory.PAIR_HAND
    else:
        category = HandCategory.PLAIN_NIU
    return EvaluatedHand(
        category=category,
        pair_rank=rank_numeric(top[0].rank) if pair else 0,
        niu_value=best_niu_from_top(top),
        top=top,
        bottom=bottom,
    )


def enumerate_candidates(hand: Sequence[Card]) -> list[EvaluatedHand]:
    """All valid bottom/top splits, bottom index triples in ascending order."""
    if len(hand) != HAND_SIZE:
        return []

    candidates: list[EvaluatedHand] = []
    for bottom_idx in combinations(range(HAND_SIZE), BOTTOM_SIZE):
        bottom = tuple(hand[i] for i in bottom_idx)
        if not bottom_is_valid(bottom):
            continue
        top = tuple(hand[i] for i in range(HAND_SIZE) if i not in bottom_idx)
        candidates.append(_evaluate_partition(top, bottom))
    return candidates


def evaluate(hand: Sequence[Card]) -> EvaluatedHand | None:
    """5 cards -> best arrangement, or None when no bottom sums to a multiple of 10."""
    if len(hand) != HAND_SIZE:
        return None

    candidates = enumerate_candidates(hand)
    best: EvaluatedHand | None = None
    for candidate in candidates:
        best = compare_hands(best, candidate)

    logger.debug(
        "niu_hand_evaluated",
        extra={
            "cards": [card.card_id for card in hand],
            "candidates": len(candidates),
            "category": best.category.name if best else None,
        },
    )
    return best
