from __future__ import annotations

from dataclasses import dataclass

from niuhelper.cards import ACE_OF_SPADES, Card, Rank, Suit
from niuhelper.hand_evaluation import HAND_SIZE, EvaluatedHand, evaluate

ACE_OF_SPADES_TYPE = "AS"
CARD_TYPES = [ACE_OF_SPADES_TYPE] + [rank.value for rank in Rank]


def suit_pool_for_rank(rank: Rank) -> list[Suit]:
    # The Ace of Spades is only reachable through its own card type.
    if rank == Rank.A:
        return [Suit.H, Suit.D, Suit.C]
    return [Suit.S, Suit.H, Suit.D, Suit.C]


def _rank_for_card_type(card_type: str) -> Rank:
    try:
        return Rank(card_type.upper())
    except ValueError as exc:
        raise ValueError(f"Unknown card type: {card_type}") from exc


@dataclass(frozen=True)
class CardSelection:
    """Cards picked so far for one hand. Every operation returns a new selection."""

    cards: tuple[Card, ...] = ()

    def __len__(self) -> int:
        return len(self.cards)

    @property
    def is_complete(self) -> bool:
        return len(self.cards) == HAND_SIZE

    def _next_card(self, card_type: str) -> Card | None:
        is_ace_of_spades = card_type.upper() == ACE_OF_SPADES_TYPE
        rank = Rank.A if is_ace_of_spades else _rank_for_card_type(card_type)
        if len(self.cards) >= HAND_SIZE:
            return None
        if is_ace_of_spades:
            return None if ACE_OF_SPADES in self.cards else ACE_OF_SPADES

        used_suits = {card.suit for card in self.cards if card.rank == rank}
        suit = next((s for s in suit_pool_for_rank(rank) if s not in used_suits), None)
        if suit is None:
            return None
        return Card(rank, suit)

    def can_add(self, card_type: str) -> bool:
        return self._next_card(card_type) is not None

    def add(self, card_type: str) -> CardSelection:
        card = self._next_card(card_type)
        if card is None:
            return self
        return CardSelection(self.cards + (card,))

    def undo(self) -> CardSelection:
        return CardSelection(self.cards[:-1])

    def remove(self, card_id: str) -> CardSelection:
        return CardSelection(tuple(card for card in self.cards if card.card_id != card_id))

    def clear(self) -> CardSelection:
        return CardSelection()

    def available_card_types(self) -> list[str]:
        return [card_type for card_type in CARD_TYPES if self.can_add(card_type)]

    def best_hand(self) -> EvaluatedHand | None:
        if not self.is_complete:
            return None
        return evaluate(self.cards)

    def status_message(self) -> str:
        count = len(self.cards)
        if count < HAND_SIZE:
            return f"{count}/{HAND_SIZE} selected. Choose {HAND_SIZE - count} more card(s)."
        if self.best_hand():
            return f"{HAND_SIZE}/{HAND_SIZE} selected. Cards arranged to best hand."
        return f"{HAND_SIZE}/{HAND_SIZE} selected. No valid 牛 formation."
