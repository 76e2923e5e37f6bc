from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from niuhelper.cards import Card, Rank, Suit
from niuhelper.hand_evaluation import EvaluatedHand, HandCategory

CardCode = str


class CardView(BaseModel):
    id: str
    rank: Rank
    suit: Suit
    label: str

    @classmethod
    def from_card(cls, card: Card) -> CardView:
        return cls(id=card.card_id, rank=card.rank, suit=card.suit, label=card.label)


class EvaluatedHandView(BaseModel):
    category: Literal["PLAIN_NIU", "PAIR_HAND", "TOP_HAND"]
    category_rank: int
    pair_rank: int
    niu_value: int = Field(ge=1, le=10)
    title: str
    gold: bool
    top: list[CardView]
    bottom: list[CardView]

    @classmethod
    def from_hand(cls, hand: EvaluatedHand) -> EvaluatedHandView:
        return cls(
            category=HandCategory(hand.category).name,
            category_rank=int(hand.category),
            pair_rank=hand.pair_rank,
            niu_value=hand.niu_value,
            title=hand.title,
            gold=hand.is_gold,
            top=[CardView.from_card(card) for card in hand.top],
            bottom=[CardView.from_card(card) for card in hand.bottom],
        )


class EvaluateRequest(BaseModel):
    cards: list[CardCode]


class EvaluateResponse(BaseModel):
    status: Literal["ok", "no_niu"]
    result: EvaluatedHandView | None = None
    message: str


class CandidatesResponse(BaseModel):
    candidates: list[EvaluatedHandView] = Field(default_factory=list)
    best_index: int | None = None


class SelectionRequest(BaseModel):
    card_types: list[str] = Field(default_factory=list)


class SelectionResponse(BaseModel):
    cards: list[CardView]
    count: int
    complete: bool
    status_message: str
    available_card_types: list[str]
    result: EvaluatedHandView | None = None
    warnings: list[str] = Field(default_factory=list)
