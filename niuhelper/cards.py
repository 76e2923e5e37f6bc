from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class Suit(str, Enum):
    S = "S"
    H = "H"
    D = "D"
    C = "C"

    @property
    def symbol(self) -> str:
        return {"S": "♠", "H": "♥", "D": "♦", "C": "♣"}[self.value]


class Rank(str, Enum):
    A = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    J = "J"
    Q = "Q"
    K = "K"


FACE_RANKS = {Rank.J, Rank.Q, Rank.K}
TEN_VALUE_RANKS = {Rank.TEN, Rank.J, Rank.Q, Rank.K}
DUAL_VALUE_RANKS = {Rank.THREE, Rank.SIX}

CARD_CODE_RE = re.compile(r"^(A|[2-9]|10|T|J|Q|K)-?([SHDC♠♥♦♣])$")
_SUIT_ALIASES = {"♠": Suit.S, "♥": Suit.H, "♦": Suit.D, "♣": Suit.C}


def rank_numeric(rank: Rank) -> int:
    if rank == Rank.A:
        return 1
    if rank in FACE_RANKS:
        return {Rank.J: 11, Rank.Q: 12, Rank.K: 13}[rank]
    return int(rank.value)


def card_point_options(card: Card) -> tuple[int, ...]:
    """Point values a card may count for; 3 and 6 can stand in for each other."""
    if card.rank == Rank.A:
        return (1,)
    if card.rank in TEN_VALUE_RANKS:
        return (10,)
    if card.rank in DUAL_VALUE_RANKS:
        return (3, 6)
    return (int(card.rank.value),)


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    @property
    def card_id(self) -> str:
        return f"{self.rank.value}-{self.suit.value}"

    @property
    def is_ace_of_spades(self) -> bool:
        return self.rank == Rank.A and self.suit == Suit.S

    @property
    def is_face(self) -> bool:
        return self.rank in FACE_RANKS

    @property
    def label(self) -> str:
        if self.is_ace_of_spades:
            return "A♠"
        return f"{self.rank.value}{self.suit.symbol}"

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_code(cls, code: str) -> Card:
        """Parse codes such as 'AS', 'A-S', '10h', 'Td' or 'K♥'."""
        match = CARD_CODE_RE.fullmatch(code.strip().upper())
        if not match:
            raise ValueError(f"Invalid card code: {code}")
        rank_str, suit_str = match.groups()
        if rank_str == "T":
            rank_str = "10"
        suit = _SUIT_ALIASES.get(suit_str) or Suit(suit_str)
        return cls(Rank(rank_str), suit)


ACE_OF_SPADES = Card(Rank.A, Suit.S)


def parse_cards(codes: list[str]) -> list[Card]:
    return [Card.from_code(code) for code in codes]
