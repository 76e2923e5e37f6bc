import logging

from fastapi import HTTPException

from niuhelper.cards import Card
from niuhelper.hand_evaluation import HAND_SIZE
from niuhelper.schemas import EvaluateRequest, SelectionRequest
from niuhelper.selection import CARD_TYPES

logger = logging.getLogger(__name__)


def _reject(detail: str) -> HTTPException:
    logger.info("niu_request_rejected", extra={"detail": detail})
    return HTTPException(status_code=422, detail=detail)


def validate_card_code(code: str) -> Card:
    try:
        return Card.from_code(code)
    except ValueError as exc:
        raise _reject(f"Invalid card code: {code}") from exc


def validate_evaluate_request(req: EvaluateRequest) -> list[Card]:
    cards = [validate_card_code(code) for code in req.cards]
    if len(cards) != HAND_SIZE:
        raise _reject(f"A hand must contain exactly {HAND_SIZE} cards, got {len(cards)}")

    seen: set[str] = set()
    for card in cards:
        if card.card_id in seen:
            raise _reject(f"Card appears more than once in hand: {card.label}")
        seen.add(card.card_id)
    return cards


def validate_selection_request(req: SelectionRequest) -> list[str]:
    card_types = [card_type.strip().upper() for card_type in req.card_types]
    for card_type in card_types:
        if card_type not in CARD_TYPES:
            raise _reject(f"Invalid card type: {card_type}")
    return card_types
