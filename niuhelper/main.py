from __future__ import annotations

import logging

from fastapi import FastAPI

from niuhelper.config import settings
from niuhelper.hand_evaluation import compare_hands, enumerate_candidates, evaluate
from niuhelper.schemas import (
    CandidatesResponse,
    CardView,
    EvaluatedHandView,
    EvaluateRequest,
    EvaluateResponse,
    SelectionRequest,
    SelectionResponse,
)
from niuhelper.selection import CardSelection
from niuhelper.validators import validate_evaluate_request, validate_selection_request

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_title, version=settings.app_version)


@app.get("/")
def root() -> dict[str, str]:
    return {
        "message": f"{settings.app_title} API",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/api/v1/evaluate", response_model=EvaluateResponse)
def evaluate_hand(req: EvaluateRequest) -> EvaluateResponse:
    cards = validate_evaluate_request(req)
    best = evaluate(cards)
    if best is None:
        return EvaluateResponse(status="no_niu", result=None, message="No valid 牛 formation.")
    return EvaluateResponse(
        status="ok",
        result=EvaluatedHandView.from_hand(best),
        message="Cards arranged to best hand.",
    )


@app.post("/api/v1/evaluate/candidates", response_model=CandidatesResponse)
def evaluate_candidates(req: EvaluateRequest) -> CandidatesResponse:
    cards = validate_evaluate_request(req)
    candidates = enumerate_candidates(cards)
    best = None
    best_index = None
    for idx, candidate in enumerate(candidates):
        chosen = compare_hands(best, candidate)
        if chosen is not best:
            best = chosen
            best_index = idx
    return CandidatesResponse(
        candidates=[EvaluatedHandView.from_hand(c) for c in candidates],
        best_index=best_index,
    )


@app.post("/api/v1/selection", response_model=SelectionResponse)
def replay_selection(req: SelectionRequest) -> SelectionResponse:
    card_types = validate_selection_request(req)
    selection = CardSelection()
    warnings: list[str] = []
    for card_type in card_types:
        updated = selection.add(card_type)
        if updated is selection:
            warnings.append(f"Card type {card_type} could not be added.")
        selection = updated

    best = selection.best_hand()
    logger.info(
        "niu_selection_replayed",
        extra={"count": len(selection), "skipped": len(warnings)},
    )
    return SelectionResponse(
        cards=[CardView.from_card(card) for card in selection.cards],
        count=len(selection),
        complete=selection.is_complete,
        status_message=selection.status_message(),
        available_card_types=selection.available_card_types(),
        result=EvaluatedHandView.from_hand(best) if best else None,
        warnings=warnings,
    )
