"""
HTTP routes for the participant API.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from leaderboard_api.db import DbClient, DbError
from leaderboard_api.dependencies import get_db_client
from leaderboard_api.schemas import (
    CreateParticipantRequest,
    DeleteParticipantResponse,
    ParticipantResponse,
    UpdateScoreRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(participant) -> ParticipantResponse:
    return ParticipantResponse(
        id=participant.id, name=participant.name, score=participant.score
    )


@router.get("/participants", response_model=list[ParticipantResponse])
def list_participants(db: DbClient = Depends(get_db_client)):
    """
    All participants, highest score first.
    """
    try:
        participants = db.list_participants()
    except DbError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return [_to_response(p) for p in participants]


@router.post("/participants", response_model=ParticipantResponse)
def create_participant(
    payload: CreateParticipantRequest, db: DbClient = Depends(get_db_client)
):
    name = (payload.name or "").strip()
    if not name:
        raise HTTPException(status_code=400, detail="Participant name is required")
    try:
        participant = db.create_participant(name)
    except DbError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    logger.info("Created participant %s (%s)", participant.id, participant.name)
    return _to_response(participant)


@router.put("/participants", include_in_schema=False)
@router.delete("/participants", include_in_schema=False)
def missing_participant_id():
    raise HTTPException(status_code=400, detail="Participant ID is required")


@router.put("/participants/{participant_id}", response_model=ParticipantResponse)
def update_score(
    participant_id: str,
    payload: UpdateScoreRequest,
    db: DbClient = Depends(get_db_client),
):
    """
    Replaces the participant's score. The new value is computed by the caller.
    """
    if not participant_id.strip():
        raise HTTPException(status_code=400, detail="Participant ID is required")
    if payload.score is None:
        raise HTTPException(status_code=400, detail="Valid score is required")
    try:
        participant = db.update_score(participant_id, payload.score)
    except DbError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    if not participant:
        raise HTTPException(status_code=404, detail="Participant not found")
    return _to_response(participant)


@router.delete(
    "/participants/{participant_id}", response_model=DeleteParticipantResponse
)
def delete_participant(participant_id: str, db: DbClient = Depends(get_db_client)):
    if not participant_id.strip():
        raise HTTPException(status_code=400, detail="Participant ID is required")
    try:
        deleted = db.delete_participant(participant_id)
    except DbError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    if not deleted:
        raise HTTPException(status_code=404, detail="Participant not found")
    logger.info("Deleted participant %s", participant_id)
    return DeleteParticipantResponse()
