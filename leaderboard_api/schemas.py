"""
Pydantic schemas for the participant API.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, StrictInt


class CreateParticipantRequest(BaseModel):
    name: Optional[str] = None


class UpdateScoreRequest(BaseModel):
    score: Optional[StrictInt] = Field(default=None, ge=0)


class ParticipantResponse(BaseModel):
    id: str
    name: str
    score: int


class DeleteParticipantResponse(BaseModel):
    success: Literal[True] = True
    message: str = "Participant deleted successfully"
