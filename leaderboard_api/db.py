"""
Database abstraction for SQL backends and an in-memory test implementation.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Dict, Optional, Protocol

from sqlalchemy import Column, Float, Integer, String, create_engine, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from shared.ranking import rank
from shared.types import Participant

logger = logging.getLogger(__name__)


class DbError(Exception):
    """Raised when the underlying store fails to serve a request."""


class DbClient(Protocol):
    """Interface for participant persistence."""

    def list_participants(self) -> list[Participant]:
        ...

    def create_participant(self, name: str) -> Participant:
        ...

    def update_score(self, participant_id: str, score: int) -> Optional[Participant]:
        ...

    def delete_participant(self, participant_id: str) -> bool:
        ...


class InMemoryDbClient:
    """Simple in-memory database for development and tests."""

    def __init__(self):
        self.participants: Dict[str, Participant] = {}

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        self.participants.clear()

    def list_participants(self) -> list[Participant]:
        # Dict order is insertion order, so ties rank oldest first like the SQL client.
        return [
            Participant(id=p.id, name=p.name, score=p.score)
            for p in rank(self.participants.values())
        ]

    def create_participant(self, name: str) -> Participant:
        record = Participant(id=uuid.uuid4().hex, name=name, score=0)
        self.participants[record.id] = record
        return Participant(id=record.id, name=record.name, score=record.score)

    def update_score(self, participant_id: str, score: int) -> Optional[Participant]:
        record = self.participants.get(participant_id)
        if not record:
            return None
        record.score = score
        return Participant(id=record.id, name=record.name, score=record.score)

    def delete_participant(self, participant_id: str) -> bool:
        return self.participants.pop(participant_id, None) is not None


class SqlDbClient:
    """
    SQLAlchemy-backed implementation. Accepts any SQLAlchemy URL (e.g., Postgres or SQLite for tests).
    """

    def __init__(self, database_url: str):
        if not database_url:
            raise ValueError("DATABASE_URL is required for SqlDbClient")
        self.engine = create_engine(
            database_url,
            future=True,
            pool_pre_ping=True,
            pool_recycle=1800,
        )
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )
        Base.metadata.create_all(self.engine)

    def _to_participant(self, row: "ParticipantRow") -> Participant:
        return Participant(id=row.id, name=row.name, score=row.score)

    def list_participants(self) -> list[Participant]:
        stmt = select(ParticipantRow).order_by(
            ParticipantRow.score.desc(), ParticipantRow.created_at.asc()
        )
        try:
            with self.Session() as session:
                rows = session.execute(stmt).scalars().all()
                return [self._to_participant(row) for row in rows]
        except SQLAlchemyError as exc:
            logger.exception("Failed to list participants")
            raise DbError(str(exc)) from exc

    def create_participant(self, name: str) -> Participant:
        try:
            with self.Session() as session:
                row = ParticipantRow(
                    id=uuid.uuid4().hex,
                    name=name,
                    score=0,
                    created_at=time.time(),
                )
                session.add(row)
                session.commit()
                session.refresh(row)
                return self._to_participant(row)
        except SQLAlchemyError as exc:
            logger.exception("Failed to create participant %r", name)
            raise DbError(str(exc)) from exc

    def update_score(self, participant_id: str, score: int) -> Optional[Participant]:
        try:
            with self.Session() as session:
                row = session.get(ParticipantRow, participant_id)
                if not row:
                    return None
                row.score = score
                session.commit()
                session.refresh(row)
                return self._to_participant(row)
        except SQLAlchemyError as exc:
            logger.exception("Failed to update participant %s", participant_id)
            raise DbError(str(exc)) from exc

    def delete_participant(self, participant_id: str) -> bool:
        try:
            with self.Session() as session:
                row = session.get(ParticipantRow, participant_id)
                if not row:
                    return False
                session.delete(row)
                session.commit()
                return True
        except SQLAlchemyError as exc:
            logger.exception("Failed to delete participant %s", participant_id)
            raise DbError(str(exc)) from exc


Base = declarative_base()


class ParticipantRow(Base):
    __tablename__ = "participants"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    score = Column(Integer, nullable=False, default=0)
    created_at = Column(Float, nullable=False, index=True)
