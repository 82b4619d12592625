"""
Append-only log of tutor questions and the answers given.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError

from learning_platform.models.database import async_session
from learning_platform.models.entities import AIQuestion


@dataclass(frozen=True)
class QuestionLogEntry:
    user_id: Optional[int]
    question: str
    answer: str
    timestamp: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True)
class PersistenceError:
    detail: str


class QuestionLogSink(Protocol):
    """Reports write failures as a PersistenceError instead of raising."""

    async def append(self, entry: QuestionLogEntry) -> Optional[PersistenceError]:
        ...


class SqlQuestionLog:
    """Writes each entry in its own session so it can outlive the request."""

    def __init__(self, session_factory=async_session) -> None:
        self._session_factory = session_factory

    async def append(self, entry: QuestionLogEntry) -> Optional[PersistenceError]:
        try:
            async with self._session_factory() as db:
                db.add(AIQuestion(
                    user_id=entry.user_id,
                    question=entry.question,
                    answer=entry.answer,
                    created_at=entry.timestamp,
                ))
                await db.commit()
        except SQLAlchemyError as e:
            return PersistenceError(detail=f"{type(e).__name__}: {e}")
        return None
