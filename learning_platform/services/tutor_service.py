"""
Tutor orchestration: OpenAI first, offline answers when that fails.

The caller always gets an answer unless the question itself is missing.
Question logging runs in the background and never changes the answer.
"""

import asyncio
from typing import Callable, Optional, Set

from loguru import logger

from learning_platform.services.ai_service import AIGateway
from learning_platform.services.fallback_responder import respond
from learning_platform.services.question_log import QuestionLogEntry, QuestionLogSink, SqlQuestionLog


class QuestionValidationError(ValueError):
    """Raised when the question is missing or blank."""


class TutorService:
    def __init__(
        self,
        gateway: AIGateway,
        log_sink: Optional[QuestionLogSink] = None,
        responder: Callable[[str], str] = respond,
    ) -> None:
        self.gateway = gateway
        self.log_sink = log_sink
        self._responder = responder
        self._pending: Set[asyncio.Task] = set()

    @property
    def ai_enabled(self) -> bool:
        return self.gateway.is_configured

    async def answer_question(self, question: Optional[str], user_id: Optional[int] = None) -> str:
        if question is None or not question.strip():
            raise QuestionValidationError("Question is required")

        answer = await self._generate(question)

        # user 0 is treated as anonymous
        if user_id and self.log_sink is not None:
            self._schedule_log(QuestionLogEntry(user_id=user_id, question=question, answer=answer))
        return answer

    async def _generate(self, question: str) -> str:
        try:
            result = await self.gateway.generate(question)
        except Exception:
            logger.exception("AI gateway raised unexpectedly, using fallback responder")
            return self._responder(question)

        if result.ok:
            return result.answer

        logger.warning(f"[FALLBACK] {result.error.kind.value}: {result.error.detail}")
        return self._responder(question)

    # ── Question log ─────────────────────────────────────
    def _schedule_log(self, entry: QuestionLogEntry) -> None:
        task = asyncio.create_task(self._write_log(entry))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _write_log(self, entry: QuestionLogEntry) -> None:
        try:
            error = await self.log_sink.append(entry)
        except Exception:
            logger.exception(f"Question log sink raised for user {entry.user_id}")
            return
        if error is not None:
            logger.error(f"Error logging AI question for user {entry.user_id}: {error.detail}")

    async def drain(self) -> None:
        """Wait for queued question-log writes."""
        while self._pending:
            await asyncio.gather(*list(self._pending))


tutor = TutorService(AIGateway(), SqlQuestionLog())


def get_tutor() -> TutorService:
    """FastAPI dependency returning the process-wide tutor."""
    return tutor
