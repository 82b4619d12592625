"""
AI tutor endpoints — ask a question, read back a student's question log.
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from learning_platform.config import settings
from learning_platform.limiter import limiter
from learning_platform.models.database import get_db
from learning_platform.models.entities import AIQuestion
from learning_platform.models.schemas import AskRequest, AskResponse, AIQuestionResponse
from learning_platform.services.tutor_service import QuestionValidationError, TutorService, get_tutor

router = APIRouter(prefix="/api", tags=["tutor"])


def ask_limit() -> str:
    """Read per request so the limit follows settings."""
    return f"{settings.RATE_LIMIT_PER_MINUTE}/minute"


@router.post("/ask-ai", response_model=AskResponse)
@limiter.limit(ask_limit)
async def ask_ai(request: Request, req: AskRequest, tutor: TutorService = Depends(get_tutor)):
    try:
        answer = await tutor.answer_question(req.question, user_id=req.user_id)
    except QuestionValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Ask [{req.user_id}]: '{req.question[:50]}' -> '{answer[:50]}'")
    return AskResponse(question=req.question, answer=answer)


@router.get("/ai-questions/{user_id}", response_model=list[AIQuestionResponse])
async def get_question_history(user_id: int, db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(AIQuestion)
        .where(AIQuestion.user_id == user_id)
        .order_by(AIQuestion.created_at.desc(), AIQuestion.id.desc())
        .limit(settings.AI_HISTORY_LIMIT)
    )
    return result.scalars().all()
