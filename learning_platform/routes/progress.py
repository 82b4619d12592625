"""
Lesson progress endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from learning_platform.models.database import get_db
from learning_platform.models.entities import Progress
from learning_platform.models.schemas import ProgressCreate, ProgressResponse, ProgressSaved

router = APIRouter(prefix="/api/progress", tags=["progress"])


@router.get("/{user_id}", response_model=list[ProgressResponse])
async def get_progress(user_id: int, db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(Progress)
        .where(Progress.user_id == user_id)
        .order_by(Progress.updated_at.desc(), Progress.id.desc())
    )
    return result.scalars().all()


@router.post("", response_model=ProgressSaved)
async def save_progress(req: ProgressCreate, db: AsyncSession = Depends(get_db)):
    # lesson 0 is a real lesson; only a missing index is rejected
    if not req.user_id or not req.subject or req.lesson_index is None:
        raise HTTPException(status_code=400, detail="userId, subject, and lessonIndex are required")

    row = Progress(
        user_id=req.user_id,
        subject=req.subject,
        lesson_index=req.lesson_index,
        completed=req.completed,
        score=req.score,
    )
    db.add(row)
    await db.flush()
    return ProgressSaved(message="Progress saved successfully", id=row.id)
