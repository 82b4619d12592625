"""
Pydantic request / response schemas for the API.

Request fields are optional on purpose: the routes answer missing values with
the platform's own 400 messages instead of FastAPI's 422.
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


# ── Auth ─────────────────────────────────────────────────
class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None
    school: Optional[str] = None


class RegisterResponse(BaseModel):
    message: str
    userId: int


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    role: str
    school: str
    created_at: datetime

    class Config:
        from_attributes = True


class LoginResponse(BaseModel):
    message: str
    user: UserResponse
    access_token: str
    token_type: str = "bearer"


# ── Tutor ────────────────────────────────────────────────
class AskRequest(BaseModel):
    question: Optional[str] = None
    user_id: Optional[int] = Field(default=None, alias="userId")

    class Config:
        populate_by_name = True


class AskResponse(BaseModel):
    question: str
    answer: str


class AIQuestionResponse(BaseModel):
    id: int
    user_id: Optional[int] = None
    question: str
    answer: str
    created_at: datetime

    class Config:
        from_attributes = True


# ── Progress ─────────────────────────────────────────────
class ProgressCreate(BaseModel):
    user_id: Optional[int] = Field(default=None, alias="userId")
    subject: Optional[str] = None
    lesson_index: Optional[int] = Field(default=None, alias="lessonIndex")
    completed: bool = False
    score: Optional[int] = None

    class Config:
        populate_by_name = True


class ProgressSaved(BaseModel):
    message: str
    id: int


class ProgressResponse(BaseModel):
    id: int
    user_id: Optional[int] = None
    subject: str
    lesson_index: int
    completed: bool
    score: Optional[int] = None
    updated_at: datetime

    class Config:
        from_attributes = True


# ── Health ───────────────────────────────────────────────
class HealthResponse(BaseModel):
    status: str
    message: str
    aiEnabled: bool
