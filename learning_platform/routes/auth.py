"""
Authentication routes — register, login, user listing.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger
from learning_platform.models.database import get_db
from learning_platform.models.entities import ROLES, User
from learning_platform.models.schemas import (
    RegisterRequest, RegisterResponse, LoginRequest, LoginResponse, UserResponse,
)
from learning_platform.services.auth_service import (
    hash_password, verify_password, create_access_token, require_teacher,
)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(req: RegisterRequest, db: AsyncSession = Depends(get_db)):
    if not all([req.name, req.email, req.password, req.role, req.school]):
        raise HTTPException(status_code=400, detail="All fields are required")

    if req.role not in ROLES:
        raise HTTPException(status_code=400, detail="Invalid role specified")

    existing = await db.execute(select(User).where(User.email == req.email))
    if existing.scalar_one_or_none():
        raise HTTPException(status_code=400, detail="User with this email already exists")

    user = User(
        name=req.name,
        email=req.email,
        hashed_password=hash_password(req.password),
        role=req.role,
        school=req.school,
    )
    db.add(user)
    await db.flush()

    logger.info(f"Registered {user.role} #{user.id} ({user.school})")
    return RegisterResponse(message="User registered successfully", userId=user.id)


@router.post("/login", response_model=LoginResponse)
async def login(req: LoginRequest, db: AsyncSession = Depends(get_db)):
    if not req.email or not req.password or not req.role:
        raise HTTPException(status_code=400, detail="Email, password, and role are required")

    result = await db.execute(select(User).where(User.email == req.email, User.role == req.role))
    user = result.scalar_one_or_none()

    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials or role")

    if not verify_password(req.password, user.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token({"sub": str(user.id), "role": user.role})
    return LoginResponse(
        message="Login successful",
        user=UserResponse.model_validate(user),
        access_token=token,
    )


@router.get("/users", response_model=list[UserResponse])
async def list_users(teacher: User = Depends(require_teacher), db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(User).order_by(User.id))
    return result.scalars().all()
