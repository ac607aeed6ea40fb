"""
Authentication routes.
POST /register, /login
"""
from fastapi import APIRouter, Request, status

from actrac.core.config import settings
from actrac.core.dependencies import DBSession
from actrac.core.rate_limit import limiter
from actrac.schemas.user import (
    LoginRequest,
    LoginResponse,
    RegisterResponse,
    UserCreate,
    UserRead,
)
from actrac.services.auth_service import auth_service

router = APIRouter(tags=["Authentication"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user account",
)
async def register(
    user_in: UserCreate,
    db: DBSession,
) -> RegisterResponse:
    user = await auth_service.register_user(db, user_in=user_in)
    return RegisterResponse.model_validate(user)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Check credentials and return the user",
)
@limiter.limit(settings.RATE_LIMIT_LOGIN)
async def login(
    request: Request,
    credentials: LoginRequest,
    db: DBSession,
) -> LoginResponse:
    user = await auth_service.authenticate_user(
        db, email=credentials.email, password=credentials.password
    )
    return LoginResponse(user=UserRead.model_validate(user))
