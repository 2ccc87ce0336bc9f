"""Users router.

Minimal account lifecycle: sign-up, credential check, deletion. There are no
sessions or tokens; clients pass ``userId`` explicitly.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from ..database import get_async_session
from ..errors import EmailAlreadyRegistered, InvalidCredentials, UserNotFound
from ..repositories import UserRepository
from ..schemas import LoginRequest, SuccessResponse, UserCreate, UserDelete, UserIdResponse
from ..security import hash_password, verify_password

logger = structlog.get_logger()

router = APIRouter(tags=["users"])


@router.post("/users", response_model=UserIdResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_in: UserCreate,
    db: AsyncSession = Depends(get_async_session),
) -> UserIdResponse:
    """Create a new user."""
    users = UserRepository(db)
    if await users.get_by_email(user_in.email):
        logger.warning("user_creation_failed_duplicate_email")
        raise EmailAlreadyRegistered(user_in.email)

    user = await users.create(
        name=user_in.name,
        email=user_in.email,
        password_hash=hash_password(user_in.password),
    )
    return UserIdResponse(user_id=user.id)


@router.post("/login", response_model=UserIdResponse)
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_async_session),
) -> UserIdResponse:
    """Check credentials and return the user id."""
    user = await UserRepository(db).get_by_email(credentials.email.strip().lower())
    if not user or not verify_password(credentials.password, user.password_hash):
        logger.info("login_failed")
        raise InvalidCredentials()

    logger.info("login_succeeded", user_id=user.id)
    return UserIdResponse(user_id=user.id)


@router.post("/logout", response_model=SuccessResponse)
async def logout() -> SuccessResponse:
    """Nothing to invalidate server-side."""
    return SuccessResponse()


@router.delete("/user/delete", response_model=SuccessResponse)
async def delete_user(
    user_in: UserDelete,
    db: AsyncSession = Depends(get_async_session),
) -> SuccessResponse:
    """Delete a user together with their projects and prompt history."""
    if not await UserRepository(db).delete(user_in.user_id):
        raise UserNotFound(user_in.user_id)
    return SuccessResponse()
