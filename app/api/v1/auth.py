from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_user, get_session_events
from app.core.security import (
    REFRESH_TOKEN_TYPE, create_access_token, create_refresh_token, verify_token
)
from app.core.session import AuthEvent, SessionEvents
from app.models.user import User as UserModel
from app.schemas.auth import RefreshTokenRequest, SessionInfo, SignInRequest, SignUpRequest, Token
from app.services.user import UserService

router = APIRouter()


def _issue_tokens(user_id: int) -> Token:
    return Token(
        access_token=create_access_token(subject=str(user_id)),
        refresh_token=create_refresh_token(subject=str(user_id)),
        token_type="bearer"
    )


@router.post("/sign-up", response_model=SessionInfo, status_code=status.HTTP_201_CREATED)
async def sign_up(
    sign_up_data: SignUpRequest,
    db: Session = Depends(get_db),
):
    """Register a freelancer or client account"""
    user = UserService.sign_up(db, sign_up_data)
    return {"user": user, "profile": user.profile}


@router.post("/sign-in", response_model=Token)
async def sign_in(
    sign_in_data: SignInRequest,
    db: Session = Depends(get_db),
    session_events: SessionEvents = Depends(get_session_events),
):
    """Authenticate with email and password and return JWT tokens"""
    user = UserService.authenticate_user(db, sign_in_data.email, sign_in_data.password)

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user"
        )

    session_events.emit(AuthEvent.SIGNED_IN, user.id)
    return _issue_tokens(user.id)


@router.post("/refresh", response_model=Token)
async def refresh_token(
    refresh_data: RefreshTokenRequest,
    db: Session = Depends(get_db),
    session_events: SessionEvents = Depends(get_session_events),
):
    """Exchange a refresh token for a new token pair"""
    user_id = verify_token(refresh_data.refresh_token, REFRESH_TOKEN_TYPE)

    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid refresh token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = UserService.get_user(db, user_id=int(user_id))
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )

    session_events.emit(AuthEvent.TOKEN_REFRESHED, user.id)
    return _issue_tokens(user.id)


@router.get("/me", response_model=SessionInfo)
async def read_session(
    current_user: UserModel = Depends(get_current_user),
):
    """Current user and profile"""
    return {"user": current_user, "profile": current_user.profile}


@router.post("/sign-out")
async def sign_out(
    current_user: UserModel = Depends(get_current_user),
    session_events: SessionEvents = Depends(get_session_events),
):
    """Sign out; tokens are stateless so this only broadcasts the change"""
    session_events.emit(AuthEvent.SIGNED_OUT, current_user.id)
    return {"message": "Successfully signed out"}


@router.get("/session", response_model=SessionInfo)
async def read_current_session(
    current_user: UserModel = Depends(get_current_user),
):
    """Same payload as /me; kept for clients that restore a session on load"""
    return {"user": current_user, "profile": current_user.profile}
