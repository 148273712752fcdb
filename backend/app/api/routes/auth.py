from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordRequestForm
from jose import JWTError
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import get_db
from app.core.deps import get_current_user
from app.core.rate_limit import limiter
from app.core.security import (
    create_access_token,
    create_refresh_token,
    decode_token,
    get_password_hash,
    validate_password_strength,
    verify_password,
)
from app.models.user import User, UserRole
from app.schemas.auth import RefreshTokenRequest, TokenResponse, UserCreate, UserResponse
from app.services.audit import audit_event
from app.services.users import create_user, get_user, get_user_by_email

router = APIRouter(prefix="/auth", tags=["auth"])


def _client_ip(request: Request) -> str | None:
    return request.client.host if request.client else None


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("10/minute")
def register(request: Request, payload: UserCreate, db: Session = Depends(get_db)):
    settings = get_settings()
    if not settings.ALLOW_PUBLIC_SIGNUP:
        raise HTTPException(status_code=403, detail="Public signup is disabled")

    if get_user_by_email(db, payload.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    if not validate_password_strength(payload.password):
        raise HTTPException(
            status_code=400,
            detail="Weak password. Use 12+ chars with upper/lowercase, number, and symbol.",
        )

    # Self-service accounts are always plain users; agents and admins are provisioned.
    user = create_user(
        db,
        email=payload.email,
        first_name=payload.first_name,
        last_name=payload.last_name,
        hashed_password=get_password_hash(payload.password),
        role=UserRole.user,
    )
    audit_event(db, "register", "auth", user_id=user.id, ip_address=_client_ip(request))
    return user


@router.post("/login", response_model=TokenResponse)
@limiter.limit("20/minute")
def login(
    request: Request,
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    user = get_user_by_email(db, form_data.username)
    if not user or not user.hashed_password or not verify_password(form_data.password, user.hashed_password):
        if user:
            audit_event(db, "login_failed", "auth", user_id=user.id, ip_address=_client_ip(request))
        raise HTTPException(status_code=400, detail="Incorrect email or password")

    if not user.is_active:
        raise HTTPException(status_code=403, detail="User inactive")

    audit_event(db, "login_success", "auth", user_id=user.id, ip_address=_client_ip(request))
    return TokenResponse(access_token=create_access_token(user.id), refresh_token=create_refresh_token(user.id))


@router.post("/refresh", response_model=TokenResponse)
def refresh_token(payload: RefreshTokenRequest, db: Session = Depends(get_db)):
    try:
        claims = decode_token(payload.refresh_token)
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid refresh token")

    if claims.get("typ") != "refresh":
        raise HTTPException(status_code=401, detail="Invalid token type")

    user = get_user(db, claims.get("sub") or "")
    if not user or not user.is_active:
        raise HTTPException(status_code=401, detail="Session invalid")

    return TokenResponse(access_token=create_access_token(user.id), refresh_token=create_refresh_token(user.id))


@router.get("/user", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return current_user
