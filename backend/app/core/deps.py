from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.config import get_settings
from app.core.security import decode_token
from app.models.property import Property
from app.models.user import User, UserRole

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{get_settings().API_PREFIX}/auth/login")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{get_settings().API_PREFIX}/auth/login", auto_error=False)


def _user_from_token(db: Session, token: str) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_token(token)
    except JWTError:
        raise credentials_exception
    if payload.get("typ") != "access" or not payload.get("sub"):
        raise credentials_exception

    user = db.query(User).filter(User.id == payload["sub"]).first()
    if not user:
        raise credentials_exception
    if not user.is_active:
        raise HTTPException(status_code=403, detail="User inactive")
    return user


def get_current_user(db: Session = Depends(get_db), token: str = Depends(oauth2_scheme)) -> User:
    return _user_from_token(db, token)


def get_optional_user(
    db: Session = Depends(get_db),
    token: str | None = Depends(optional_oauth2_scheme),
) -> User | None:
    # Anonymous callers are allowed; a bad token is still an error.
    if not token:
        return None
    return _user_from_token(db, token)


def require_roles(*roles: UserRole):
    def role_dependency(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            raise HTTPException(status_code=403, detail="Insufficient permissions")
        return current_user

    return role_dependency


def ensure_can_manage(prop: Property, user: User) -> None:
    """Admins manage every listing; agents only the listings assigned to them."""
    if user.role == UserRole.admin:
        return
    if user.role == UserRole.agent and prop.agent_id == user.id:
        return
    raise HTTPException(status_code=403, detail="Agents can manage only their own listings")
