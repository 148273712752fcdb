import os

from app.core.database import Base, SessionLocal, engine
from app.core.security import get_password_hash
from app.models.user import UserRole
from app.services.users import get_user_by_email, upsert_user


def ensure_user(email: str, password: str, role: UserRole, first_name: str | None = None) -> None:
    db = SessionLocal()
    try:
        existing = get_user_by_email(db, email)
        data = {
            "email": email,
            "first_name": first_name,
            "hashed_password": get_password_hash(password),
            "role": role,
            "is_active": True,
        }
        if existing:
            data["id"] = existing.id
        user = upsert_user(db, data)
        print(f"{'Updated' if existing else 'Created'} {user.role.value}: {email}")
    finally:
        db.close()


if __name__ == "__main__":
    Base.metadata.create_all(bind=engine)
    # Do not hardcode credentials in the repo. Use env vars for local bootstrap.
    admin_email = os.getenv("BOOTSTRAP_ADMIN_EMAIL")
    admin_password = os.getenv("BOOTSTRAP_ADMIN_PASSWORD")
    if admin_email and admin_password:
        ensure_user(admin_email, admin_password, UserRole.admin, first_name="Admin")
    else:
        print("Bootstrap skipped. Set BOOTSTRAP_ADMIN_EMAIL and BOOTSTRAP_ADMIN_PASSWORD to create an admin user.")
