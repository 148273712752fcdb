from sqlalchemy.orm import Session

from app.models.audit import AuditLog


def audit_event(
    db: Session,
    action: str,
    resource: str,
    user_id: str | None = None,
    resource_id: str | None = None,
    ip_address: str | None = None,
    details: str | None = None,
) -> None:
    entry = AuditLog(
        user_id=user_id,
        action=action,
        resource=resource,
        resource_id=resource_id,
        ip_address=ip_address,
        details=details,
    )
    db.add(entry)
    db.commit()
