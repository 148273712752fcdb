"""Listing search and property storage.

``search_properties`` turns a :class:`PropertySearch` into one count query and
one paginated select that share the same WHERE clause. The two queries run
back to back without a shared snapshot, so under concurrent writes ``total``
can disagree with the returned page by the rows written in between.
"""

from datetime import datetime

from sqlalchemy import and_, func, or_
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from app.core.logging import get_logger
from app.models.property import Property
from app.schemas.property import PropertySearch

logger = get_logger(__name__)

SORT_COLUMNS = {
    "price": Property.price,
    "created_at": Property.created_at,
    "views": Property.views,
    "sqft": Property.sqft,
}
DEFAULT_SORT = "created_at"


def build_conditions(search: PropertySearch) -> list[ColumnElement[bool]]:
    """One predicate per supplied filter. Callers AND them together."""
    conditions: list[ColumnElement[bool]] = []

    if search.query:
        conditions.append(
            or_(
                Property.title.icontains(search.query, autoescape=True),
                Property.description.icontains(search.query, autoescape=True),
                Property.address.icontains(search.query, autoescape=True),
            )
        )
    if search.city:
        conditions.append(Property.city.icontains(search.city, autoescape=True))
    if search.state:
        conditions.append(Property.state.icontains(search.state, autoescape=True))
    if search.zip_code:
        conditions.append(Property.zip_code == search.zip_code)
    if search.property_type is not None:
        conditions.append(Property.property_type == search.property_type)
    if search.status is not None:
        conditions.append(Property.status == search.status)

    ranges = (
        (Property.price, search.min_price, search.max_price),
        (Property.bedrooms, search.min_bedrooms, search.max_bedrooms),
        (Property.bathrooms, search.min_bathrooms, search.max_bathrooms),
        (Property.sqft, search.min_sqft, search.max_sqft),
    )
    for column, low, high in ranges:
        if low is not None:
            conditions.append(column >= low)
        if high is not None:
            conditions.append(column <= high)

    if search.featured is not None:
        conditions.append(Property.featured == search.featured)
    return conditions


def sort_clause(search: PropertySearch):
    column = SORT_COLUMNS.get(search.sort_by, SORT_COLUMNS[DEFAULT_SORT])
    return column.desc() if search.sort_order == "desc" else column.asc()


def search_properties(db: Session, search: PropertySearch) -> tuple[list[Property], int]:
    conditions = build_conditions(search)
    where = and_(*conditions) if conditions else None

    count_q = db.query(func.count(Property.id))
    if where is not None:
        count_q = count_q.filter(where)
    total = count_q.scalar() or 0

    rows_q = db.query(Property)
    if where is not None:
        rows_q = rows_q.filter(where)
    # id breaks ties so consecutive pages never overlap.
    rows = (
        rows_q.order_by(sort_clause(search), Property.id.asc())
        .offset((search.page - 1) * search.limit)
        .limit(search.limit)
        .all()
    )
    return rows, int(total)


def get_property(db: Session, property_id: str) -> Property | None:
    return db.query(Property).filter(Property.id == property_id).first()


def create_property(db: Session, data: dict) -> Property:
    prop = Property(**data)
    prop.views = 0
    db.add(prop)
    db.commit()
    db.refresh(prop)
    logger.info("property created id=%s city=%s type=%s", prop.id, prop.city, prop.property_type.value)
    return prop


def update_property(db: Session, property_id: str, changes: dict) -> Property | None:
    prop = get_property(db, property_id)
    if not prop:
        return None
    for field, value in changes.items():
        setattr(prop, field, value)
    prop.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(prop)
    logger.info("property updated id=%s fields=%s", prop.id, ",".join(sorted(changes)))
    return prop


def delete_property(db: Session, property_id: str) -> bool:
    removed = db.query(Property).filter(Property.id == property_id).delete(synchronize_session=False)
    db.commit()
    if removed:
        logger.info("property deleted id=%s", property_id)
    return removed > 0


def increment_views(db: Session, property_id: str) -> None:
    # Single UPDATE relative to the stored value; concurrent callers never lose an increment.
    db.query(Property).filter(Property.id == property_id).update(
        {Property.views: Property.views + 1}, synchronize_session=False
    )
    db.commit()


def get_featured_properties(db: Session, limit: int = 6) -> list[Property]:
    return (
        db.query(Property)
        .filter(Property.featured.is_(True))
        .order_by(Property.created_at.desc(), Property.id.asc())
        .limit(limit)
        .all()
    )
