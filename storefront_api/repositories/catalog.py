from sqlalchemy.orm import Session
from typing import List, Optional

from ..models.category import Category
from ..models.pc_build import PCBuild
from ..models.promotion import Promotion
from ..models.bundle import Bundle


def list_categories(db: Session, limit: Optional[int] = None) -> List[Category]:
    q = db.query(Category).order_by(Category.name)
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def get_category_by_slug(db: Session, slug: str) -> Optional[Category]:
    return db.query(Category).filter(Category.slug == slug).first()


def list_public_builds(db: Session) -> List[PCBuild]:
    return (
        db.query(PCBuild)
        .filter(PCBuild.is_public.is_(True))
        .order_by(PCBuild.created_at.desc())
        .all()
    )


def list_active_promotions(db: Session) -> List[Promotion]:
    # Date range is checked by the caller against its own clock
    return db.query(Promotion).filter(Promotion.is_active.is_(True)).all()


def list_active_bundles(db: Session) -> List[Bundle]:
    return db.query(Bundle).filter(Bundle.is_active.is_(True)).all()
