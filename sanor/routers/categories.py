from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import List
import logging

from sanor.models.product import Category
from sanor.models.user import get_db
from sanor.schemas.product import CategoryCreate, CategoryOut
from sanor.utils.security import TokenUser, require_admin
from sanor.utils.slug import slugify

logger = logging.getLogger(__name__)

router = APIRouter()


def to_category_out(c: Category) -> CategoryOut:
    return CategoryOut(
        id=c.id,
        name=c.name,
        slug=c.slug,
        description=c.description,
        imageUrl=c.image_url,
        createdAt=c.created_at.isoformat(),
    )


@router.get("", response_model=List[CategoryOut])
def list_categories(db: Session = Depends(get_db)):
    return [to_category_out(c) for c in db.query(Category).order_by(Category.id.asc()).all()]


@router.post("", response_model=CategoryOut)
def create_category(
    payload: CategoryCreate,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(require_admin),
):
    # Category slugs are not disambiguated; a colliding name is rejected by the unique index
    category = Category(
        name=payload.name,
        slug=slugify(payload.name, trim=False),
        description=payload.description,
        image_url=payload.imageUrl,
    )
    db.add(category)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Category slug conflict for name=%r", payload.name)
        raise HTTPException(status_code=409, detail="Category with this slug already exists")
    db.refresh(category)
    return to_category_out(category)
