from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from decimal import Decimal
import logging

from sanor.models.user import User, get_db
from sanor.models.product import Category, Product
from sanor.utils.security import hash_password
from sanor.utils.seed_data import DEMO_USERS, CATEGORIES, PRODUCTS

logger = logging.getLogger(__name__)

router = APIRouter()


# Idempotent demo bootstrap: users by email, catalogue only into empty tables
@router.post("")
def seed(db: Session = Depends(get_db)):
    results = []

    for demo in DEMO_USERS:
        if db.query(User).filter(User.email == demo["email"]).first():
            continue
        db.add(User(
            email=demo["email"],
            name=demo["name"],
            password_hash=hash_password(demo["password"]),
            role=demo["role"],
        ))
        results.append(f"{demo['role'].capitalize()} created: {demo['email']}")
    db.commit()

    if db.query(Category).count() == 0:
        db.add_all([Category(**c) for c in CATEGORIES])
        db.commit()
        results.append(f"Categories seeded: {len(CATEGORIES)}")

    if db.query(Product).count() == 0:
        category_ids = {c.slug: c.id for c in db.query(Category).all()}
        for data in PRODUCTS:
            fields = dict(data)
            category_slug = fields.pop("category")
            fields["category_id"] = category_ids.get(category_slug)
            fields["price"] = Decimal(fields["price"])
            if fields["original_price"] is not None:
                fields["original_price"] = Decimal(fields["original_price"])
            db.add(Product(**fields))
        db.commit()
        results.append(f"Products seeded: {len(PRODUCTS)}")

    logger.info("Seed completed: %s", results or "nothing to do")
    return {"message": "Seed completed", "results": results}
