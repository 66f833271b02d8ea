from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from datetime import datetime
from typing import List, Optional
import logging

from sanor.models.product import Product
from sanor.models.user import get_db
from sanor.schemas.product import ProductCreate, ProductUpdate, ProductOut
from sanor.utils.security import TokenUser, require_admin
from sanor.utils.slug import unique_product_slug

logger = logging.getLogger(__name__)

router = APIRouter()

# Request field -> model column for partial updates
_UPDATABLE_FIELDS = {
    "name": "name",
    "description": "description",
    "price": "price",
    "originalPrice": "original_price",
    "categoryId": "category_id",
    "imageUrl": "image_url",
    "images": "images",
    "sizes": "sizes",
    "colors": "colors",
    "stock": "stock",
    "inStock": "in_stock",
    "featured": "featured",
    "newArrival": "new_arrival",
}


# Helpers

def split_tokens(value: Optional[str]) -> List[str]:
    """Split a comma-separated size/colour list into trimmed, non-empty tokens."""
    if not value:
        return []
    return [t.strip() for t in value.split(",") if t.strip()]


def to_product_out(p: Product) -> ProductOut:
    return ProductOut(
        id=p.id,
        name=p.name,
        slug=p.slug,
        description=p.description,
        price=p.price,
        originalPrice=p.original_price,
        categoryId=p.category_id,
        imageUrl=p.image_url,
        images=p.images or [],
        sizes=p.sizes,
        colors=p.colors,
        sizeList=split_tokens(p.sizes),
        colorList=split_tokens(p.colors),
        stock=p.stock,
        inStock=bool(p.in_stock) if p.in_stock is not None else True,
        featured=bool(p.featured),
        newArrival=bool(p.new_arrival),
        createdAt=p.created_at.isoformat(),
        updatedAt=p.updated_at.isoformat(),
    )


def _get_product_or_404(db: Session, id: int) -> Product:
    product = db.query(Product).filter(Product.id == id).first()
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


# Get All Products (no pagination, newest first)
@router.get("", response_model=List[ProductOut])
def get_all_products(db: Session = Depends(get_db)):
    products = db.query(Product).order_by(Product.created_at.desc(), Product.id.desc()).all()
    return [to_product_out(p) for p in products]


# Get Featured Products
@router.get("/featured", response_model=List[ProductOut])
def get_featured_products(db: Session = Depends(get_db)):
    products = db.query(Product).filter(Product.featured.is_(True)).all()
    return [to_product_out(p) for p in products]


# Get Product by ID
@router.get("/{id}", response_model=ProductOut)
def get_product_by_id(id: int, db: Session = Depends(get_db)):
    return to_product_out(_get_product_or_404(db, id))


# Create Product (Admin)
@router.post("", response_model=ProductOut)
def create_product(
    payload: ProductCreate,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(require_admin),
):
    product = Product(
        name=payload.name,
        slug=unique_product_slug(payload.name),
        description=payload.description,
        price=payload.price,
        original_price=payload.originalPrice,
        category_id=payload.categoryId,
        image_url=payload.imageUrl,
        images=payload.images,
        sizes=payload.sizes,
        colors=payload.colors,
        stock=payload.stock or 100,
        featured=payload.featured,
        new_arrival=payload.newArrival,
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    logger.info("Product %s created by admin %s", product.id, current_user.id)
    return to_product_out(product)


# Update Product (Admin)
@router.put("/{id}", response_model=ProductOut)
def update_product(
    id: int,
    payload: ProductUpdate,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(require_admin),
):
    product = _get_product_or_404(db, id)
    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(product, _UPDATABLE_FIELDS[field], value)
    product.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(product)
    return to_product_out(product)


# Delete Product (Admin)
@router.delete("/{id}")
def delete_product(
    id: int,
    db: Session = Depends(get_db),
    current_user: TokenUser = Depends(require_admin),
):
    product = _get_product_or_404(db, id)
    db.delete(product)
    db.commit()
    logger.info("Product %s deleted by admin %s", id, current_user.id)
    return {"message": "Product deleted"}
