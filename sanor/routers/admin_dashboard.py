from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from decimal import Decimal, ROUND_HALF_UP

from sanor.models.user import get_db, User
from sanor.models.product import Product
from sanor.models.order import Order, UNREALISED_STATUSES
from sanor.routers.orders import map_order_to_out
from sanor.utils.security import TokenUser, require_admin


router = APIRouter()


def total_revenue(orders) -> Decimal:
    """Sum of order totals, ignoring orders that are still pending or were cancelled."""
    revenue = sum(
        (Decimal(o.total_amount or 0) for o in orders if o.status not in UNREALISED_STATUSES),
        Decimal("0"),
    )
    return revenue.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


# Dashboard Stats
@router.get("/stats")
def get_dashboard_stats(db: Session = Depends(get_db), current_user: TokenUser = Depends(require_admin)):
    products = db.query(Product).all()
    users = db.query(User).all()
    orders = db.query(Order).order_by(Order.created_at.desc(), Order.id.desc()).all()
    return {
        "totalProducts": len(products),
        "totalOrders": len(orders),
        "totalUsers": len(users),
        "totalRevenue": f"{total_revenue(orders):.2f}",
        "recentOrders": [map_order_to_out(o).model_dump(mode="json") for o in orders[:5]],
    }
