from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from sanor.models.user import User, get_db
from sanor.schemas.user import AdminUserOut
from sanor.utils.security import TokenUser, require_admin


router = APIRouter()


@router.get("", response_model=List[AdminUserOut])
def get_all_users(db: Session = Depends(get_db), current_user: TokenUser = Depends(require_admin)):
    users = db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()
    return [
        AdminUserOut(
            id=u.id,
            email=u.email,
            name=u.name,
            role=u.role,
            phone=u.phone,
            city=u.city,
            createdAt=u.created_at.isoformat(),
        )
        for u in users
    ]
