from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
import logging

from sanor.models.user import User, get_db
from sanor.schemas.user import RegisterSchema, LoginSchema, AuthOut, UserOut, ProfileOut
from sanor.utils.security import (
    TokenUser,
    create_access_token,
    get_current_user,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _auth_response(user: User) -> AuthOut:
    return AuthOut(
        token=create_access_token(user),
        user=UserOut(id=user.id, email=user.email, name=user.name, role=user.role),
    )


@router.post("/register", response_model=AuthOut)
def register(payload: RegisterSchema, db: Session = Depends(get_db)):
    existing = db.query(User).filter(User.email == payload.email).first()
    if existing:
        raise HTTPException(status_code=400, detail="Email already registered")
    new_user = User(
        email=payload.email,
        name=payload.name,
        password_hash=hash_password(payload.password),
        role="user",
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)
    logger.info("Registered user id=%s", new_user.id)
    return _auth_response(new_user)


@router.post("/login", response_model=AuthOut)
def login(credentials: LoginSchema, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == credentials.email).first()
    if not user or not verify_password(credentials.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return _auth_response(user)


@router.get("/me", response_model=ProfileOut)
def get_me(current_user: TokenUser = Depends(get_current_user), db: Session = Depends(get_db)):
    user = db.query(User).filter(User.id == current_user.id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return ProfileOut(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        phone=user.phone,
        address=user.address,
        city=user.city,
        state=user.state,
        pincode=user.pincode,
    )
