from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class RegisterSchema(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)
    name: Optional[str] = None


class LoginSchema(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class UserOut(BaseModel):
    id: int
    email: str
    name: Optional[str] = None
    role: str


class AuthOut(BaseModel):
    token: str
    user: UserOut


class ProfileOut(UserOut):
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None


class AdminUserOut(UserOut):
    phone: Optional[str] = None
    city: Optional[str] = None
    createdAt: str
