# filmgraph/services/schemas/users.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserBase(BaseModel):
    # login format and birthday rules are enforced by UserService
    email: EmailStr
    login: str = Field(..., min_length=1)
    name: Optional[str] = None
    birthday: Optional[date] = None


class UserCreate(UserBase):
    pass


class UserUpdate(UserBase):
    id: int
    # omitted -> keep stored friends; list -> replace them
    friends: Optional[List[int]] = None


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    login: str
    name: str
    birthday: Optional[date] = None
    friends: List[int] = []
