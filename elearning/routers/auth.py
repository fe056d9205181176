from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from elearning.core.errors import EnvelopeRoute
from elearning.models.db import get_db
from elearning.models.schemas import RegisterIn, LoginIn, LoginOut, StatusOut
from elearning.services.accounts import register_user, authenticate_user

router = APIRouter(prefix="/api", tags=["auth"], route_class=EnvelopeRoute)

@router.post("/register", response_model=StatusOut)
def register(payload: RegisterIn, db: Session = Depends(get_db)):
    register_user(db, payload.username, payload.email, payload.password, payload.role)
    return {"success": True, "message": "Registration successful! You can now login."}

@router.post("/login", response_model=LoginOut)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    user = authenticate_user(db, payload.username, payload.password)
    return {"success": True, "user": {"id": user.id, "username": user.username, "role": user.role}}
