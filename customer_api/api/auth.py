# customer_api/api/auth.py

import logging
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from passlib.context import CryptContext
from pydantic import BaseModel
from sqlalchemy.orm import Session
from customer_api.api.deps import get_current_user, get_pwd_context, get_settings
from customer_api.config import Settings
from customer_api.core.credentials import authenticate_user, register_user
from customer_api.core.security import TokenClaims, create_access_token
from customer_api.database import get_db


logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


class RegisterRequest(BaseModel):
    username: str | None = None
    name: str | None = None
    password: str | None = None
    gender: str | None = None
    location: str | None = None


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class Token(BaseModel):
    token: str
    token_type: str = "bearer"


class Me(BaseModel):
    id: int
    username: str


@router.post("/register", response_class=PlainTextResponse)
def register(
    req: RegisterRequest,
    db: Session = Depends(get_db),
    pwd_context: CryptContext = Depends(get_pwd_context),
):
    register_user(
        db,
        pwd_context,
        username=req.username,
        name=req.name,
        password=req.password,
        gender=req.gender,
        location=req.location,
    )
    return "User created successfully"


@router.post("/login", response_model=Token)
def login(
    req: LoginRequest,
    db: Session = Depends(get_db),
    pwd_context: CryptContext = Depends(get_pwd_context),
    settings: Settings = Depends(get_settings),
):
    user = authenticate_user(db, pwd_context, req.username, req.password)
    token = create_access_token(settings, user.id, user.username)
    logger.info("User %s logged in", user.username)
    return Token(token=token)


@router.get("/users/me", response_model=Me)
def read_users_me(caller: TokenClaims = Depends(get_current_user)):
    return Me(id=caller.user_id, username=caller.username)
