# customer_api/api/deps.py

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from passlib.context import CryptContext
from customer_api.config import Settings
from customer_api.core.security import TokenClaims, decode_access_token


bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_pwd_context(request: Request) -> CryptContext:
    return request.app.state.pwd_context


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> TokenClaims:
    """
    Resolves the caller from the bearer token.
    Missing tokens fail with 401, invalid or expired ones with 403.
    """
    token = credentials.credentials if credentials else None
    caller = decode_access_token(settings, token)
    request.state.caller = caller
    return caller
