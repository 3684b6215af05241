# customer_api/core/security.py

from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel
from customer_api.config import Settings
from customer_api.core.errors import MissingToken, InvalidToken


# -------------------------------
# Password Hashing
# -------------------------------

def build_password_context(rounds: int = 10) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def get_password_hash(pwd_context: CryptContext, password: str) -> str:
    return pwd_context.hash(password)


def verify_password(pwd_context: CryptContext, plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


# -------------------------------
# Access Tokens
# -------------------------------

class TokenClaims(BaseModel):
    """
    Identity asserted by a verified access token.
    """
    user_id: int
    username: str
    issued_at: datetime
    expires_at: datetime


def create_access_token(
    settings: Settings,
    user_id: int,
    username: str,
    now: datetime | None = None,
) -> str:
    issued_at = now or datetime.now(timezone.utc)
    expire = issued_at + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode = {
        "sub": str(user_id),
        "username": username,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(
    settings: Settings,
    token: str | None,
    now: datetime | None = None,
) -> TokenClaims:
    """
    Verifies signature and expiry and returns the embedded claims.
    Expiry is checked against `now` (defaults to the current UTC time).
    Raises MissingToken when no token is given and InvalidToken otherwise.
    """
    if not token:
        raise MissingToken()

    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"verify_exp": False},
        )
    except JWTError:
        raise InvalidToken()

    subject = payload.get("sub")
    username = payload.get("username")
    if subject is None or username is None or "iat" not in payload or "exp" not in payload:
        raise InvalidToken()

    try:
        claims = TokenClaims(
            user_id=int(subject),
            username=username,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
    except (TypeError, ValueError, OverflowError, OSError):
        raise InvalidToken()

    if claims.expires_at <= (now or datetime.now(timezone.utc)):
        raise InvalidToken()
    return claims
