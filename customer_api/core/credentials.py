# customer_api/core/credentials.py

import logging
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from customer_api.core.errors import Conflict, InvalidCredentials, StorageError, ValidationError
from customer_api.core.security import get_password_hash, verify_password
from customer_api.models.user import User


logger = logging.getLogger(__name__)


def register_user(
    db: Session,
    pwd_context: CryptContext,
    username: str | None,
    name: str | None,
    password: str | None,
    gender: str | None = None,
    location: str | None = None,
) -> User:
    """
    Creates a user with a bcrypt hash of the password.
    Raises ValidationError for missing fields and Conflict for a taken username.
    """
    if not username or not name or not password:
        raise ValidationError()

    try:
        if db.query(User).filter(User.username == username).first():
            raise Conflict("User already exists")

        user = User(
            username=username,
            name=name,
            hashed_password=get_password_hash(pwd_context, password),
            gender=gender,
            location=location,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError:
        # lost a race with a concurrent registration of the same username
        db.rollback()
        raise Conflict("User already exists")
    except SQLAlchemyError as e:
        db.rollback()
        raise StorageError("Error creating user") from e

    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return user


def authenticate_user(
    db: Session,
    pwd_context: CryptContext,
    username: str | None,
    password: str | None,
) -> User:
    """
    Returns the user whose stored hash matches the password.
    Unknown usernames and wrong passwords both raise InvalidCredentials;
    a dummy hash check runs for unknown users so both take similar time.
    """
    if not username or not password:
        raise InvalidCredentials()

    try:
        user = db.query(User).filter(User.username == username).first()
    except SQLAlchemyError as e:
        raise StorageError("Error logging in") from e

    if not user:
        pwd_context.dummy_verify()
        logger.info("Failed login for %s", username)
        raise InvalidCredentials()

    if not verify_password(pwd_context, password, user.hashed_password):
        logger.info("Failed login for %s", username)
        raise InvalidCredentials()

    return user
