# customer_api/models/user.py

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from . import Base


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application users.
    Stores the login name, display name and bcrypt password hash.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    name = Column(String(100), nullable=False)
    hashed_password = Column(String(255), nullable=False)
    gender = Column(String(10), nullable=True)
    location = Column(String(100), nullable=True)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    customers = relationship(
        "Customer",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
