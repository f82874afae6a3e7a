"""ORM model for application users (authentication and task ownership)."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from tasktracker.models.base import Base


class User(Base):
    """
    User account for JWT authentication.

    password_hash is the bcrypt hash of the password with the user's own salt.
    tasks are loaded eagerly with the user and deleted along with it.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    salt = Column(String(64), nullable=False)

    tasks = relationship(
        "Task",
        back_populates="user",
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="Task.id",
    )
