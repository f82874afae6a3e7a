"""User accounts: creation with a per-user salt, and credential checks at login."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tasktracker.core.security import generate_salt, hash_password, verify_password
from tasktracker.models.user import User
from tasktracker.services.errors import AuthenticationFailed, UsernameTaken

logger = logging.getLogger(__name__)


def authenticate_user(session: Session, username: str, password: str) -> User:
    """
    Return the user whose stored salted hash matches password.

    Raises AuthenticationFailed for an unknown username and for a wrong password alike.
    """
    user = session.query(User).filter(User.username == username).first()
    if user is None or not verify_password(password, user.password_hash, user.salt):
        logger.warning("Failed login for username=%r", username)
        raise AuthenticationFailed()
    return user


def create_user(session: Session, username: str, password: str) -> User:
    """Persist a new user with a fresh salt. Raises UsernameTaken on a duplicate username."""
    if session.query(User).filter(User.username == username).first() is not None:
        raise UsernameTaken(username)
    salt = generate_salt()
    user = User(username=username, salt=salt, password_hash=hash_password(password, salt))
    session.add(user)
    try:
        session.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent insert of the same username.
        session.rollback()
        raise UsernameTaken(username) from e
    session.refresh(user)
    logger.info("User created id=%s username=%r", user.id, username)
    return user
