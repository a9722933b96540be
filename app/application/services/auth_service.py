"""Auth service: password hashing and credential checks."""

import structlog
from passlib.context import CryptContext

from app.config import get_settings
from app.core.exceptions import AuthError
from app.domain.schemas.auth import UserPublic
from app.infrastructure.store import Store

logger = structlog.get_logger(__name__)
settings = get_settings()
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def authenticate(store: Store, email: str | None, password: str | None) -> UserPublic:
    """Check credentials and return the public profile of the user.

    Unknown emails still pay for one hash verification so response time does
    not reveal which accounts exist.
    """
    user = store.users.get_by_email(email) if email else None

    if user is None:
        pwd_context.dummy_verify()
        logger.info("Login failed", reason="unknown_user")
        raise AuthError()

    if not password or not verify_password(password, user.password_hash):
        logger.info("Login failed", reason="bad_credentials", user_id=user.id)
        raise AuthError()

    if not user.activo:
        logger.info("Login failed", reason="inactive", user_id=user.id)
        raise AuthError()

    logger.info("Login succeeded", user_id=user.id, rol=user.rol.value)
    return UserPublic.model_validate(user)
