"""User service: accounts and the clients each vendor manages."""

from typing import List

import structlog

from app.application.services.auth_service import hash_password
from app.core.exceptions import DuplicateError, InvalidReferenceError, NotFoundError, ValidationError
from app.domain.models.client import Client
from app.domain.models.user import User, UserRole
from app.domain.models.user_client import UserClient
from app.domain.schemas.auth import UserCreate
from app.infrastructure.store import Store

logger = structlog.get_logger(__name__)


def list_users(store: Store) -> List[User]:
    return store.users.list()


def get_user(store: Store, user_id: int) -> User:
    user = store.users.get_by_id(user_id)
    if user is None:
        raise NotFoundError("Usuario no encontrado")
    return user


def register_user(store: Store, data: UserCreate) -> User:
    """Create an account; the credential is stored only as a bcrypt hash."""
    nombre = (data.nombre or "").strip()
    email = (data.email or "").strip().lower()
    if not nombre or not email or not data.password:
        raise ValidationError("Nombre, email y contraseña son requeridos")

    try:
        rol = UserRole(data.rol) if data.rol else UserRole.OPERATOR
    except ValueError:
        raise ValidationError("Rol inválido", {"roles": [r.value for r in UserRole]}) from None

    # Hash outside the lock; bcrypt is slow by design
    password_hash = hash_password(data.password)
    user = store.users.create(
        {"nombre": nombre, "email": email, "password_hash": password_hash, "rol": rol}
    )
    logger.info("User registered", user_id=user.id, rol=user.rol.value)
    return user


def link_user_client(store: Store, usuario_id: int, cliente_id: int | None) -> UserClient:
    """Add a client to a vendor's territory."""
    get_user(store, usuario_id)
    if cliente_id is None:
        raise ValidationError("cliente_id es requerido")
    if store.clients.get_by_id(cliente_id) is None:
        raise InvalidReferenceError("Cliente no encontrado", {"cliente_id": cliente_id})

    with store.transaction(store.user_clients):
        if store.user_clients.get_link(usuario_id, cliente_id):
            raise DuplicateError("El cliente ya está asignado a este usuario")
        link = store.user_clients.create({"usuario_id": usuario_id, "cliente_id": cliente_id})

    logger.info("Client linked to user", user_id=usuario_id, client_id=cliente_id)
    return link


def list_user_clients(store: Store, usuario_id: int) -> List[Client]:
    get_user(store, usuario_id)
    links = store.user_clients.find_by("usuario_id", usuario_id)
    return [store.clients.get_by_id(link.cliente_id) for link in links]
