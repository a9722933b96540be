"""
In-memory user and sales-territory repositories.
"""

from typing import Optional

from app.domain.models.user import User
from app.domain.models.user_client import UserClient
from app.infrastructure.repositories.base_repository import InMemoryRepository


class InMemoryUserRepository(InMemoryRepository[User]):

    def __init__(self):
        super().__init__("usuarios", User, unique={"email": "El email ya está registrado"})

    def get_by_email(self, email: str) -> Optional[User]:
        return self.get_by("email", email.strip().lower())


class InMemoryUserClientRepository(InMemoryRepository[UserClient]):

    def __init__(self):
        super().__init__("usuario_clientes", UserClient, indexed=("usuario_id", "cliente_id"))

    def get_link(self, usuario_id: int, cliente_id: int) -> Optional[UserClient]:
        for link in self.find_by("usuario_id", usuario_id):
            if link.cliente_id == cliente_id:
                return link
        return None
