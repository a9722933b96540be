"""User domain model: staff accounts (admins, vendors, field technicians)."""

from datetime import datetime
from enum import Enum

from app.domain.models.base import Record


class UserRole(str, Enum):
    ADMIN = "administrador"
    VENDOR = "vendedor"
    TECHNICIAN = "tecnico"
    SUPERVISOR = "supervisor"
    OPERATOR = "operador"
    SUPPORT = "soporte"
    AUDITOR = "auditor"
    GUEST = "invitado"


class User(Record):
    nombre: str
    email: str
    password_hash: str
    rol: UserRole = UserRole.OPERATOR
    activo: bool = True
    fecha_creacion: datetime

    def __repr__(self):
        return f"<User {self.email}>"
