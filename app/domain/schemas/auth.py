"""Pydantic schemas for User and Auth."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional

from app.domain.models.user import UserRole

PASSWORD_ALIASES = AliasChoices("contraseña", "contrasena", "password")


class UserCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nombre: Optional[str] = Field(None, validation_alias=AliasChoices("nombre", "name"))
    email: Optional[str] = None
    password: Optional[str] = Field(None, validation_alias=PASSWORD_ALIASES)
    rol: Optional[str] = None


class UserRead(BaseModel):
    """Listing shape; the stored hash has no field here."""
    id: int
    nombre: str
    email: str
    rol: UserRole
    activo: bool
    fecha_creacion: Optional[datetime] = None

    model_config = {"from_attributes": True}


class UserPublic(BaseModel):
    id: int
    nombre: str
    email: str
    rol: UserRole

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = None
    password: Optional[str] = Field(None, validation_alias=PASSWORD_ALIASES)


class LoginResponse(BaseModel):
    success: bool = True
    message: str = "Login exitoso"
    usuario: UserPublic


class UserClientCreate(BaseModel):
    cliente_id: Optional[int] = None
