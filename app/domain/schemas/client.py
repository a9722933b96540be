"""Pydantic schemas for Client domain."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional


class ClientCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nombre: Optional[str] = Field(None, validation_alias=AliasChoices("nombre", "name"))
    email: Optional[str] = None
    telefono: Optional[str] = Field(None, validation_alias=AliasChoices("telefono", "phone"))
    direccion: Optional[str] = Field(None, validation_alias=AliasChoices("direccion", "address"))
    ruc: Optional[str] = None


class ClientRead(BaseModel):
    id: int
    nombre: str
    email: Optional[str] = None
    telefono: str = ""
    direccion: str = ""
    ruc: Optional[str] = None
    activo: bool
    fecha_creacion: datetime

    model_config = {"from_attributes": True}


class ClientActiveUpdate(BaseModel):
    activo: bool


class ClientPage(BaseModel):
    total: int
    page: int
    limit: int
    clientes: list[ClientRead]
