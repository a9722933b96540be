"""Pydantic schemas for Equipment and its reference tables."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional


class EquipmentCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    cod_barras: Optional[str] = Field(
        None, validation_alias=AliasChoices("cod_barras", "codigo_barras", "barcode")
    )
    marca: Optional[str] = None
    modelo: Optional[str] = None
    tipo_equipo: Optional[str] = None
    numero_serie: Optional[str] = None
    logo_id: Optional[int] = None


class EquipmentRead(BaseModel):
    id: int
    cod_barras: str
    marca: str
    modelo: str
    tipo_equipo: str
    numero_serie: Optional[str] = None
    marca_id: Optional[int] = None
    modelo_id: Optional[int] = None
    logo_id: Optional[int] = None
    fecha_creacion: datetime

    model_config = {"from_attributes": True}


class EquipmentWithStatus(EquipmentRead):
    asignado_a: Optional[str] = None
    cliente_id: Optional[int] = None
    asignacion_id: Optional[int] = None
    estado_actual: str = "Sin revisar"
    funcionando: Optional[bool] = None
    temperatura_actual: Optional[float] = None
    temperatura_freezer: Optional[float] = None
    ultima_revision: Optional[datetime] = None


class BrandRead(BaseModel):
    id: int
    nombre: str

    model_config = {"from_attributes": True}


class EquipmentModelRead(BaseModel):
    id: int
    nombre: str
    marca_id: int

    model_config = {"from_attributes": True}


class LogoRead(BaseModel):
    id: int
    nombre: str

    model_config = {"from_attributes": True}
