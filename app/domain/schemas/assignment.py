"""Pydantic schemas for assignments and status records."""

from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from app.domain.models.status_record import CensusState


class AssignmentCreate(BaseModel):
    equipo_id: Optional[int] = None
    cliente_id: Optional[int] = None
    usuario_id: Optional[int] = None


class AssignmentRead(BaseModel):
    id: int
    equipo_id: int
    cliente_id: int
    usuario_id: Optional[int] = None
    fecha_asignacion: datetime
    fecha_retiro: Optional[datetime] = None
    activo: bool
    estado: str

    model_config = {"from_attributes": True}


class AssignmentEnriched(BaseModel):
    id: int
    refrigerador: str
    cliente: str
    equipo_id: int
    cliente_id: int
    fecha_asignacion: datetime
    fecha_retiro: Optional[datetime] = None
    activo: bool
    estado_actual: str = "Sin estado"
    funcionando: Optional[bool] = None
    temperatura_actual: Optional[float] = None


class StatusRecordCreate(BaseModel):
    asignacion_id: Optional[int] = None
    equipo_id: Optional[int] = None
    cliente_id: Optional[int] = None
    usuario_id: Optional[int] = None
    funcionando: Optional[bool] = None
    estado_general: Optional[str] = None
    temperatura_actual: Optional[float] = None
    temperatura_freezer: Optional[float] = None
    latitud: Optional[float] = None
    longitud: Optional[float] = None
    fecha_captura: Optional[datetime] = None


class StatusRecordRead(BaseModel):
    id: int
    asignacion_id: int
    equipo_id: int
    cliente_id: int
    usuario_id: Optional[int] = None
    funcionando: bool
    estado_general: str
    temperatura_actual: Optional[float] = None
    temperatura_freezer: Optional[float] = None
    latitud: float
    longitud: float
    fecha_revision: datetime
    fecha_captura: Optional[datetime] = None
    synced: bool
    census_state: CensusState

    model_config = {"from_attributes": True}


class StatusRecordEnriched(StatusRecordRead):
    refrigerador_info: str
    cliente_nombre: str
    usuario_nombre: str


class StatusFilter(BaseModel):
    equipo_id: Optional[int] = None
    cliente_id: Optional[int] = None
    asignacion_id: Optional[int] = None
    usuario_id: Optional[int] = None
    census_state: Optional[CensusState] = None
    synced: Optional[bool] = None
