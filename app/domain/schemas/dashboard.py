"""Pydantic schemas for the dashboard aggregate."""

from datetime import datetime

from pydantic import BaseModel


class ClientCounts(BaseModel):
    total: int
    activos: int


class EquipmentCounts(BaseModel):
    total: int
    asignados: int
    libres: int
    funcionando: int
    en_reparacion: int


class UserCounts(BaseModel):
    total: int


class DashboardSummary(BaseModel):
    clientes: ClientCounts
    refrigeradores: EquipmentCounts
    usuarios: UserCounts
    timestamp: datetime
