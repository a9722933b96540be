"""Sales territory link between a user (vendor) and a client."""

from datetime import datetime

from app.domain.models.base import Record


class UserClient(Record):
    usuario_id: int
    cliente_id: int
    fecha_creacion: datetime
