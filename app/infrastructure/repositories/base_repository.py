"""
In-memory implementation of the Base Repository.
"""

import threading
from bisect import insort
from collections import defaultdict
from datetime import datetime
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, Type, TypeVar

import pytz
from pydantic import ValidationError as PydanticValidationError

from app.config import get_settings
from app.core.exceptions import DuplicateError, NotFoundError, ValidationError
from app.domain.models.base import Record
from app.domain.repositories.base import BaseRepository

ModelType = TypeVar("ModelType", bound=Record)


def now() -> datetime:
    """Current time in the configured timezone."""
    return datetime.now(pytz.timezone(get_settings().TIMEZONE))


class InMemoryRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository backed by a dict keyed by id.

    The repository is the only writer of ``id`` and of the creation timestamp.
    Ids come from a high-water mark and are never reused; a rejected insert
    does not consume one. Unique fields map to the message raised when a
    second record claims the same value.
    """

    def __init__(
        self,
        name: str,
        model: Type[ModelType],
        timestamp_field: Optional[str] = "fecha_creacion",
        unique: Optional[Mapping[str, str]] = None,
        indexed: Iterable[str] = (),
    ):
        self.name = name
        self.model = model
        self.timestamp_field = timestamp_field
        self._rows: Dict[int, ModelType] = {}
        self._last_id = 0
        self._unique_messages = dict(unique or {})
        self._unique: Dict[str, Dict[Any, int]] = {field: {} for field in self._unique_messages}
        self._indexes: Dict[str, Dict[Any, List[int]]] = {field: defaultdict(list) for field in indexed}
        self._lock = threading.RLock()

    def lock(self) -> threading.RLock:
        return self._lock

    @property
    def last_id(self) -> int:
        return self._last_id

    def get_by_id(self, id: int) -> Optional[ModelType]:
        return self._rows.get(id)

    def get_by(self, field: str, value: Any) -> Optional[ModelType]:
        with self._lock:
            row_id = self._unique[field].get(value)
            return self._rows.get(row_id) if row_id is not None else None

    def find_by(self, field: str, value: Any) -> List[ModelType]:
        with self._lock:
            if field in self._indexes:
                return [self._rows[row_id] for row_id in self._indexes[field].get(value, [])]
            return [row for row in self._rows.values() if getattr(row, field) == value]

    def list(
        self,
        skip: int = 0,
        limit: Optional[int] = None,
        where: Optional[Callable[[ModelType], bool]] = None,
    ) -> List[ModelType]:
        with self._lock:
            rows = list(self._rows.values())
        if where is not None:
            rows = [row for row in rows if where(row)]
        end = skip + limit if limit is not None else None
        return rows[skip:end]

    def count(self, where: Optional[Callable[[ModelType], bool]] = None) -> int:
        if where is None:
            return len(self._rows)
        return len(self.list(where=where))

    def create(self, obj_in: Any) -> ModelType:
        if hasattr(obj_in, "model_dump"):
            data = obj_in.model_dump(exclude_unset=True)
        else:
            data = dict(obj_in)
        data.pop("id", None)

        with self._lock:
            self._check_unique(data)
            new_id = self._last_id + 1
            data["id"] = new_id
            if self.timestamp_field:
                data[self.timestamp_field] = now()
            db_obj = self._build(data)

            self._rows[new_id] = db_obj
            self._last_id = new_id
            self._index(db_obj)
            return db_obj

    def update(self, id: int, changes: Dict[str, Any]) -> ModelType:
        changes = {k: v for k, v in changes.items() if k != "id"}
        with self._lock:
            current = self._rows.get(id)
            if current is None:
                raise NotFoundError(f"{self.name}: registro {id} no encontrado")
            self._check_unique(changes, exclude_id=id)
            db_obj = self._build({**current.model_dump(), **changes})

            self._unindex(current)
            self._rows[id] = db_obj
            self._index(db_obj)
            return db_obj

    def _build(self, data: Dict[str, Any]) -> ModelType:
        try:
            return self.model.model_validate(data)
        except PydanticValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ValidationError(f"{self.name}: datos inválidos", {"fields": fields}) from e

    def _check_unique(self, data: Dict[str, Any], exclude_id: Optional[int] = None) -> None:
        for field, message in self._unique_messages.items():
            value = data.get(field)
            if value is None:
                continue
            owner = self._unique[field].get(value)
            if owner is not None and owner != exclude_id:
                raise DuplicateError(message, {field: value})

    def _index(self, row: ModelType) -> None:
        for field, index in self._unique.items():
            value = getattr(row, field)
            if value is not None:
                index[value] = row.id
        for field, index in self._indexes.items():
            insort(index[getattr(row, field)], row.id)

    def _unindex(self, row: ModelType) -> None:
        for field, index in self._unique.items():
            index.pop(getattr(row, field), None)
        for field, index in self._indexes.items():
            index[getattr(row, field)].remove(row.id)
