# app/controllers/base.py

import logging
import threading
import uuid
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from app.utils.slug import slugify

log = logging.getLogger(__name__)

# Define TypeVar to link the stored record type to the Pydantic patch schemas
ModelType = TypeVar("ModelType", bound=BaseModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class BaseController(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    A generic in-memory repository for one entity kind.
    It provides create, read, update, and delete with slug maintenance.

    Records are kept in insertion order and handed out as deep copies, so
    a caller can never change a stored record without going through
    `update`.
    """

    # Field the slug is derived from when no explicit slug is given.
    slug_source: str = "name"

    def __init__(
        self, model: Type[ModelType], *, lock: Optional[threading.RLock] = None
    ):
        """
        Initializes the controller with a specific record model.
        Controllers belonging to one store share the store's lock.
        """
        self._model = model
        self._lock = lock or threading.RLock()
        self._items: Dict[str, ModelType] = {}
        self._remove_listeners: List[Callable[[str], None]] = []

    def _new_id(self) -> str:
        while True:
            new_id = str(uuid.uuid4())
            if new_id not in self._items:
                return new_id

    def _prepare(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Hook for subclasses to normalize field values before they are stored.
        """
        return data

    def get(self, id: Any) -> Optional[ModelType]:
        """
        Retrieves a single record by its id.
        """
        with self._lock:
            obj = self._items.get(id)
            return obj.model_copy(deep=True) if obj is not None else None

    def get_by_slug(self, slug: str) -> Optional[ModelType]:
        """
        Returns the first record with this slug. Slugs are not unique, the
        oldest record wins.
        """
        with self._lock:
            for obj in self._items.values():
                if obj.slug == slug:
                    return obj.model_copy(deep=True)
            return None

    def get_multi(self) -> List[ModelType]:
        """
        Retrieves all records. Callers must not rely on the order.
        """
        with self._lock:
            return [obj.model_copy(deep=True) for obj in self._items.values()]

    def exists(self, id: Any) -> bool:
        with self._lock:
            return id in self._items

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def create(self, *, obj_in: CreateSchemaType) -> ModelType:
        """
        Creates a new record with a fresh id and a derived slug.
        """
        obj_in_data = obj_in.model_dump()
        override = obj_in_data.pop("slug", None)
        with self._lock:
            obj_in_data = self._prepare(obj_in_data)
            new_id = self._new_id()
            slug = slugify(override) if override else slugify(
                obj_in_data.get(self.slug_source) or ""
            )
            db_obj = self._model(**obj_in_data, id=new_id, slug=slug)
            self._items[new_id] = db_obj
        log.info("Created %s %s (%s)", self._model.__name__, new_id, slug)
        return db_obj.model_copy(deep=True)

    def update(self, id: Any, *, obj_in: UpdateSchemaType) -> Optional[ModelType]:
        """
        Merges the supplied fields over an existing record.

        Fields left unset keep their value. A new slug-source value
        recomputes the slug unless an explicit slug is supplied, which is
        normalized and wins.
        """
        update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in list(update_data.items()):
            # None only clears fields whose default is None
            field_info = self._model.model_fields[field]
            if value is None and (
                field_info.is_required() or field_info.default is not None
            ):
                del update_data[field]

        with self._lock:
            db_obj = self._items.get(id)
            if db_obj is None:
                return None
            if not update_data:
                return db_obj.model_copy(deep=True)

            update_data = self._prepare(update_data)
            override = update_data.pop("slug", None)
            if override:
                update_data["slug"] = slugify(override)
            elif update_data.get(self.slug_source):
                update_data["slug"] = slugify(update_data[self.slug_source])

            obj_data = db_obj.model_dump()
            obj_data.update(update_data)
            updated = self._model.model_validate(obj_data)
            self._items[id] = updated
            return updated.model_copy(deep=True)

    def remove(self, id: Any) -> None:
        """
        Removes a record. Removing an unknown id does nothing.
        """
        with self._lock:
            if self._items.pop(id, None) is None:
                return
            for listener in self._remove_listeners:
                listener(id)
        log.info("Removed %s %s", self._model.__name__, id)

    def add_remove_listener(self, listener: Callable[[str], None]) -> None:
        """
        Registers a callback run under the lock after a record is removed.
        """
        self._remove_listeners.append(listener)
