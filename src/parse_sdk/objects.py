"""In-memory representations of remote Parse objects."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional

from .constants import CLASS_NAME_ROLE, CLASS_NAME_USER
from .dates import ensure_utc, parse_date
from .exceptions import INCORRECT_TYPE, ParseError
from .validation import is_valid_type
from .values import ParseRelation, RemoteValue


class ParseObject(RemoteValue):
    """A server-persisted entity: a class name plus typed field values.

    Datetime values are stored timezone-aware; naive ones are taken as UTC.
    """

    def __init__(self, class_name: str) -> None:
        self.class_name = class_name
        self.object_id: Optional[str] = None
        self.created_at: Optional[datetime] = None
        self.updated_at: Optional[datetime] = None
        self._data: Dict[str, Any] = {}
        self._dirty = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(class_name={self.class_name!r}, object_id={self.object_id!r})"

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def _check_value(self, key: str, value: Any) -> Any:
        if not is_valid_type(value):
            raise ParseError(
                INCORRECT_TYPE,
                f"Invalid type {type(value).__name__} for key '{key}' on {self.class_name}",
            )
        if isinstance(value, datetime):
            return ensure_utc(value)
        return value

    def put(self, key: str, value: Any) -> None:
        if not key:
            raise ValueError("key must be a non-empty string")
        self._data[key] = self._check_value(key, value)
        self._dirty = True

    def add(self, key: str, value: Any) -> None:
        """Append ``value`` to the array stored under ``key``."""
        value = self._check_value(key, value)
        current = self._data.get(key)
        if current is None:
            items: List[Any] = []
        elif isinstance(current, (list, tuple)):
            items = list(current)
        else:
            raise ParseError(INCORRECT_TYPE, f"Field '{key}' on {self.class_name} is not an array")
        items.append(value)
        self._data[key] = items
        self._dirty = True

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def get_date(self, key: str) -> Optional[datetime]:
        value = self._data.get(key)
        if isinstance(value, datetime):
            return ensure_utc(value)
        return parse_date(value)

    def has(self, key: str) -> bool:
        return key in self._data

    def remove(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._dirty = True

    def keys(self) -> List[str]:
        return list(self._data)

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    def set_dirty(self, dirty: bool) -> None:
        self._dirty = dirty

    def is_data_available(self) -> bool:
        return bool(self._data) or self.object_id is not None


class ParseUser(ParseObject):
    CLASS_NAME = CLASS_NAME_USER

    def __init__(self) -> None:
        super().__init__(self.CLASS_NAME)
        self.session_token: Optional[str] = None

    @property
    def username(self) -> Optional[str]:
        return self.get("username")

    @username.setter
    def username(self, value: str) -> None:
        self.put("username", value)

    @property
    def email(self) -> Optional[str]:
        return self.get("email")

    @email.setter
    def email(self, value: str) -> None:
        self.put("email", value)

    @property
    def password(self) -> Optional[str]:
        return self.get("password")

    @password.setter
    def password(self, value: str) -> None:
        self.put("password", value)


class ParseRole(ParseObject):
    CLASS_NAME = CLASS_NAME_ROLE

    def __init__(self, name: Optional[str] = None) -> None:
        super().__init__(self.CLASS_NAME)
        if name is not None:
            self.name = name

    @property
    def name(self) -> Optional[str]:
        return self.get("name")

    @name.setter
    def name(self, value: str) -> None:
        self.put("name", value)

    @property
    def users(self) -> ParseRelation:
        return ParseRelation(parent=self, key="users", target_class=CLASS_NAME_USER)

    @property
    def roles(self) -> ParseRelation:
        return ParseRelation(parent=self, key="roles", target_class=CLASS_NAME_ROLE)


__all__ = ["ParseObject", "ParseRole", "ParseUser"]
