"""Registry-driven instantiation of Parse objects from class-name tags."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Optional, Type

from .constants import CLASS_NAME_ROLE, CLASS_NAME_USER, ENDPOINT_ROLES, ENDPOINT_USERS
from .objects import ParseObject, ParseRole, ParseUser

logger = logging.getLogger(__name__)

ObjectConstructor = Callable[[str], ParseObject]


def _subclass_constructor(cls: Type[ParseObject]) -> ObjectConstructor:
    # Classes with a fixed CLASS_NAME take no arguments; the rest take the tag.
    if getattr(cls, "CLASS_NAME", None):

        def construct(class_name: str) -> ParseObject:
            return cls()

    else:

        def construct(class_name: str) -> ParseObject:
            return cls(class_name)

    return construct


def _check_constructor(constructor: ObjectConstructor) -> None:
    if not callable(constructor):
        raise TypeError(f"constructor must be callable, got {type(constructor).__name__}")


class ObjectFactory:
    """Maps class-name tags to constructors for specialised object types.

    Lookups that miss fall through to the default constructor, which builds a
    plain :class:`ParseObject` stamped with the requested class name. Unknown
    tags therefore never fail, so classes added on the server keep working.
    """

    _instance: Optional["ObjectFactory"] = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._constructors: Dict[str, ObjectConstructor] = {}
        self._default: ObjectConstructor = ParseObject
        self.register_subclass(ParseUser, ENDPOINT_USERS, CLASS_NAME_USER)
        self.register_subclass(ParseRole, ENDPOINT_ROLES, CLASS_NAME_ROLE)

    @classmethod
    def get_instance(cls) -> "ObjectFactory":
        """Return the process-wide factory, creating it if necessary."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def register(self, tag: str, constructor: ObjectConstructor) -> None:
        _check_constructor(constructor)
        with self._lock:
            if tag in self._constructors:
                logger.debug("Overwriting existing constructor for %s", tag)
            self._constructors[tag] = constructor
        logger.debug("Registered constructor for class: %s", tag)

    def register_subclass(self, cls: Type[ParseObject], *tags: str) -> None:
        """Register a ParseObject subclass under ``tags`` (default: its CLASS_NAME).

        Subclasses without a CLASS_NAME are constructed with the requested tag
        as their only argument, like :class:`ParseObject` itself.
        """
        if not (isinstance(cls, type) and issubclass(cls, ParseObject)):
            raise TypeError(f"{cls!r} is not a ParseObject subclass")
        if not tags:
            class_name = getattr(cls, "CLASS_NAME", None)
            if not class_name:
                raise ValueError(f"{cls.__name__} has no CLASS_NAME; pass the tags explicitly")
            tags = (class_name,)
        constructor = _subclass_constructor(cls)
        for tag in tags:
            self.register(tag, constructor)

    def unregister(self, tag: str) -> None:
        with self._lock:
            self._constructors.pop(tag, None)

    def is_registered(self, tag: str) -> bool:
        with self._lock:
            return tag in self._constructors

    def set_default(self, constructor: ObjectConstructor) -> None:
        """Replace the constructor used for tags with no registration.

        ``constructor`` is called with the class name and must return a
        :class:`ParseObject`.
        """
        _check_constructor(constructor)
        with self._lock:
            self._default = constructor

    def create(self, class_name: str) -> ParseObject:
        """Create an object of the type matching ``class_name``.

        A constructor that returns anything other than a ParseObject is
        ignored in favour of a generic ParseObject.
        """
        with self._lock:
            constructor = self._constructors.get(class_name, self._default)
        obj = constructor(class_name)
        if not isinstance(obj, ParseObject):
            logger.warning(
                "Constructor for %s returned %s; using a generic ParseObject",
                class_name,
                type(obj).__name__,
            )
            obj = ParseObject(class_name)
        return obj


def create_object(class_name: str) -> ParseObject:
    return ObjectFactory.get_instance().create(class_name)


__all__ = ["ObjectConstructor", "ObjectFactory", "create_object"]
