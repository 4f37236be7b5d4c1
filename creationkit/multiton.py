"""A keyed registry of instances: one instance per key, per class."""

from __future__ import annotations

import enum
import threading
from typing import Any, ClassVar, Hashable, TypeVar

M = TypeVar("M", bound="Multiton")


class Importance(enum.Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"


class Multiton:
    """Base class whose ``get`` returns one shared instance per key.

    Every subclass keeps its own registry.
    """

    _instances: ClassVar[dict[Hashable, Any]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._instances = {}

    @classmethod
    def get(cls: type[M], key: Hashable) -> M:
        """Return the instance for the key, creating it on first request."""
        with Multiton._lock:
            try:
                return cls._instances[key]
            except KeyError:
                instance = cls()
                cls._instances[key] = instance
                return instance


class Printer(Multiton):
    """Counts and reports every instance created."""

    total_instance_count: ClassVar[int] = 0

    def __init__(self) -> None:
        Printer.total_instance_count += 1
        print(f"A total of {Printer.total_instance_count} instances created so far")