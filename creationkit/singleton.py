"""Singleton, monostate and per-thread singleton, and a testable alternative."""

from __future__ import annotations

import os
import threading
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Iterable, Optional, TypeVar, Union

T = TypeVar("T")

PathType = Union[str, "os.PathLike[str]"]


class Database(ABC):
    @abstractmethod
    def get_population(self, name: str) -> int:
        """Return the population of the named capital."""


def _load_capitals(filename: PathType) -> dict[str, int]:
    try:
        with open(filename, encoding="utf-8") as stream:
            lines = stream.read().splitlines()
    except OSError:
        return {}
    capitals: dict[str, int] = {}
    it = iter(lines)
    for name in it:
        value = next(it, "")
        try:
            capitals[name] = int(value)
        except ValueError as exc:
            raise ValueError(f"bad population for {name!r}: {value!r}") from exc
    return capitals


class SingletonDatabase(Database):
    """A database of capitals, read from alternating name/population lines."""

    _instance: ClassVar[Optional[SingletonDatabase]] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, filename: PathType = "capitals.txt") -> None:
        print("Initializing database")
        self._capitals = _load_capitals(filename)

    @classmethod
    def get(cls) -> SingletonDatabase:
        """Return the single shared instance, loading it on first use."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def get_population(self, name: str) -> int:
        return self._capitals.get(name, 0)


class DummyDatabase(Database):
    """A fixed in-memory database for tests."""

    def __init__(self) -> None:
        self._capitals = {"alpha": 1, "beta": 2, "gamma": 3}

    def get_population(self, name: str) -> int:
        return self._capitals.get(name, 0)


class SingletonRecordFinder:
    def total_population(self, names: Iterable[str]) -> int:
        db = SingletonDatabase.get()
        return sum(db.get_population(name) for name in names)


class ConfigurableRecordFinder:
    def __init__(self, db: Database) -> None:
        self.db = db

    def total_population(self, names: Iterable[str]) -> int:
        return sum(self.db.get_population(name) for name in names)


class SingletonTester:
    def is_singleton(self, factory: Callable[[], T]) -> bool:
        """Return whether two calls to the factory yield the same object."""
        return factory() is factory()


class MonostatePrinter:
    """Every instance shares one id."""

    _id: ClassVar[int] = 0

    @property
    def id(self) -> int:
        return MonostatePrinter._id

    @id.setter
    def id(self, value: int) -> None:
        MonostatePrinter._id = value


class PerThreadSingleton:
    """One instance per thread, recording the thread it belongs to."""

    _local: ClassVar[threading.local] = threading.local()

    def __init__(self) -> None:
        self.id = threading.get_ident()

    @classmethod
    def get(cls) -> PerThreadSingleton:
        instance = getattr(cls._local, "instance", None)
        if instance is None:
            instance = cls()
            cls._local.instance = instance
        return instance