"""Prototypes: contacts copied from templates, and deep-copied lines."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import ClassVar, TypeVar

T = TypeVar("T")


@dataclass
class Address:
    street: str
    city: str
    suite: int

    def __str__(self) -> str:
        return f"street: {self.street} city: {self.city} suite: {self.suite}"


@dataclass
class Contact:
    """A named contact; copying it copies its address too."""

    name: str
    address: Address

    def __copy__(self) -> Contact:
        return Contact(self.name, copy.copy(self.address))

    def __str__(self) -> str:
        return f"name: {self.name} works at {self.address}"


class EmployeeFactory:
    """Makes employees from per-office prototype contacts."""

    main: ClassVar[Contact] = Contact("", Address("123 East Dr", "London", 0))
    aux: ClassVar[Contact] = Contact("", Address("123B East Dr", "London", 0))

    @staticmethod
    def new_main_office_employee(name: str, suite: int) -> Contact:
        return EmployeeFactory._new_employee(name, suite, EmployeeFactory.main)

    @staticmethod
    def new_aux_office_employee(name: str, suite: int) -> Contact:
        return EmployeeFactory._new_employee(name, suite, EmployeeFactory.aux)

    @staticmethod
    def _new_employee(name: str, suite: int, proto: Contact) -> Contact:
        result = copy.copy(proto)
        result.name = name
        result.address.suite = suite
        return result


def clone(obj: T) -> T:
    """Return a fully independent copy of the object."""
    return copy.deepcopy(obj)


@dataclass
class Point:
    x: int = 0
    y: int = 0


@dataclass
class Line:
    start: Point
    end: Point

    def deep_copy(self) -> Line:
        """Return a line with its own copies of both end points."""
        return Line(Point(self.start.x, self.start.y), Point(self.end.x, self.end.y))