"""Filtering products by composable specifications."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class Color(enum.Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Size(enum.Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass
class Product:
    name: str
    color: Color
    size: Size


class ProductFilter:
    """A filter that needs a new method for every new criterion."""

    def by_color(self, items: Iterable[Product], color: Color) -> list[Product]:
        return [item for item in items if item.color == color]

    def by_size(self, items: Iterable[Product], size: Size) -> list[Product]:
        return [item for item in items if item.size == size]

    def by_size_and_color(
        self, items: Iterable[Product], size: Size, color: Color
    ) -> list[Product]:
        return [item for item in items if item.size == size and item.color == color]


class Specification(ABC, Generic[T]):
    """A predicate over items that can be combined with ``&``."""

    @abstractmethod
    def is_satisfied(self, item: T) -> bool:
        """Return whether the item meets this specification."""

    def __and__(self, other: Specification[T]) -> AndSpecification[T]:
        return AndSpecification(self, other)


@dataclass(frozen=True)
class ColorSpecification(Specification[Product]):
    color: Color

    def is_satisfied(self, item: Product) -> bool:
        return item.color == self.color


@dataclass(frozen=True)
class SizeSpecification(Specification[Product]):
    size: Size

    def is_satisfied(self, item: Product) -> bool:
        return item.size == self.size


@dataclass(frozen=True)
class AndSpecification(Specification[T]):
    first: Specification[T]
    second: Specification[T]

    def is_satisfied(self, item: T) -> bool:
        return self.first.is_satisfied(item) and self.second.is_satisfied(item)


class Filter(ABC, Generic[T]):
    """Selects the items that satisfy a specification."""

    @abstractmethod
    def filter(self, items: Iterable[T], spec: Specification[T]) -> list[T]:
        """Return the items that satisfy the specification."""


class BetterFilter(Filter[Product]):
    def filter(self, items: Iterable[Product], spec: Specification[Product]) -> list[Product]:
        return [item for item in items if spec.is_satisfied(item)]