"""A Maybe wrapper for walking chains of optional attributes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class Address:
    house_name: Optional[str] = None


@dataclass
class Person:
    address: Optional[Address] = None


@dataclass(frozen=True)
class Maybe(Generic[T]):
    """Holds a value that may be None; operations skip when it is."""

    context: Optional[T]

    def with_(self, evaluator: Callable[[T], Optional[U]]) -> Maybe[U]:
        """Apply the evaluator to the value, unless there is none."""
        if self.context is None:
            return Maybe(None)
        return maybe(evaluator(self.context))

    def do(self, action: Callable[[T], Any]) -> Maybe[T]:
        """Run the action on the value, if there is one, and return self."""
        if self.context is not None:
            action(self.context)
        return self


def maybe(context: Optional[T]) -> Maybe[T]:
    return Maybe(context)


def print_house_name(person: Optional[Person]) -> Maybe[str]:
    """Print the person's house name when every link in the chain exists."""
    return (
        maybe(person)
        .with_(lambda p: p.address)
        .with_(lambda a: a.house_name)
        .do(print)
    )