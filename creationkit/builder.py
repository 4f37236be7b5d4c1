"""Building a person in facets: where they live and where they work."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Person:
    """A person's address and employment details."""

    street_address: str = ""
    post_code: str = ""
    city: str = ""
    company_name: str = ""
    position: str = ""
    annual_income: int = 0

    @staticmethod
    def create() -> PersonBuilder:
        """Start building a new person."""
        return PersonBuilder()

    def __str__(self) -> str:
        return (
            f"street_address: {self.street_address}"
            f" post_code: {self.post_code}"
            f" city: {self.city}"
            f" company_name: {self.company_name}"
            f" position: {self.position}"
            f" annual_income: {self.annual_income}"
        )


class PersonBuilderBase:
    """Shared base of every builder facet; all facets work on one person."""

    def __init__(self, person: Person) -> None:
        self._person = person

    def lives(self) -> PersonAddressBuilder:
        """Switch to the address facet."""
        return PersonAddressBuilder(self._person)

    def works(self) -> PersonJobBuilder:
        """Switch to the employment facet."""
        return PersonJobBuilder(self._person)

    def build(self) -> Person:
        """Return the person built so far."""
        return self._person


class PersonBuilder(PersonBuilderBase):
    """Entry point that owns a fresh person."""

    def __init__(self) -> None:
        super().__init__(Person())


class PersonAddressBuilder(PersonBuilderBase):
    def at(self, street_address: str) -> PersonAddressBuilder:
        self._person.street_address = street_address
        return self

    def with_postcode(self, post_code: str) -> PersonAddressBuilder:
        self._person.post_code = post_code
        return self

    def in_(self, city: str) -> PersonAddressBuilder:
        self._person.city = city
        return self


class PersonJobBuilder(PersonBuilderBase):
    def at(self, company_name: str) -> PersonJobBuilder:
        self._person.company_name = company_name
        return self

    def as_a(self, position: str) -> PersonJobBuilder:
        self._person.position = position
        return self

    def earning(self, annual_income: int) -> PersonJobBuilder:
        self._person.annual_income = annual_income
        return self