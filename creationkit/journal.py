"""A simple journal, with persistence kept as a separate concern."""

from __future__ import annotations

import itertools
import os
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Iterator, Union

PathType = Union[str, "os.PathLike[str]"]


def _write_entries(entries: Iterable[str], filename: PathType) -> None:
    with open(filename, "w", encoding="utf-8") as stream:
        stream.writelines(f"{entry}\n" for entry in entries)


@dataclass
class Journal:
    """A titled list of numbered entries."""

    title: str
    entries: list[str] = field(default_factory=list)

    # One running number shared by every journal.
    _counter: ClassVar[Iterator[int]] = itertools.count(1)

    def add(self, entry: str) -> None:
        """Append an entry, prefixed with the next running number."""
        self.entries.append(f"{next(Journal._counter)}: {entry}")

    def save(self, filename: PathType) -> None:
        """Write the entries to a file, one per line."""
        _write_entries(self.entries, filename)


class PersistenceManager:
    """Saves journals to files."""

    @staticmethod
    def save(journal: Journal, filename: PathType) -> None:
        """Write the journal's entries to a file, one per line."""
        _write_entries(journal.entries, filename)