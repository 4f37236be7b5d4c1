"""A tiny HTML tag tree built with nested constructors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class Tag:
    name: str
    text: str = ""
    children: list[Tag] = field(default_factory=list)
    attributes: list[tuple[str, str]] = field(default_factory=list)

    def __str__(self) -> str:
        return "".join(self._render())

    def _render(self) -> Iterator[str]:
        yield f"<{self.name}"
        for key, value in self.attributes:
            yield f' {key}="{value}"'
        if not self.children and not self.text:
            yield "/>\n"
            return
        yield ">\n"
        if self.text:
            yield f"{self.text}\n"
        for child in self.children:
            yield from child._render()
        yield f"</{self.name}>\n"


class P(Tag):
    """A paragraph holding either text or child tags."""

    def __init__(self, *args: str | Tag) -> None:
        if len(args) == 1 and isinstance(args[0], str):
            super().__init__("p", text=args[0])
        elif all(isinstance(arg, Tag) for arg in args):
            super().__init__("p", children=list(args))
        else:
            raise TypeError("P takes a single text or any number of tags")


class IMG(Tag):
    """An image tag pointing at a URL."""

    def __init__(self, url: str) -> None:
        super().__init__("img", attributes=[("src", url)])