"""PGN tag pairs and ordered tag lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional


@dataclass(frozen=True)
class Tag:
    """A PGN tag pair such as [White "A.Karpov"]."""

    name: str = ""
    value: str = ""

    def __str__(self) -> str:
        return f'[{self.name} "{self.value}"]'

    def matches(self, name: str) -> bool:
        """True when this tag carries the given name."""
        return self.name == name


class TagList:
    """Ordered tags with unique names; inserting a known name replaces it."""

    def __init__(self, tags: Optional[Iterable[Tag]] = None) -> None:
        self._tags: List[Tag] = []
        for tag in tags or ():
            self.insert(tag)

    def insert(self, tag: Tag) -> None:
        """Add tag, or replace the value of the tag with the same name."""
        for index, existing in enumerate(self._tags):
            if existing.matches(tag.name):
                self._tags[index] = tag
                return
        self._tags.append(tag)

    def erase(self, tag: Tag) -> None:
        """Remove the tag with the same name as tag, if any."""
        self._tags = [t for t in self._tags if not t.matches(tag.name)]

    def __contains__(self, name: object) -> bool:
        return any(tag.name == name for tag in self._tags)

    def __getitem__(self, name: str) -> Tag:
        for tag in self._tags:
            if tag.matches(name):
                return tag
        raise KeyError(f"Tag not found in TagList: {name}")

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagList):
            return NotImplemented
        return self._tags == other._tags

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(f"{tag}\n" for tag in self._tags)

    def __repr__(self) -> str:
        return f"TagList({self._tags!r})"