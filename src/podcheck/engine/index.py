"""
Namespace index for podcheck.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from podcheck.models import Namespace


class NamespaceIndex:
    """
    Lookup of namespaces by name.

    Built in one pass over the namespace snapshot. A later namespace with
    a duplicate name replaces the earlier one.
    """

    def __init__(self, namespaces: Iterable[Namespace] = ()) -> None:
        self._by_name: dict[str, Namespace] = {}
        for namespace in namespaces:
            self._by_name[namespace.name] = namespace

    def get(self, name: str) -> Namespace | None:
        """Get a namespace by name, or None if unknown."""
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[Namespace]:
        return iter(self._by_name.values())
