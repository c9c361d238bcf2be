"""A registry of named resources grouped by category."""

from __future__ import annotations

from typing import ClassVar, TypeVar

_R = TypeVar("_R", bound="Resource")


class Resource:
    """Base class of managed resources.

    Subclasses set ``category`` to the name of the group they are stored in.
    """

    category: ClassVar[str | None] = None


def _category_of(kind: type) -> str:
    category = getattr(kind, "category", None)
    if not isinstance(category, str):
        raise TypeError(f"{kind.__name__} does not define a resource category")
    return category


class ResourceManager:
    """Stores resources by category and name."""

    def __init__(self) -> None:
        self._resources: dict[str, dict[str, Resource]] = {}

    def add(self, name: str, resource: Resource) -> None:
        """Store ``resource`` under ``name`` in its category, replacing any previous one."""
        category = _category_of(type(resource))
        self._resources.setdefault(category, {})[name] = resource

    def get(self, kind: type[_R], name: str) -> _R:
        """Return the resource of ``kind``'s category stored under ``name``.

        Raises KeyError if the category or the name is unknown.
        """
        category = _category_of(kind)
        try:
            return self._resources[category][name]  # type: ignore[return-value]
        except KeyError:
            raise KeyError(f"no {category} resource named {name!r}") from None

    def resource_lists(self) -> dict[str, list[str]]:
        """Return each category with the sorted names of its resources."""
        return {category: sorted(names) for category, names in self._resources.items()}