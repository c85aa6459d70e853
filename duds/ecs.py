"""A small entity store: entities are integers holding one component per type."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class World:
    """Holds entities and the components attached to them."""

    def __init__(self) -> None:
        self._entities: dict[int, dict[type, Any]] = {}
        self._next_id = 0

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    @property
    def entities(self) -> list[int]:
        return list(self._entities)

    def _components(self, entity: int) -> dict[type, Any]:
        try:
            return self._entities[entity]
        except KeyError:
            raise KeyError(f"no such entity: {entity}") from None

    def spawn(self, *args: Any) -> int:
        """Create an entity carrying the given components and return its id."""
        entity = self._next_id
        self._next_id += 1
        self._entities[entity] = {}
        self.insert(entity, *args)
        return entity

    def insert(self, entity: int, *args: Any) -> None:
        """Attach components, replacing any of the same type."""
        store = self._components(entity)
        for component in args:
            store[type(component)] = component

    def remove(self, entity: int, component_type: type) -> Any:
        """Detach and return a component, or None if it was absent."""
        return self._components(entity).pop(component_type, None)

    def despawn(self, entity: int) -> None:
        """Delete an entity and all its components."""
        self._components(entity)
        del self._entities[entity]

    def get(self, entity: int, component_type: type) -> Any:
        """Return a component of the entity, or None if it has none."""
        return self._components(entity).get(component_type)

    def has(self, entity: int, component_type: type) -> bool:
        return component_type in self._components(entity)

    def query(self, *args: type, without: type | tuple[type, ...] = ()) -> Iterator[tuple]:
        """Yield ``(entity, component, ...)`` for entities holding every given type
        and none of the types in ``without``, in order of creation."""
        excluded = (without,) if isinstance(without, type) else tuple(without)
        for entity, store in list(self._entities.items()):
            if entity not in self._entities:
                continue
            if all(t in store for t in args) and not any(t in store for t in excluded):
                yield (entity, *(store[t] for t in args))

    def single(self, *args: type) -> tuple:
        """Return the one match of a query; raise LookupError if there is not exactly one."""
        matches = list(self.query(*args))
        if len(matches) != 1:
            names = ", ".join(t.__name__ for t in args)
            raise LookupError(f"expected one entity with ({names}), found {len(matches)}")
        return matches[0]