"""
Type registry used while a schema is being constructed.

The registry maps a type name to its ``TypeSet``: the object type plus the
connection, input object and mutation payload derived from it. It is only
mutable during construction; ``freeze()`` seals it before the schema is
handed out.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any, Iterator, Optional

from ..core.exceptions import (
    DuplicateTypeError,
    RegistryFrozenError,
    UnknownTypeError,
)
from ..core.metadata import TypeMetadata


@dataclasses.dataclass(frozen=True)
class TypeSet:
    type: Any
    connection: Any = None
    input_object: Any = None
    mutation: Any = None
    metadata: Optional[TypeMetadata] = None

    @property
    def name(self) -> str:
        return self.type._meta.name

    @property
    def is_builtin(self) -> bool:
        """True for common types supplied ready-built rather than from metadata."""
        return self.metadata is None

    def merge(self, **changes: Any) -> "TypeSet":
        return dataclasses.replace(self, **changes)


class TypeRegistry(Mapping):
    def __init__(self):
        self._type_sets: dict[str, TypeSet] = {}
        self._frozen = False

    def __getitem__(self, name: str) -> TypeSet:
        return self._type_sets[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._type_sets)

    def __len__(self) -> int:
        return len(self._type_sets)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get_type_set(self, name: str) -> TypeSet:
        """Look up a TypeSet, failing construction if the name is unknown."""
        try:
            return self._type_sets[name]
        except KeyError:
            raise UnknownTypeError(
                f"Type '{name}' is not registered", referenced_name=name
            ) from None

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RegistryFrozenError("Type registry is frozen")

    def add(self, type_set: TypeSet) -> TypeSet:
        self._check_mutable()
        if type_set.name in self._type_sets:
            raise DuplicateTypeError(
                f"Type '{type_set.name}' is already registered", type_set.name
            )
        self._type_sets[type_set.name] = type_set
        return type_set

    def update(self, name: str, **changes: Any) -> TypeSet:
        self._check_mutable()
        type_set = self.get_type_set(name).merge(**changes)
        self._type_sets[name] = type_set
        return type_set

    def freeze(self) -> "TypeRegistry":
        self._frozen = True
        return self

    def all_types(self) -> list[Any]:
        """Every generated graphene type, for passing to ``graphene.Schema``."""
        types = []
        for type_set in self._type_sets.values():
            types.extend(
                t
                for t in (
                    type_set.type,
                    type_set.connection,
                    type_set.input_object,
                    type_set.mutation,
                )
                if t is not None
            )
        return types
