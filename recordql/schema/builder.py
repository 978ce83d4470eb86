"""
Schema construction.

The schema is built in two passes over the type registry:

1. Object and connection types. Common types are registered first, then one
   TypeSet per metadata descriptor. Object types reference each other by
   name through the registry, so build order does not matter.
2. Input objects and mutation payloads. These read the finished field maps
   of the pass-1 types, so pass 2 starts only once every pass-1 entry exists.

The registry is then frozen, the Query/Mutation roots are assembled and the
graphene schema is returned. Any configuration error aborts construction.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

import graphene

from ..core.exceptions import (
    DuplicateTypeError,
    SchemaConfigurationError,
    UnknownTypeError,
)
from ..core.interfaces import StorageBackendProtocol
from ..core.metadata import TypeMetadata, parse_type_metadata
from ..core.settings import SchemaSettings
from ..generators.builtins import Interfaces, create_interfaces
from ..generators.connections import create_connection
from ..generators.constants import (
    MUTATION_ROOT_NAME,
    QUERY_ROOT_NAME,
    RESERVED_TYPE_NAMES,
    connection_type_name,
    edge_type_name,
    input_object_name,
    mutation_type_name,
)
from ..generators.inputs import create_input_object
from ..generators.mutations import create_mutation
from ..generators.roots import (
    DEFAULT_MUTATION_FIELD_CREATORS,
    DEFAULT_QUERY_FIELD_CREATORS,
    RootFieldCreator,
    create_root_fields_for_types,
    create_root_type,
)
from ..generators.types import create_type
from .registry import TypeRegistry, TypeSet

logger = logging.getLogger(__name__)


@dataclass
class SchemaConfig:
    """Common types and root field creators merged into the generated schema."""

    common_types: Sequence[type[graphene.ObjectType]] = ()
    common_query_fields: Mapping[str, Any] = field(default_factory=dict)
    common_mutation_fields: Mapping[str, Any] = field(default_factory=dict)
    type_query_field_creators: Sequence[RootFieldCreator] = DEFAULT_QUERY_FIELD_CREATORS
    type_mutation_field_creators: Sequence[RootFieldCreator] = (
        DEFAULT_MUTATION_FIELD_CREATORS
    )


def _generated_names(type_name: str) -> set[str]:
    return {
        connection_type_name(type_name),
        edge_type_name(type_name),
        input_object_name(type_name),
        mutation_type_name(type_name),
    }


def validate_metadata(
    metadata: Sequence[TypeMetadata], common_names: Iterable[str] = ()
) -> None:
    """
    Check names and references before anything is built.

    Type names must be unique and must not collide with built-in or
    generated names; every referenced type must be a common type or
    described by the metadata.
    """
    known_names = list(common_names)
    for type_metadata in metadata:
        known_names.append(type_metadata.name)

    seen: set[str] = set()
    generated: set[str] = set()
    for name in known_names:
        if name in seen:
            raise DuplicateTypeError(f"Type '{name}' is defined more than once", name)
        if name in RESERVED_TYPE_NAMES:
            raise DuplicateTypeError(f"Type name '{name}' is reserved", name)
        seen.add(name)
        generated.update(_generated_names(name))

    clashes = seen & generated
    if clashes:
        name = sorted(clashes)[0]
        raise DuplicateTypeError(
            f"Type name '{name}' collides with a generated type name", name
        )

    for type_metadata in metadata:
        if not type_metadata.fields:
            raise SchemaConfigurationError(
                f"Type '{type_metadata.name}' has no fields", type_metadata.name
            )
        for field_metadata in type_metadata.fields:
            referenced = field_metadata.referenced_type
            if referenced is not None and referenced not in seen:
                raise UnknownTypeError(
                    f"Field '{type_metadata.name}.{field_metadata.name}' "
                    f"references unknown type '{referenced}'",
                    type_metadata.name,
                    field_metadata.name,
                    referenced_name=referenced,
                )


def build_type_registry(
    metadata: Sequence[TypeMetadata],
    storage: StorageBackendProtocol,
    interfaces: Interfaces,
    common_types: Sequence[type[graphene.ObjectType]] = (),
) -> TypeRegistry:
    """Run both construction passes and return the frozen registry."""
    registry = TypeRegistry()

    # Pass 1: object and connection types
    for common_type in common_types:
        type_set = TypeSet(type=common_type)
        registry.add(type_set.merge(connection=create_connection(type_set, interfaces)))

    for type_metadata in metadata:
        object_type = create_type(type_metadata, registry.get_type_set, storage)
        type_set = TypeSet(type=object_type, metadata=type_metadata)
        registry.add(type_set.merge(connection=create_connection(type_set, interfaces)))

    # Pass 2: input objects and mutation payloads
    for name, type_set in list(registry.items()):
        registry.update(
            name,
            input_object=create_input_object(type_set, interfaces),
            mutation=create_mutation(type_set, interfaces),
        )
        logger.debug(f"Completed type set for {name}")

    return registry.freeze()


def _merge_root_fields(
    root_name: str, common: Mapping[str, Any], generated: Mapping[str, Any]
) -> dict[str, Any]:
    overlap = set(common) & set(generated)
    if overlap:
        raise SchemaConfigurationError(
            f"{root_name} fields {sorted(overlap)} are both common and generated"
        )
    return {**common, **generated}


def create_schema(
    config: SchemaConfig,
    metadata: Sequence[TypeMetadata],
    storage: StorageBackendProtocol,
    *,
    auto_camelcase: bool = False,
) -> graphene.Schema:
    """
    Build the graphene schema for ``metadata`` on top of ``config``.

    Resolvers generated for the schema read and write records through
    ``storage``.
    """
    common_names = [t._meta.name for t in config.common_types]
    validate_metadata(metadata, common_names)

    interfaces = create_interfaces()
    registry = build_type_registry(
        metadata, storage, interfaces, common_types=config.common_types
    )

    query_fields = _merge_root_fields(
        QUERY_ROOT_NAME,
        config.common_query_fields,
        create_root_fields_for_types(
            config.type_query_field_creators, registry, storage
        ),
    )
    mutation_fields = _merge_root_fields(
        MUTATION_ROOT_NAME,
        config.common_mutation_fields,
        create_root_fields_for_types(
            config.type_mutation_field_creators, registry, storage
        ),
    )
    if not query_fields:
        raise SchemaConfigurationError(f"{QUERY_ROOT_NAME} has no fields")

    query = create_root_type(QUERY_ROOT_NAME, query_fields)
    mutation = (
        create_root_type(MUTATION_ROOT_NAME, mutation_fields)
        if mutation_fields
        else None
    )

    schema = graphene.Schema(
        query=query,
        mutation=mutation,
        types=registry.all_types(),
        auto_camelcase=auto_camelcase,
    )
    logger.info(
        f"Built schema with {len(registry)} record types, "
        f"{len(query_fields)} query and {len(mutation_fields)} mutation fields"
    )
    return schema


def build_schema(
    metadata: Iterable[Union[TypeMetadata, Mapping[str, Any]]],
    storage: StorageBackendProtocol,
    *,
    config: Optional[SchemaConfig] = None,
    auto_camelcase: bool = False,
) -> graphene.Schema:
    """Build a schema from parsed metadata or raw descriptor mappings."""
    metadata = [
        m if isinstance(m, TypeMetadata) else parse_type_metadata(m) for m in metadata
    ]
    return create_schema(
        config or SchemaConfig(), metadata, storage, auto_camelcase=auto_camelcase
    )


class SchemaBuilder:
    """
    Builds the schema once from configured settings and caches it.
    """

    def __init__(
        self,
        settings: Optional[SchemaSettings] = None,
        storage: Optional[StorageBackendProtocol] = None,
        config: Optional[SchemaConfig] = None,
        metadata: Optional[Sequence[TypeMetadata]] = None,
    ):
        self.settings = settings or SchemaSettings.from_settings()
        self.config = config
        self._storage = storage
        self._metadata = metadata
        self._schema: Optional[graphene.Schema] = None
        self._lock = threading.Lock()

    @property
    def storage(self) -> StorageBackendProtocol:
        if self._storage is None:
            self._storage = self.settings.get_storage()
        return self._storage

    def load_metadata(self) -> list[TypeMetadata]:
        if self._metadata is not None:
            return list(self._metadata)
        from ..core.meta_loader import load_metadata

        return load_metadata(self.settings.metadata_source)

    def build_config(self) -> SchemaConfig:
        if self.config is not None:
            return self.config
        return SchemaConfig(
            type_query_field_creators=(
                DEFAULT_QUERY_FIELD_CREATORS
                if self.settings.generate_root_queries
                else ()
            ),
            type_mutation_field_creators=(
                DEFAULT_MUTATION_FIELD_CREATORS
                if self.settings.generate_root_mutations
                else ()
            ),
        )

    def get_schema(self) -> graphene.Schema:
        with self._lock:
            if self._schema is None:
                self._schema = create_schema(
                    self.build_config(),
                    self.load_metadata(),
                    self.storage,
                    auto_camelcase=self.settings.auto_camelcase,
                )
            return self._schema

    def clear(self) -> None:
        with self._lock:
            self._schema = None
