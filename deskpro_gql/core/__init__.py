"""Core modules for building and executing GraphQL operations."""

from .auth import Auth, KeyAuth, TokenAuth
from .builder import MutationBuilder, OperationBuilder, QueryBuilder
from .client import DEFAULT_GRAPHQL_PATH, Client
from .exceptions import (
    AuthenticationError,
    GraphQLError,
    InvalidResponseError,
    NotFoundError,
    QueryError,
)
from .introspection import INTROSPECTION_QUERY, print_schema_sdl
from .scalars import (
    DateHandler,
    DateTimeHandler,
    DecimalHandler,
    ModelHandler,
    ScalarHandler,
    ScalarRegistry,
    UUIDHandler,
)
from .selection import (
    Directive,
    Field,
    Fragment,
    Leaf,
    SelectionItem,
    include_if,
    skip_if,
)
from .transport import HTTPTransport, HttpxTransport, TransportResponse
from .types import (
    TypeDescriptor,
    TypeKind,
    boolean_type,
    float_type,
    id_type,
    int_type,
    list_of,
    object_of,
    scalar_of,
    string_type,
)

__all__ = [
    # Auth
    "Auth",
    "TokenAuth",
    "KeyAuth",
    # Builders
    "OperationBuilder",
    "QueryBuilder",
    "MutationBuilder",
    # Client
    "Client",
    "DEFAULT_GRAPHQL_PATH",
    # Errors
    "GraphQLError",
    "InvalidResponseError",
    "AuthenticationError",
    "NotFoundError",
    "QueryError",
    # Introspection
    "INTROSPECTION_QUERY",
    "print_schema_sdl",
    # Scalars
    "ScalarHandler",
    "ScalarRegistry",
    "DateTimeHandler",
    "DateHandler",
    "UUIDHandler",
    "DecimalHandler",
    "ModelHandler",
    # Selections
    "SelectionItem",
    "Leaf",
    "Field",
    "Fragment",
    "Directive",
    "include_if",
    "skip_if",
    # Transport
    "HTTPTransport",
    "HttpxTransport",
    "TransportResponse",
    # Types
    "TypeDescriptor",
    "TypeKind",
    "scalar_of",
    "object_of",
    "list_of",
    "id_type",
    "int_type",
    "float_type",
    "string_type",
    "boolean_type",
]
