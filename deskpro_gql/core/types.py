"""GraphQL type descriptors used in variable declarations.

A descriptor renders to GraphQL type syntax:

    scalar_of(TypeKind.ID, nullable=False)       -> ID!
    list_of(int_type(), nullable=False)           -> [Int]!
    object_of("TicketInput", nullable=False)      -> TicketInput!

Nothing is checked against a schema; object names are used verbatim.
"""

from dataclasses import dataclass
from enum import Enum


class TypeKind(Enum):
    """Built-in GraphQL scalar kinds."""
    ID = "ID"
    INT = "Int"
    FLOAT = "Float"
    STRING = "String"
    BOOLEAN = "Boolean"


@dataclass(frozen=True)
class TypeDescriptor:
    """A scalar, object or list type with its nullability."""
    name: str
    nullable: bool = True
    of_type: "TypeDescriptor | None" = None  # Set for list types only

    @property
    def is_list(self) -> bool:
        return self.of_type is not None

    def render(self) -> str:
        """Render as GraphQL type syntax, e.g. `[Int]!`."""
        text = f"[{self.of_type.render()}]" if self.of_type is not None else self.name
        if not self.nullable:
            text += "!"
        return text

    def __str__(self) -> str:
        return self.render()


def scalar_of(kind: TypeKind | str, nullable: bool = True) -> TypeDescriptor:
    """Create a built-in scalar type. `kind` may be a TypeKind or its name."""
    kind = TypeKind(kind) if isinstance(kind, str) else kind
    return TypeDescriptor(kind.value, nullable)


def object_of(name: str, nullable: bool = True) -> TypeDescriptor:
    """Create an object, input or custom scalar type."""
    return TypeDescriptor(name, nullable)


def list_of(inner: TypeDescriptor, nullable: bool = True) -> TypeDescriptor:
    """Create a list of `inner`."""
    return TypeDescriptor("", nullable, of_type=inner)


def id_type(nullable: bool = True) -> TypeDescriptor:
    return scalar_of(TypeKind.ID, nullable)


def int_type(nullable: bool = True) -> TypeDescriptor:
    return scalar_of(TypeKind.INT, nullable)


def float_type(nullable: bool = True) -> TypeDescriptor:
    return scalar_of(TypeKind.FLOAT, nullable)


def string_type(nullable: bool = True) -> TypeDescriptor:
    return scalar_of(TypeKind.STRING, nullable)


def boolean_type(nullable: bool = True) -> TypeDescriptor:
    return scalar_of(TypeKind.BOOLEAN, nullable)
