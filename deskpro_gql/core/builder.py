"""Query and mutation builders.

Builders accumulate variable declarations, top-level fields and fragments and
render them to a GraphQL operation document:

    query = client.create_query("GetNews", {"$id": id_type(nullable=False)})
    query.field("news", "id: $id", ["id", "title"])
    data = query.execute({"id": 1})
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .selection import (
    Directive,
    Field,
    Fragment,
    SelectionItem,
    collect_fragments,
    include_if,
    normalize_selection,
    render_selection,
    skip_if,
)
from .types import TypeDescriptor

if TYPE_CHECKING:
    from .client import Client


def strip_variable_name(name: str) -> str:
    """Strip one leading `$` from a variable name."""
    return name[1:] if name.startswith("$") else name


class OperationBuilder:
    """Base builder shared by queries and mutations."""

    operation_type = ""

    def __init__(
        self,
        client: "Client",
        operation_name: str,
        variables: Mapping[str, TypeDescriptor | str] | None = None,
    ):
        """Initialize the builder.

        Args:
            client: Client used by `execute`
            operation_name: Name of the operation
            variables: Variable declarations, name to type
        """
        self.client = client
        self.operation_name = operation_name
        self._variables: dict[str, TypeDescriptor | str] = {}
        self._fields: list[SelectionItem] = []

        for name, type_ in (variables or {}).items():
            self.variable(name, type_)

    @property
    def variables(self) -> dict[str, TypeDescriptor | str]:
        """Declared variables in declaration order, names without `$`."""
        return dict(self._variables)

    @property
    def fields(self) -> tuple[SelectionItem, ...]:
        return tuple(self._fields)

    @property
    def fragments(self) -> list[Fragment]:
        """Fragments referenced anywhere in the operation, once each."""
        return collect_fragments(tuple(self._fields))

    def variable(self, name: str, type_: TypeDescriptor | str) -> "OperationBuilder":
        """Declare a variable. Raw type strings are used verbatim."""
        if not isinstance(type_, (TypeDescriptor, str)):
            raise TypeError(f"Variable {name!r} must be declared with a TypeDescriptor or string")
        self._variables[strip_variable_name(name)] = type_
        return self

    def field(self, name: str, arguments: str = "", selection: Any = None) -> "OperationBuilder":
        """Add a top-level field.

        Args:
            name: Field name, optionally aliased as "alias: name"
            arguments: Raw argument text, e.g. "id: $id"
            selection: None for a leaf, a selection list, a Fragment or a Directive

        Returns:
            Self for chaining
        """
        if isinstance(selection, Directive):
            item = Field(name, arguments, selection.selection, directive=selection)
        else:
            item = Field(name, arguments, normalize_selection(selection))
        self._fields.append(item)
        return self

    def fragment(self, name: str, on_type: str, selection: Any) -> Fragment:
        """Create a fragment. It is not attached to any field."""
        return Fragment(name, on_type, selection)

    def include_if(self, condition: str, selection: Any = None) -> Directive:
        return include_if(condition, selection)

    def skip_if(self, condition: str, selection: Any = None) -> Directive:
        return skip_if(condition, selection)

    def render(self) -> str:
        """Render the complete operation document."""
        head = self.operation_type
        if self.operation_name:
            head += f" {self.operation_name}"
        if self._variables:
            declarations = ", ".join(
                f"${name}: {type_}" for name, type_ in self._variables.items()
            )
            head += f" ({declarations})"

        document = f"{head} {{\n{render_selection(tuple(self._fields), 1)}\n}}"

        fragments = self.fragments
        if fragments:
            document += "\n\n" + "\n\n".join(f.definition_text() for f in fragments)
        return document

    def execute(
        self,
        variables: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Render the document and execute it with `variables` bound."""
        return self.client.execute(self.render(), variables, headers=headers)

    def __str__(self) -> str:
        return self.render()


class QueryBuilder(OperationBuilder):
    """Builds `query` operations."""

    operation_type = "query"


class MutationBuilder(OperationBuilder):
    """Builds `mutation` operations."""

    operation_type = "mutation"
