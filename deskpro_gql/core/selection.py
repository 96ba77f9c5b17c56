"""Selection sets: fields, fragments and directives.

Callers describe selections with plain Python values, the way GraphQL reads:

    [
        "id",
        "title",
        {"author: person": ["id", "name"]},
        {"categories(limit: 5)": include_if("$withCategories", ["id", "title"])},
        news_fragment,
    ]

`normalize_selection` turns such values into a tuple of selection items
(`Leaf`, `Field`, `Fragment` or `Directive`) and `render_selection` renders
that tuple back to GraphQL text. Field names, aliases and argument strings are
passed through verbatim.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

INDENT = "  "


@dataclass(frozen=True)
class Leaf:
    """A field without a sub-selection."""
    name: str


@dataclass(frozen=True)
class Field:
    """A field with optional arguments, sub-selection and directive.

    `name` may carry an alias ("alias: name"). `arguments` is the raw text
    placed between the parentheses.
    """
    name: str
    arguments: str = ""
    children: tuple["SelectionItem", ...] = ()
    directive: "Directive | None" = None


@dataclass(frozen=True)
class Fragment:
    """A named selection set bound to a type condition."""
    name: str
    on_type: str
    selection: tuple["SelectionItem", ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "selection", normalize_selection(self.selection))

    def spread_text(self) -> str:
        """Return the spread form, e.g. `...news_fragment`."""
        return f"...{self.name}"

    def definition_text(self) -> str:
        """Return the `fragment name on Type { ... }` definition block."""
        body = render_selection(self.selection, 1)
        return f"fragment {self.name} on {self.on_type} {{\n{body}\n}}"

    def __str__(self) -> str:
        return self.spread_text()


@dataclass(frozen=True)
class Directive:
    """A selection annotated with a directive such as `@include(if: $x)`."""
    name: str
    argument: str = ""
    selection: tuple["SelectionItem", ...] = field(default=())

    def __post_init__(self):
        if not self.name.startswith("@"):
            object.__setattr__(self, "name", f"@{self.name}")
        object.__setattr__(self, "selection", normalize_selection(self.selection))

    def annotation_text(self) -> str:
        """Return the directive itself, e.g. `@skip(if: $hidden)`."""
        if not self.argument:
            return self.name
        return f"{self.name}({self.argument})"


SelectionItem = Union[Leaf, Field, Fragment, Directive]


def include_if(condition: str, selection: Any = None) -> Directive:
    """Include `selection` only when `condition` is true."""
    return Directive("@include", f"if: {condition}", selection)


def skip_if(condition: str, selection: Any = None) -> Directive:
    """Skip `selection` when `condition` is true."""
    return Directive("@skip", f"if: {condition}", selection)


def normalize_selection(value: Any) -> tuple[SelectionItem, ...]:
    """Convert a caller supplied selection into a tuple of selection items.

    Accepted values are None, a field name string, a selection item, a
    mapping of field name to sub-selection, or a list/tuple of any of these.

    Raises:
        TypeError: If a value cannot be used as a selection
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return (Leaf(value),)
    if isinstance(value, (Leaf, Field, Fragment, Directive)):
        return (value,)
    if isinstance(value, Mapping):
        return tuple(_field_from_entry(key, sub) for key, sub in value.items())
    if isinstance(value, (list, tuple)):
        items: list[SelectionItem] = []
        for item in value:
            items.extend(normalize_selection(item))
        return tuple(items)
    raise TypeError(f"Unsupported selection value: {value!r}")


def _field_from_entry(name: str, value: Any) -> SelectionItem:
    if not isinstance(name, str):
        raise TypeError(f"Field names must be strings, got {name!r}")
    if value is None:
        return Leaf(name)
    if isinstance(value, Directive):
        return Field(name, children=value.selection, directive=value)
    return Field(name, children=normalize_selection(value))


def render_selection(items: tuple[SelectionItem, ...], depth: int = 1) -> str:
    """Render selection items, one per line, indented to `depth`."""
    return "\n".join(_render_item(item, depth) for item in items)


def _render_item(item: SelectionItem, depth: int) -> str:
    indent = INDENT * depth

    if isinstance(item, Leaf):
        return f"{indent}{item.name}"

    if isinstance(item, Fragment):
        return f"{indent}{item.spread_text()}"

    if isinstance(item, Directive):
        # Without a field to attach to, a directive becomes an inline fragment
        return _render_block(f"{indent}... {item.annotation_text()}", item.selection, depth)

    if isinstance(item, Field):
        head = f"{indent}{item.name}"
        if item.arguments:
            head += f"({item.arguments})"
        if item.directive is not None:
            head += f" {item.directive.annotation_text()}"
        if not item.children:
            return head
        return _render_block(head, item.children, depth)

    raise TypeError(f"Unsupported selection item: {item!r}")


def _render_block(head: str, children: tuple[SelectionItem, ...], depth: int) -> str:
    body = render_selection(children, depth + 1)
    return f"{head} {{\n{body}\n{INDENT * depth}}}"


def collect_fragments(items: tuple[SelectionItem, ...]) -> list[Fragment]:
    """Return every fragment referenced in `items`, once each, in first-seen order.

    Fragments spread inside other fragments are included.

    Raises:
        ValueError: If two different fragments share a name
    """
    found: dict[str, Fragment] = {}
    _collect(items, found)
    return list(found.values())


def _collect(items: tuple[SelectionItem, ...], found: dict[str, Fragment]):
    for item in items:
        if isinstance(item, Fragment):
            if item.name in found:
                if found[item.name] != item:
                    raise ValueError(f"Conflicting definitions for fragment {item.name!r}")
                continue
            found[item.name] = item
            _collect(item.selection, found)
        elif isinstance(item, Field):
            _collect(item.children, found)
        elif isinstance(item, Directive):
            _collect(item.selection, found)
