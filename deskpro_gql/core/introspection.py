"""Schema introspection helpers."""

from typing import Any

from graphql import build_client_schema, get_introspection_query, print_schema

# Fixed query sent by Client.fetch_schema
INTROSPECTION_QUERY = get_introspection_query(descriptions=True)


def print_schema_sdl(introspection: dict[str, Any]) -> str:
    """Format an introspection result (the `data` of the query) as SDL."""
    schema = build_client_schema(introspection)
    return print_schema(schema)
