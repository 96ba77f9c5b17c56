"""Command-line interface for deskpro-gql."""

import json
import logging

import click

from .core.client import DEFAULT_GRAPHQL_PATH, Client
from .core.exceptions import GraphQLError
from .core.introspection import print_schema_sdl
from .core.transport import HttpxTransport


def parse_var(value: str) -> tuple[str, object]:
    """Parse a `name=value` pair. Values that are valid JSON are decoded."""
    name, sep, raw = value.partition("=")
    if not sep or not name:
        raise click.BadParameter(f"expected name=value, got {value!r}")
    try:
        return name, json.loads(raw)
    except ValueError:
        return name, raw


def build_client(ctx: click.Context) -> Client:
    """Create a client from the group options stored on the context."""
    opts = ctx.obj
    transport = HttpxTransport(timeout=opts["timeout"])
    ctx.call_on_close(transport.close)

    client = Client(opts["url"], transport, graphql_path=opts["path"])
    if opts["token"] or opts["key"]:
        if opts["person_id"] is None:
            raise click.UsageError("--person-id is required with --token or --key")
        if opts["token"]:
            client.set_auth_token(opts["person_id"], opts["token"])
        if opts["key"]:
            client.set_auth_key(opts["person_id"], opts["key"])
    return client


@click.group()
@click.version_option(package_name="deskpro-gql")
@click.option("--url", "-u", required=True, envvar="DESKPRO_URL", help="Base URL of the Deskpro instance.")
@click.option(
    "--path",
    default=DEFAULT_GRAPHQL_PATH,
    show_default=True,
    envvar="DESKPRO_GRAPHQL_PATH",
    help="Path of the GraphQL endpoint.",
)
@click.option("--person-id", type=int, envvar="DESKPRO_PERSON_ID", help="Person ID for token or key auth.")
@click.option("--token", envvar="DESKPRO_TOKEN", help="API token.")
@click.option("--key", envvar="DESKPRO_KEY", help="API key (used when no token is given).")
@click.option("--timeout", type=float, default=30.0, show_default=True, help="Request timeout in seconds.")
@click.option("--verbose", "-v", is_flag=True, help="Log requests and responses.")
@click.pass_context
def main(ctx, url, path, person_id, token, key, timeout, verbose):
    """Run GraphQL operations against a Deskpro instance."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = {
        "url": url,
        "path": path,
        "person_id": person_id,
        "token": token,
        "key": key,
        "timeout": timeout,
    }


@main.command()
@click.option("--sdl", is_flag=True, help="Print the schema as SDL instead of JSON.")
@click.pass_context
def schema(ctx, sdl: bool):
    """Fetch the schema with an introspection query.

    Examples:

        deskpro-gql -u https://example.deskpro.com schema

        deskpro-gql -u https://example.deskpro.com --person-id 1 --token abc schema --sdl
    """
    client = build_client(ctx)
    try:
        data = client.fetch_schema()
    except GraphQLError as e:
        raise click.ClickException(e.message or type(e).__name__)

    if sdl:
        click.echo(print_schema_sdl(data))
    else:
        click.echo(json.dumps(data, indent=2))


@main.command()
@click.argument("query_file", type=click.File("r"))
@click.option("--var", "var_pairs", multiple=True, help="Variable as name=value. May be repeated.")
@click.option("--variables", "variables_json", help="Variables as a JSON object.")
@click.pass_context
def execute(ctx, query_file, var_pairs, variables_json):
    """Execute the GraphQL document in QUERY_FILE ("-" for stdin).

    Examples:

        deskpro-gql -u https://example.deskpro.com execute news.graphql --var id=1

        echo 'query { me { id } }' | deskpro-gql -u https://example.deskpro.com execute -
    """
    variables = {}
    if variables_json:
        try:
            variables = json.loads(variables_json)
        except ValueError as e:
            raise click.BadParameter(f"invalid JSON: {e}", param_hint="--variables")
        if not isinstance(variables, dict):
            raise click.BadParameter("must be a JSON object", param_hint="--variables")
    for pair in var_pairs:
        name, value = parse_var(pair)
        variables[name] = value

    client = build_client(ctx)
    try:
        data = client.execute(query_file.read(), variables)
    except GraphQLError as e:
        raise click.ClickException(e.message or type(e).__name__)

    click.echo(json.dumps(data, indent=2))


if __name__ == "__main__":
    main()
