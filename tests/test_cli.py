"""Tests for the command-line interface."""

import json

import click
import pytest
from click.testing import CliRunner
from graphql import build_schema, graphql_sync

from deskpro_gql import cli
from deskpro_gql.core.introspection import INTROSPECTION_QUERY


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fake_http(monkeypatch, transport):
    """Replace the httpx transport built by the CLI with the fake one."""
    monkeypatch.setattr(cli, "HttpxTransport", lambda timeout: transport)
    return transport


class TestParseVar:
    def test_json_value(self):
        assert cli.parse_var("id=5") == ("id", 5)

    def test_plain_string(self):
        assert cli.parse_var("name=Jane Doe") == ("name", "Jane Doe")

    def test_missing_separator(self):
        with pytest.raises(click.BadParameter):
            cli.parse_var("id")


class TestExecuteCommand:
    """Tests for `deskpro-gql execute`."""

    def test_execute_from_stdin(self, runner, fake_http):
        fake_http.respond({"data": {"news": {"id": 5}}})
        result = runner.invoke(
            cli.main,
            ["--url", "https://support.example.com", "execute", "-", "--var", "$id=5"],
            input="query Q($id: ID!) { news(id: $id) { id } }",
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"news": {"id": 5}}
        assert fake_http.last_payload["variables"] == {"id": 5}
        assert fake_http.closed

    def test_variables_json(self, runner, fake_http):
        result = runner.invoke(
            cli.main,
            ["-u", "https://support.example.com", "execute", "-", "--variables", '{"a": 1}', "--var", "b=x"],
            input="query { x }",
        )
        assert result.exit_code == 0, result.output
        assert fake_http.last_payload["variables"] == {"a": 1, "b": "x"}

    def test_invalid_variables_json(self, runner, fake_http):
        result = runner.invoke(
            cli.main,
            ["-u", "https://support.example.com", "execute", "-", "--variables", "{nope"],
            input="query { x }",
        )
        assert result.exit_code == 2

    def test_query_error_reported(self, runner, fake_http):
        fake_http.respond({"errors": [{"message": "Something else"}]})
        result = runner.invoke(cli.main, ["-u", "https://support.example.com", "execute", "-"], input="query { x }")
        assert result.exit_code == 1
        assert "Error: Something else" in result.output

    def test_token_from_environment(self, runner, fake_http):
        result = runner.invoke(
            cli.main,
            ["execute", "-"],
            input="query { x }",
            env={"DESKPRO_URL": "https://support.example.com", "DESKPRO_PERSON_ID": "1", "DESKPRO_TOKEN": "abc"},
        )
        assert result.exit_code == 0, result.output
        assert fake_http.last_request["headers"]["Authorization"] == "token 1:abc"
        assert fake_http.last_request["url"] == "https://support.example.com/api/v2/graphql"

    def test_custom_path_and_key(self, runner, fake_http):
        result = runner.invoke(
            cli.main,
            ["-u", "https://support.example.com", "--path", "graphql/", "--person-id", "2", "--key", "k",
             "execute", "-"],
            input="query { x }",
        )
        assert result.exit_code == 0, result.output
        assert fake_http.last_request["url"] == "https://support.example.com/graphql"
        assert fake_http.last_request["headers"]["Authorization"] == "key 2:k"

    def test_credentials_need_person_id(self, runner, fake_http):
        result = runner.invoke(
            cli.main, ["-u", "https://support.example.com", "--token", "abc", "execute", "-"], input="query { x }"
        )
        assert result.exit_code == 2
        assert "--person-id" in result.output


class TestSchemaCommand:
    """Tests for `deskpro-gql schema`."""

    @pytest.fixture
    def introspection(self):
        schema = build_schema("type Query { me: Person } type Person { id: ID! name: String }")
        return graphql_sync(schema, INTROSPECTION_QUERY).data

    def test_json_output(self, runner, fake_http):
        fake_http.respond({"data": {"__schema": {"types": []}}})
        result = runner.invoke(cli.main, ["-u", "https://support.example.com", "schema"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"__schema": {"types": []}}
        assert fake_http.last_payload["query"] == INTROSPECTION_QUERY.strip()

    def test_sdl_output(self, runner, fake_http, introspection):
        fake_http.respond({"data": introspection})
        result = runner.invoke(cli.main, ["-u", "https://support.example.com", "schema", "--sdl"])
        assert result.exit_code == 0, result.output
        assert "type Person {" in result.output

    def test_authentication_error(self, runner, fake_http):
        fake_http.respond({}, status_code=401)
        result = runner.invoke(cli.main, ["-u", "https://support.example.com", "schema"])
        assert result.exit_code == 1
        assert "You must be authenticated" in result.output
