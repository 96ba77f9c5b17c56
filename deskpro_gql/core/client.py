"""GraphQL client for the Deskpro API.

Sends operation documents to the GraphQL endpoint and turns responses into
data or exceptions.

Examples:
    transport = HttpxTransport()
    client = Client("https://example.deskpro.com", transport)
    client.set_auth_token(1, "a9f2c1")

    data = client.execute("query { me { id } }")

    query = client.create_query("GetNews", {"$id": id_type(nullable=False)})
    query.field("news", "id: $id", ["title", "content"])
    data = query.execute({"id": 1})
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from .auth import AUTH_HEADER, Auth, KeyAuth, TokenAuth
from .builder import MutationBuilder, QueryBuilder, strip_variable_name
from .exceptions import AuthenticationError, InvalidResponseError, NotFoundError, QueryError
from .introspection import INTROSPECTION_QUERY
from .scalars import ScalarRegistry
from .transport import HTTPTransport, TransportResponse
from .types import TypeDescriptor

DEFAULT_GRAPHQL_PATH = "/api/v2/graphql"


class Client:
    """Executes GraphQL operations against a single endpoint.

    The HTTP transport is required. Credentials are optional and may be set
    or changed at any time; they apply to every later request.
    """

    def __init__(
        self,
        base_url: str,
        http_client: HTTPTransport,
        logger: logging.Logger | None = None,
        *,
        auth: Auth | None = None,
        graphql_path: str = DEFAULT_GRAPHQL_PATH,
        default_headers: Mapping[str, str] | None = None,
        scalars: ScalarRegistry | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Base URL of the Deskpro instance
            http_client: Transport that sends the HTTP requests
            logger: Standard library logger (or one with the same
                `debug(msg, *args)` signature) for requests and responses.
                Defaults to the module logger.
            auth: Credentials used when neither a token nor a key is set
            graphql_path: Path of the GraphQL endpoint, appended to base_url
            default_headers: Headers sent with every request
            scalars: Encoders for variable values json cannot handle natively
        """
        if http_client is None:
            raise ValueError("An HTTP transport is required")

        self.set_base_url(base_url)
        self.set_graphql_path(graphql_path)
        self.set_http_client(http_client)
        self.set_default_headers(default_headers or {})
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.scalars = scalars or ScalarRegistry()

        self._token_auth: TokenAuth | None = None
        self._key_auth: KeyAuth | None = None
        self._auth = auth

    # Configuration

    @property
    def base_url(self) -> str:
        return self._base_url

    def set_base_url(self, base_url: str) -> "Client":
        self._base_url = base_url.rstrip("/")
        return self

    @property
    def graphql_path(self) -> str:
        return self._graphql_path

    def set_graphql_path(self, graphql_path: str) -> "Client":
        self._graphql_path = "/" + graphql_path.strip("/")
        return self

    @property
    def url(self) -> str:
        """Full URL of the GraphQL endpoint."""
        return self._base_url + self._graphql_path

    @property
    def http_client(self) -> HTTPTransport:
        return self._http_client

    def set_http_client(self, http_client: HTTPTransport) -> "Client":
        self._http_client = http_client
        return self

    @property
    def default_headers(self) -> dict[str, str]:
        return dict(self._default_headers)

    def set_default_headers(self, default_headers: Mapping[str, str]) -> "Client":
        self._default_headers = dict(default_headers)
        return self

    def set_auth_token(self, person_id: int | str, token: str) -> "Client":
        """Authenticate as `person_id` with an API token. Takes precedence over a key."""
        self._token_auth = TokenAuth(person_id, token)
        return self

    def set_auth_key(self, person_id: int | str, key: str) -> "Client":
        """Authenticate as `person_id` with an API key."""
        self._key_auth = KeyAuth(person_id, key)
        return self

    def set_auth(self, auth: Auth | None) -> "Client":
        """Use any `Auth` handler. Token and key credentials take precedence."""
        self._auth = auth
        return self

    @property
    def auth_token(self) -> str | None:
        """Token credentials as "<personId>:<token>", or None."""
        return self._token_auth.credentials if self._token_auth else None

    @property
    def auth_key(self) -> str | None:
        """Key credentials as "<personId>:<key>", or None."""
        return self._key_auth.credentials if self._key_auth else None

    # Builders

    def create_query(
        self,
        operation_name: str,
        variables: Mapping[str, TypeDescriptor | str] | None = None,
    ) -> QueryBuilder:
        """Create a query builder bound to this client."""
        return QueryBuilder(self, operation_name, variables)

    def create_mutation(
        self,
        operation_name: str,
        variables: Mapping[str, TypeDescriptor | str] | None = None,
    ) -> MutationBuilder:
        """Create a mutation builder bound to this client."""
        return MutationBuilder(self, operation_name, variables)

    def fetch_schema(self) -> Any:
        """Run the introspection query and return its data unmodified."""
        return self.execute(INTROSPECTION_QUERY)

    # Execution

    def execute(
        self,
        query: str,
        variables: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Execute a GraphQL document.

        Args:
            query: GraphQL document text
            variables: Variable values; names may be given with or without `$`
            headers: Extra headers for this request only

        Returns:
            The 'data' portion of the response

        Raises:
            InvalidResponseError: If the body is not JSON or lacks 'data'
            AuthenticationError: If the server answers 401 or 403
            NotFoundError: If the server reports a field as not found
            QueryError: If the server reports any other error
        """
        query = str(query).strip()
        variables = dict(variables or {})
        sanitized = {strip_variable_name(name): value for name, value in variables.items()}

        body = json.dumps({"query": query, "variables": sanitized}, default=self.scalars.encode)
        request_headers = self._make_headers(headers or {})

        self.logger.debug("POST %s query=%s variables=%r", self.url, query, variables)
        response = self._http_client.send("POST", self.url, request_headers, body)

        return self._make_response(response)

    def _make_headers(self, headers: Mapping[str, str]) -> dict[str, str]:
        merged = {"Content-Type": "application/json"}
        for source in (self._default_headers, headers):
            for name, value in source.items():
                # Later sources replace earlier ones regardless of case
                for existing in [k for k in merged if k.lower() == name.lower()]:
                    del merged[existing]
                merged[name] = value

        if not any(name.lower() == AUTH_HEADER.lower() for name in merged):
            auth = self._token_auth or self._key_auth or self._auth
            if auth is not None:
                merged.update(auth.get_headers())
        return merged

    def _make_response(self, response: TransportResponse) -> Any:
        self.logger.debug("RESPONSE %s", response.body)

        try:
            payload = json.loads(response.body)
        except ValueError as e:
            raise InvalidResponseError("unable to parse response as JSON.") from e

        if response.status_code in (401, 403):
            message = AuthenticationError.DEFAULT_MESSAGE
            if isinstance(payload, dict) and payload.get("message"):
                message = payload["message"]
            raise AuthenticationError(message, status_code=response.status_code)

        if not isinstance(payload, dict):
            raise InvalidResponseError("response is not a JSON object.")

        errors = payload.get("errors")
        if errors:
            self._raise_for_errors(errors, payload.get("data"))

        if "data" not in payload:
            raise InvalidResponseError()

        return payload["data"]

    def _raise_for_errors(self, errors: Any, data: Any):
        """Raise for the first error in `errors`; later errors are kept on the exception."""
        if not isinstance(errors, list):
            raise InvalidResponseError("response 'errors' is not a list.")

        error = errors[0] if isinstance(errors[0], dict) else {"message": str(errors[0])}
        message = error.get("message", "")
        if message == "Not Found" and error.get("field"):
            raise NotFoundError(error["field"], errors=errors, data=data)
        raise QueryError(message, errors=errors, data=data)
