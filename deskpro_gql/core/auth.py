"""Authentication handlers for the GraphQL client.

Deskpro accepts two credential styles, both sent in the Authorization header:

    Authorization: token <personId>:<token>
    Authorization: key <personId>:<key>
"""

from typing import Dict, Protocol, runtime_checkable

AUTH_HEADER = "Authorization"


@runtime_checkable
class Auth(Protocol):
    """Protocol for authentication handlers."""

    def get_headers(self) -> Dict[str, str]:
        """Return headers to include in requests."""
        ...


class _PersonAuth:
    scheme = ""

    def __init__(self, person_id: int | str, secret: str):
        self.credentials = f"{person_id}:{secret}"

    def get_headers(self) -> Dict[str, str]:
        return {AUTH_HEADER: f"{self.scheme} {self.credentials}"}

    def __repr__(self) -> str:
        person_id = self.credentials.split(":", 1)[0]
        return f"{type(self).__name__}(person_id={person_id!r})"


class TokenAuth(_PersonAuth):
    """Token authentication for a person.

    Example:
        auth = TokenAuth(1, "a9f2c1")
        auth.get_headers()  # {"Authorization": "token 1:a9f2c1"}
    """

    scheme = "token"


class KeyAuth(_PersonAuth):
    """API key authentication for a person.

    Example:
        auth = KeyAuth(1, "dev-key")
        auth.get_headers()  # {"Authorization": "key 1:dev-key"}
    """

    scheme = "key"
