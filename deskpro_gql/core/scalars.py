"""JSON encoding of variable values.

Variables are sent as JSON. Values json cannot encode natively (datetimes,
UUIDs, pydantic models, ...) go through a registered scalar handler.

Example usage:
    from decimal import Decimal
    from deskpro_gql.core.scalars import ScalarRegistry

    class MoneyHandler:
        python_type = Decimal

        def serialize(self, value):
            return f"{value:.2f}"

    registry = ScalarRegistry()
    registry.register("Money", MoneyHandler())
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from pydantic import BaseModel


@runtime_checkable
class ScalarHandler(Protocol):
    """Protocol for scalar handlers.

    Attributes:
        python_type: The Python class whose instances this handler serializes
    """

    python_type: type

    def serialize(self, value: Any) -> Any:
        """Convert a Python value to a JSON-serializable value."""
        ...


class DateTimeHandler:
    """Handler for DateTime scalars using ISO 8601 format."""

    python_type = datetime

    def serialize(self, value: datetime) -> str:
        return value.isoformat()


class DateHandler:
    """Handler for Date scalars using ISO 8601 date format."""

    python_type = date

    def serialize(self, value: date) -> str:
        return value.isoformat()


class UUIDHandler:
    python_type = UUID

    def serialize(self, value: UUID) -> str:
        return str(value)


class DecimalHandler:
    """Decimals are sent as strings so no precision is lost."""

    python_type = Decimal

    def serialize(self, value: Decimal) -> str:
        return str(value)


class ModelHandler:
    """Handler for pydantic models used as input objects."""

    python_type = BaseModel

    def serialize(self, value: BaseModel) -> dict[str, Any]:
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)


class ScalarRegistry:
    """Registry of scalar handlers, keyed by GraphQL scalar name.

    `encode` is meant for the `default=` hook of `json.dumps`. Handlers are
    tried most recently registered first, so custom handlers take priority
    over the defaults.
    """

    def __init__(self):
        self._handlers: dict[str, ScalarHandler] = {}
        self._register_defaults()

    def _register_defaults(self):
        # DateTime is tried before Date: datetime subclasses date
        self.register("Date", DateHandler())
        self.register("DateTime", DateTimeHandler())
        self.register("UUID", UUIDHandler())
        self.register("Decimal", DecimalHandler())
        self.register("Input", ModelHandler())

    def register(self, scalar_name: str, handler: ScalarHandler):
        """Register a handler for a scalar type."""
        self._handlers.pop(scalar_name, None)
        self._handlers[scalar_name] = handler

    def get(self, scalar_name: str) -> ScalarHandler | None:
        """Get the handler for a scalar type, or None if not registered."""
        return self._handlers.get(scalar_name)

    def has(self, scalar_name: str) -> bool:
        return scalar_name in self._handlers

    def encode(self, value: Any) -> Any:
        """Serialize `value` with the first handler matching its type.

        Raises:
            TypeError: If no handler accepts the value
        """
        for handler in reversed(self._handlers.values()):
            if isinstance(value, handler.python_type):
                return handler.serialize(value)
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
