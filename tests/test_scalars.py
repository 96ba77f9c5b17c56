"""Tests for variable value encoding."""

import json
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID

import pytest
from pydantic import BaseModel, ConfigDict, Field

from deskpro_gql.core.scalars import (
    DateHandler,
    DateTimeHandler,
    DecimalHandler,
    ModelHandler,
    ScalarHandler,
    ScalarRegistry,
    UUIDHandler,
)


class TicketInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    subject: str
    person_id: int = Field(alias="personId")
    due: date | None = None


class TestHandlers:
    """Tests for the built-in handlers."""

    def test_datetime(self):
        assert DateTimeHandler().serialize(datetime(2024, 1, 15, 10, 30, 0)) == "2024-01-15T10:30:00"

    def test_datetime_with_timezone(self):
        value = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        assert DateTimeHandler().serialize(value) == "2024-01-15T10:30:00+00:00"

    def test_date(self):
        assert DateHandler().serialize(date(2024, 1, 15)) == "2024-01-15"

    def test_uuid(self):
        uid = UUID("12345678-1234-5678-1234-567812345678")
        assert UUIDHandler().serialize(uid) == "12345678-1234-5678-1234-567812345678"

    def test_decimal_keeps_precision(self):
        assert DecimalHandler().serialize(Decimal("1.10")) == "1.10"

    def test_model_uses_aliases_and_drops_none(self):
        ticket = TicketInput(subject="Printer on fire", person_id=3)
        assert ModelHandler().serialize(ticket) == {"subject": "Printer on fire", "personId": 3}

    def test_model_nested_values_json_ready(self):
        ticket = TicketInput(subject="Hi", person_id=3, due=date(2024, 2, 1))
        assert ModelHandler().serialize(ticket)["due"] == "2024-02-01"


class TestScalarRegistry:
    """Tests for ScalarRegistry."""

    def test_default_handlers(self):
        registry = ScalarRegistry()
        for name in ("Date", "DateTime", "UUID", "Decimal"):
            assert registry.has(name)

    def test_get_missing(self):
        assert ScalarRegistry().get("Money") is None

    def test_datetime_not_encoded_as_date(self):
        registry = ScalarRegistry()
        assert registry.encode(datetime(2024, 1, 15, 10, 30)) == "2024-01-15T10:30:00"
        assert registry.encode(date(2024, 1, 15)) == "2024-01-15"

    def test_unknown_type(self):
        with pytest.raises(TypeError):
            ScalarRegistry().encode(object())

    def test_custom_handler_takes_priority(self):
        class MoneyHandler:
            python_type = Decimal

            def serialize(self, value):
                return f"{value:.2f}"

        registry = ScalarRegistry()
        registry.register("Money", MoneyHandler())
        assert registry.encode(Decimal("3")) == "3.00"

    def test_json_default_hook(self):
        registry = ScalarRegistry()
        payload = {"since": date(2024, 1, 1), "ticket": TicketInput(subject="Hi", person_id=1)}
        encoded = json.dumps(payload, default=registry.encode)
        assert json.loads(encoded) == {"since": "2024-01-01", "ticket": {"subject": "Hi", "personId": 1}}


class TestProtocol:
    def test_builtins_are_handlers(self):
        for handler in (DateTimeHandler(), DateHandler(), UUIDHandler(), DecimalHandler(), ModelHandler()):
            assert isinstance(handler, ScalarHandler)
