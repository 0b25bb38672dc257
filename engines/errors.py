"""Validation errors raised at the data-model boundary."""
from __future__ import annotations


class InvalidInput(ValueError):
    """Malformed engine input: missing collections, bad types, out-of-range values."""

    error_code = "invalid_input"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class InvalidScenario(InvalidInput):
    """A what-if scenario that cannot be ranked (non-positive investment)."""

    error_code = "invalid_scenario"


__all__ = ["InvalidInput", "InvalidScenario"]
