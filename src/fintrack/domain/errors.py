"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


def duplicate_record_id(record_id: str, collection: str) -> str:
    """Return message for an id already present in a collection."""
    return f"Record with id '{record_id}' already exists in {collection}"


def missing_field(field_name: str, collection: str) -> str:
    """Return message for a required field that is missing or empty."""
    return f"Field '{field_name}' is required for {collection}"


def negative_amount(field_name: str, value: object) -> str:
    """Return message for a monetary field below zero."""
    return f"Field '{field_name}' must not be negative (got {value})"


def wrong_record_kind(expected: str, actual: str, collection: str) -> str:
    """Return message for a record appended to the wrong collection."""
    return f"Cannot append {actual} to {collection}: expected {expected}"


def invalid_choice(field_name: str, value: object, choices: list[str]) -> str:
    """Return message for a value outside an enumerated set."""
    return f"Invalid {field_name} '{value}'. Expected one of: {', '.join(choices)}"
