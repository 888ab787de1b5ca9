"""Shared domain helpers (field validation rules)."""

from portfolio_api.shared.domain.validation import (
    EMAIL_PATTERN,
    EmailRule,
    LengthRule,
    as_text,
    field_error,
)

__all__ = ["EMAIL_PATTERN", "EmailRule", "LengthRule", "as_text", "field_error"]
