"""
Field Validation
================

Declarative field rules for request bodies. Each rule sanitises its field
and reports every constraint it fails, so an empty required field yields
both its "required" and its "length" message.

Error items have the shape clients of the previous backend already parse:

    {"type": "field", "value": "x", "msg": "...", "path": "name", "location": "body"}
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from email_validator import EmailNotValidError, validate_email

# Pattern the document store enforces for stored e-mail addresses
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


def as_text(value: Any) -> str:
    """Coerce a JSON value to the string a validator sees."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def field_error(path: str, value: Any, msg: str) -> dict:
    return {"type": "field", "value": value, "msg": msg, "path": path, "location": "body"}


@dataclass(frozen=True)
class LengthRule:
    """Text field with optional trimming, a required check and length bounds."""
    path: str
    min_length: int
    message: str
    max_length: Optional[int] = None
    required_message: Optional[str] = None
    trim: bool = True

    def check(self, raw: Any) -> Tuple[str, List[dict]]:
        value = as_text(raw)
        if self.trim:
            value = value.strip()

        errors = []
        if self.required_message and not value:
            errors.append(field_error(self.path, value, self.required_message))
        too_short = len(value) < self.min_length
        too_long = self.max_length is not None and len(value) > self.max_length
        if too_short or too_long:
            errors.append(field_error(self.path, value, self.message))
        return value, errors


@dataclass(frozen=True)
class EmailRule:
    """
    Syntactic e-mail check (no DNS lookups).

    With ``normalize`` the stored value is the normalised address
    (lower-cased domain); otherwise the input is kept as sent.
    """
    path: str
    message: str
    normalize: bool = False

    def check(self, raw: Any) -> Tuple[str, List[dict]]:
        value = as_text(raw)
        try:
            validated = validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return value, [field_error(self.path, value, self.message)]
        return (validated.normalized if self.normalize else value), []
