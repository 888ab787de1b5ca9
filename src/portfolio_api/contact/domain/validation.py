"""Field rules for contact-form bodies."""

from dataclasses import dataclass
from typing import Any, Mapping

from portfolio_api.core import ValidationException
from portfolio_api.shared.domain import EmailRule, LengthRule

NAME_RULE = LengthRule(
    path="name",
    min_length=2,
    max_length=100,
    required_message="Name is required",
    message="Name must be between 2 and 100 characters",
)
EMAIL_RULE = EmailRule(
    path="email",
    message="Please enter a valid email",
    normalize=True,
)
SUBJECT_RULE = LengthRule(
    path="subject",
    min_length=2,
    max_length=200,
    required_message="Subject is required",
    message="Subject must be between 2 and 200 characters",
)
MESSAGE_RULE = LengthRule(
    path="message",
    min_length=10,
    max_length=5000,
    required_message="Message is required",
    message="Message must be between 10 and 5000 characters",
)


@dataclass(frozen=True)
class ContactForm:
    """Sanitised contact-form fields."""
    name: str
    email: str
    subject: str
    message: str


def validate_contact(payload: Mapping[str, Any]) -> ContactForm:
    """
    Sanitise and check a contact body.

    Raises:
        ValidationException: with every failing field, in field order
    """
    name, name_errors = NAME_RULE.check(payload.get("name"))
    email, email_errors = EMAIL_RULE.check(payload.get("email"))
    subject, subject_errors = SUBJECT_RULE.check(payload.get("subject"))
    message, message_errors = MESSAGE_RULE.check(payload.get("message"))

    errors = name_errors + email_errors + subject_errors + message_errors
    if errors:
        raise ValidationException(errors)

    return ContactForm(name=name, email=email, subject=subject, message=message)
