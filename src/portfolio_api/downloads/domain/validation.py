"""Field rules for CV download bodies."""

from dataclasses import dataclass
from typing import Any, Mapping

from portfolio_api.core import ValidationException
from portfolio_api.shared.domain import EmailRule, LengthRule

EMAIL_RULE = EmailRule(path="email", message="Valid email is required")

# Only the lower bound is checked here; the 500 upper bound lives in the
# document schema.
PURPOSE_RULE = LengthRule(
    path="purpose",
    min_length=5,
    message="Purpose is required and must be meaningful",
    trim=False,
)


@dataclass(frozen=True)
class DownloadForm:
    email: str
    purpose: str


def validate_download(payload: Mapping[str, Any]) -> DownloadForm:
    """
    Check a download body. Values are passed on untrimmed.

    Raises:
        ValidationException: with every failing field
    """
    email, email_errors = EMAIL_RULE.check(payload.get("email"))
    purpose, purpose_errors = PURPOSE_RULE.check(payload.get("purpose"))

    errors = email_errors + purpose_errors
    if errors:
        raise ValidationException(errors)

    return DownloadForm(email=email, purpose=purpose)
