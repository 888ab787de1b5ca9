"""Translation of document validation failures into store-level errors."""

from typing import List

from pydantic import ValidationError


def schema_error_messages(error: ValidationError) -> List[str]:
    """One readable message per failing document field."""
    messages = []
    for item in error.errors():
        path = ".".join(str(part) for part in item.get("loc", ())) or "document"
        messages.append(f"{path}: {item.get('msg', 'invalid value')}")
    return messages
