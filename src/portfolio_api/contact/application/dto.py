"""
Contact Application DTOs
=========================

Response models used to document the contact endpoint.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ContactData(BaseModel):
    """Stored message fields echoed to the sender."""
    id: str = Field(..., description="Store-assigned identifier")
    name: str
    email: str
    subject: str
    timestamp: datetime = Field(..., description="Server-assigned creation time")


class ContactCreatedResponse(BaseModel):
    success: bool = True
    message: str = "Message sent successfully"
    data: ContactData


class FieldErrorItem(BaseModel):
    type: str = "field"
    value: Optional[str] = None
    msg: str
    path: str
    location: str = "body"


class ValidationFailedResponse(BaseModel):
    success: bool = False
    message: str = "Validation failed"
    errors: List[FieldErrorItem]


class SchemaRejectedResponse(BaseModel):
    success: bool = False
    message: str = "Invalid data provided"
    errors: List[str]


class ContactFailureResponse(BaseModel):
    success: bool = False
    message: str
    error: Optional[str] = Field(None, description="Exception text, development only")
