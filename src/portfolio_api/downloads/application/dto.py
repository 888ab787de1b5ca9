"""Response models used to document the download endpoint."""

from typing import List, Optional

from pydantic import BaseModel, Field


class DownloadSavedResponse(BaseModel):
    success: bool = True
    message: str = "Download info saved"


class DownloadValidationFailedResponse(BaseModel):
    success: bool = False
    message: str = "Validation failed"
    errors: List[dict]


class DownloadFailureResponse(BaseModel):
    success: bool = False
    message: str = "Server error. Could not save download info."
    error: Optional[str] = Field(None, description="Exception text, development only")
