"""Beanie implementation of the download repository interface."""

from dataclasses import replace

from pydantic import ValidationError

from portfolio_api.core import DatabaseUnavailableException, SchemaValidationException
from portfolio_api.downloads.application import IDownloadRepository
from portfolio_api.downloads.domain import DownloadRequest
from portfolio_api.downloads.infrastructure.models import DownloadDocument
from portfolio_api.infrastructure.database import DatabaseConnector, schema_error_messages


class BeanieDownloadRepository(IDownloadRepository):

    def __init__(self, connector: DatabaseConnector):
        self._connector = connector

    async def add(self, request: DownloadRequest) -> DownloadRequest:
        if not self._connector.models_initialized:
            raise DatabaseUnavailableException("Database connection is not established")

        try:
            document = DownloadDocument(
                email=request.email,
                purpose=request.purpose,
                timestamp=request.timestamp,
            )
            await document.insert()
        except ValidationError as e:
            raise SchemaValidationException(schema_error_messages(e)) from e

        return replace(request, id=str(document.id), purpose=document.purpose)
