"""Beanie repositories against an in-memory Motor client."""
import pytest
import pytest_asyncio
from beanie import PydanticObjectId, init_beanie
from mongomock_motor import AsyncMongoMockClient

from portfolio_api.contact.domain import ContactSubmission
from portfolio_api.contact.infrastructure import BeanieContactRepository, ContactDocument
from portfolio_api.core import SchemaValidationException, utcnow
from portfolio_api.downloads.domain import DownloadRequest
from portfolio_api.downloads.infrastructure import BeanieDownloadRepository, DownloadDocument


class ReadyConnector:
    models_initialized = True


@pytest_asyncio.fixture()
async def database():
    client = AsyncMongoMockClient()
    db = client["portfolio"]
    await init_beanie(database=db, document_models=[ContactDocument, DownloadDocument])
    return db


def make_submission(**overrides):
    fields = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "subject": "Project enquiry",
        "message": "I would like to talk about a backend project.",
        "timestamp": utcnow(),
    }
    fields.update(overrides)
    return ContactSubmission(**fields)


@pytest.mark.asyncio
async def test_contact_is_inserted_with_string_id(database):
    repository = BeanieContactRepository(ReadyConnector())

    stored = await repository.add(make_submission())

    assert isinstance(stored.id, str)
    document = await ContactDocument.get(PydanticObjectId(stored.id))
    assert document is not None
    assert document.name == "Jane Doe"
    assert document.subject == "Project enquiry"


@pytest.mark.asyncio
async def test_identical_contacts_are_separate_documents(database):
    repository = BeanieContactRepository(ReadyConnector())

    first = await repository.add(make_submission())
    second = await repository.add(make_submission())

    assert first.id != second.id
    assert await ContactDocument.find_all().count() == 2


@pytest.mark.asyncio
async def test_contact_schema_rejection_is_translated(database):
    repository = BeanieContactRepository(ReadyConnector())

    with pytest.raises(SchemaValidationException) as exc_info:
        await repository.add(make_submission(email="no-at-sign"))

    assert len(exc_info.value.messages) == 1
    assert exc_info.value.messages[0].startswith("email: ")
    assert await ContactDocument.find_all().count() == 0


@pytest.mark.asyncio
async def test_download_is_inserted_with_trimmed_purpose(database):
    repository = BeanieDownloadRepository(ReadyConnector())

    stored = await repository.add(
        DownloadRequest(email="recruiter@example.com", purpose="  Hiring now ", timestamp=utcnow())
    )

    assert isinstance(stored.id, str)
    assert stored.purpose == "Hiring now"
    document = await DownloadDocument.get(PydanticObjectId(stored.id))
    assert document.purpose == "Hiring now"


@pytest.mark.asyncio
async def test_download_purpose_too_short_after_trimming_is_rejected(database):
    repository = BeanieDownloadRepository(ReadyConnector())

    with pytest.raises(SchemaValidationException) as exc_info:
        await repository.add(
            DownloadRequest(email="recruiter@example.com", purpose="  ab  ", timestamp=utcnow())
        )

    assert [message.split(":")[0] for message in exc_info.value.messages] == ["purpose"]
    assert await DownloadDocument.find_all().count() == 0
