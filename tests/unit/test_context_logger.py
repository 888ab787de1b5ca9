"""Context loggers keep the caller's structured fields."""
import logging

from portfolio_api.shared.infrastructure.logging import get_context_logger


def test_caller_extra_is_kept_with_correlation_id(caplog):
    logger = get_context_logger("portfolio_api.contact", "cid-1")

    with caplog.at_level(logging.INFO, logger="portfolio_api.contact"):
        logger.info("Contact message stored", extra={"contact_id": "abc"})

    record = caplog.records[-1]
    assert record.correlation_id == "cid-1"
    assert record.contact_id == "abc"


def test_error_fields_reach_the_record(caplog):
    logger = get_context_logger("portfolio_api.downloads", "cid-2")

    with caplog.at_level(logging.ERROR, logger="portfolio_api.downloads"):
        logger.error("Error saving download data", extra={"error": "boom", "error_type": "RuntimeError"})

    record = caplog.records[-1]
    assert record.correlation_id == "cid-2"
    assert record.error == "boom"
    assert record.error_type == "RuntimeError"


def test_without_correlation_id_a_plain_logger_is_returned():
    assert isinstance(get_context_logger("portfolio_api.contact"), logging.Logger)


def test_contact_endpoint_logs_stored_id(client, caplog, valid_contact):
    with caplog.at_level(logging.INFO, logger="portfolio_api.contact.interfaces.controllers"):
        response = client.post("/api/contact", json=valid_contact, headers={"X-Correlation-ID": "req-9"})

    records = [r for r in caplog.records if r.getMessage() == "Contact message stored"]
    assert len(records) == 1
    assert records[0].contact_id == response.json()["data"]["id"]
    assert records[0].correlation_id == "req-9"
