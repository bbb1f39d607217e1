"""
Unit tests for the Domain entity and OperationStatus.
"""
import pytest

from cms_domains.domain.entities import Domain, DuplicateDomainError, DomainNotFoundError
from cms_domains.domain.events import EventMessages
from cms_domains.domain.operation_status import OperationStatus, OperationStatusType


class TestDomain:

    def test_name_is_stripped(self):
        domain = Domain(name="  shop.example.com ", root_content_id=42)
        assert domain.name == "shop.example.com"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_empty_name_rejected(self, name):
        with pytest.raises(ValueError, match="cannot be empty"):
            Domain(name=name)

    @pytest.mark.parametrize("content_id", [0, -5])
    def test_non_positive_content_id_rejected(self, content_id):
        with pytest.raises(ValueError, match="root_content_id"):
            Domain(name="example.com", root_content_id=content_id)

    def test_wildcard_when_no_content(self):
        assert Domain(name="*1234", language_iso_code="da-DK").is_wildcard
        assert not Domain(name="example.com", root_content_id=1).is_wildcard

    def test_blank_language_normalized_to_none(self):
        assert Domain(name="example.com", language_iso_code=" ").language_iso_code is None

    def test_identity(self):
        domain = Domain(name="example.com")
        assert not domain.has_identity
        domain.id = 7
        assert domain.has_identity

    def test_equality_is_field_for_field(self):
        a = Domain(name="example.com", root_content_id=1, language_iso_code="en-US", id=3)
        b = Domain(name="example.com", root_content_id=1, language_iso_code="en-US", id=3)
        assert a == b
        assert a != Domain(name="example.com", root_content_id=2, language_iso_code="en-US", id=3)


def test_error_messages():
    assert "shop.example.com" in str(DuplicateDomainError("shop.example.com"))
    assert DomainNotFoundError(12).domain_id == 12


class TestOperationStatus:

    def test_succeeded(self):
        messages = EventMessages()
        status = OperationStatus.succeeded(messages)
        assert status.status_type == OperationStatusType.SUCCESS
        assert status.is_success and not status.is_cancelled
        assert status.event_messages is messages

    def test_cancelled(self):
        status = OperationStatus.cancelled(EventMessages())
        assert status.is_cancelled and not status.is_success
