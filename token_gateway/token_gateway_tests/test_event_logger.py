"""
Unit tests for event logger utility.
"""
import pytest
from unittest.mock import Mock, patch
from sqlalchemy.exc import SQLAlchemyError
from token_gateway.token_gateway.auth_service.utils.event_logger import log_auth_event
from token_gateway.token_gateway.auth_service.models import AuthEvent


@pytest.fixture
def mock_request():
    """Create a mock FastAPI Request object."""
    request = Mock()
    request.client = Mock()
    request.client.host = "192.168.1.1"
    request.headers = {"user-agent": "Mozilla/5.0 Test Browser"}
    return request


def test_log_auth_event_creates_record(db_session, user, mock_request):
    log_auth_event("login_success", user, mock_request, db_session)

    events = db_session.query(AuthEvent).filter(AuthEvent.user_id == user.id).all()

    assert len(events) == 1
    assert events[0].event_type == "login_success"
    assert events[0].email == "test@test.com"
    assert events[0].timestamp is not None


def test_log_auth_event_extracts_request_details(db_session, user, mock_request):
    log_auth_event("logout", user, mock_request, db_session)

    event = db_session.query(AuthEvent).first()
    assert event.ip_address == "192.168.1.1"
    assert event.user_agent == "Mozilla/5.0 Test Browser"


def test_log_auth_event_uses_forwarded_for_without_client(db_session, user):
    request = Mock()
    request.client = None
    request.headers = {"x-forwarded-for": "10.0.0.7, 10.0.0.1"}

    log_auth_event("login_failure", user, request, db_session)

    event = db_session.query(AuthEvent).first()
    assert event.ip_address == "10.0.0.7"
    assert event.user_agent is None


def test_log_auth_event_handles_missing_ip(db_session, user):
    request = Mock()
    request.client = None
    request.headers = {"user-agent": "Test Browser"}

    log_auth_event("login_success", user, request, db_session)

    event = db_session.query(AuthEvent).first()
    assert event.ip_address is None


def test_log_auth_event_with_metadata(db_session, user, mock_request):
    log_auth_event("login_success", user, mock_request, db_session, metadata={"client_id": "abc123"})

    event = db_session.query(AuthEvent).first()
    assert event.to_dict()["metadata"] == {"client_id": "abc123"}
    assert event.to_dict()["email"] == "test@test.com"


def test_log_auth_event_invalid_type(db_session, user, mock_request):
    with pytest.raises(ValueError) as exc_info:
        log_auth_event("2fa_success", user, mock_request, db_session)

    assert "Invalid event_type" in str(exc_info.value)


def test_log_auth_event_swallows_storage_errors(db_session, user, mock_request):
    with patch.object(db_session, "commit", side_effect=SQLAlchemyError("db down")):
        log_auth_event("login_success", user, mock_request, db_session)

    assert db_session.query(AuthEvent).count() == 0
