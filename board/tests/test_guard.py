import pytest
from django.contrib.sessions.middleware import SessionMiddleware
from django.core.cache import cache
from django.test import RequestFactory

from board.exceptions import CreateInFlight
from board.services.guard import CreateGuard, client_id_for


def test_second_create_rejected_while_first_in_flight():
    with CreateGuard("client-a"):
        with pytest.raises(CreateInFlight):
            with CreateGuard("client-a"):
                pass
        # other clients are independent
        with CreateGuard("client-b"):
            pass


def test_guard_released_after_failure():
    with pytest.raises(RuntimeError):
        with CreateGuard("client-a"):
            raise RuntimeError("insert failed")

    assert cache.get("issue-create:client-a") is None
    with CreateGuard("client-a"):
        pass


def test_guard_without_client_id_never_rejects():
    with CreateGuard(None):
        with CreateGuard(None):
            pass


def test_client_id_from_header():
    request = RequestFactory().post("/", HTTP_X_CLIENT_ID="tab-1", REMOTE_ADDR="10.0.0.7")
    assert client_id_for(request) == "tab-1"


def test_shared_address_is_not_a_client_id():
    request = RequestFactory().post("/", REMOTE_ADDR="10.0.0.7")
    assert client_id_for(request) is None


@pytest.mark.django_db
def test_page_client_gets_a_session():
    request = RequestFactory().post("/")
    SessionMiddleware(lambda r: None).process_request(request)
    assert client_id_for(request) is None

    client_id = client_id_for(request, create_session=True)
    assert client_id
    assert client_id == request.session.session_key
