import json

import pytest
import requests

from petclinic_api import PetClinicAPI


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text or (json.dumps(payload) if payload is not None else "")
        self.content = self.text.encode("utf-8")

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def make_api():
    def _make(*responses):
        session = FakeSession(*responses)
        return PetClinicAPI(base_url="http://clinic.test/", session=session), session
    return _make


def test_list_owners(make_api):
    api, session = make_api(FakeResponse(payload=[{"id": 1}, {"id": 2}]))

    owners, error = api.list_owners()

    assert error is None
    assert [o["id"] for o in owners] == [1, 2]
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == "http://clinic.test/api/v1/owners/"


def test_find_owners_wraps_single_match(make_api):
    api, session = make_api(FakeResponse(payload={"id": 1, "last_name": "Franklin"}))

    owners, error = api.find_owners("Frank")

    assert error is None
    assert owners == [{"id": 1, "last_name": "Franklin"}]
    assert session.calls[0]["params"] == {"lastName": "Frank"}


def test_find_owners_without_match_is_empty(make_api):
    api, _ = make_api(FakeResponse(status_code=404, payload={"detail": "Owner not found"}))
    assert api.find_owners("Nobody") == ([], None)


def test_add_visit_reports_validation_error(make_api):
    api, session = make_api(FakeResponse(status_code=400, payload={"detail": "Invalid Visit"}))

    visit, error = api.add_visit(1, 2, {"description": "checkup"})

    assert visit is None
    assert error == {"status_code": 400, "message": "Invalid Visit"}
    assert session.calls[0]["url"] == "http://clinic.test/api/v1/owners/1/pets/2/visits/"
    assert session.calls[0]["json"] == {"description": "checkup"}


def test_connection_failure_is_reported(make_api):
    api, _ = make_api(requests.ConnectionError("refused"))

    vets, error = api.list_vets()

    assert vets == []
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_error_without_json_body_uses_text(make_api):
    api, _ = make_api(FakeResponse(status_code=500, text="Internal Server Error"))

    owner, error = api.get_owner(1)

    assert owner is None
    assert error == {"status_code": 500, "message": "Internal Server Error"}
