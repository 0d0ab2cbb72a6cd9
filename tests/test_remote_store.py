"""Supabase REST client against a fake HTTP session."""

from __future__ import annotations

from typing import Any, Optional

import pytest
import requests

from conftest import local
from tazita.model.result import Failure, Loaded, NotFound, Saved
from tazita.repository.codec import convert_collection_for_serialization, new_collection
from tazita.repository.remote import NOT_CONFIGURED, RemoteStore


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None) -> None:
        self.status_code = status_code
        self._body = body

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(
                f"{self.status_code} Error", response=self  # type: ignore[arg-type]
            )

    def json(self) -> Any:
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class FakeSession:
    """Records requests and answers from a queue of responses or exceptions."""

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def __respond(self, method: str, url: str, **kwargs: Any) -> Any:
        self.calls.append((method, url, kwargs))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, url: str, **kwargs: Any) -> Any:
        return self.__respond("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> Any:
        return self.__respond("POST", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> Any:
        return self.__respond("DELETE", url, **kwargs)


def make_store(
    session: FakeSession, url: Optional[str] = "https://db.example/"
) -> RemoteStore:
    return RemoteStore(url, "secret", session=session)  # type: ignore[arg-type]


def test_load_found(make_entry):
    collection = new_collection("ana")
    collection["entries"].append(make_entry(local(2026, 6, 10, 9), date="2026-06-10"))
    row = {"coffee_data": convert_collection_for_serialization(collection)}
    session = FakeSession(FakeResponse(body=[row]))

    result = make_store(session).load(" Ana ")

    assert isinstance(result, Loaded)
    assert result.collection["entries"] == collection["entries"]
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("GET", "https://db.example/rest/v1/users")
    assert kwargs["params"] == {"select": "coffee_data", "username": "eq.ana"}
    assert kwargs["headers"]["apikey"] == "secret"
    assert kwargs["headers"]["Authorization"] == "Bearer secret"


def test_load_not_found():
    assert make_store(FakeSession(FakeResponse(body=[]))).load("ana") == NotFound()


def test_load_row_without_data():
    session = FakeSession(FakeResponse(body=[{"coffee_data": None}]))
    assert make_store(session).load("ana") == NotFound()


def test_http_error_is_failure():
    result = make_store(FakeSession(FakeResponse(status_code=503))).load("ana")
    assert isinstance(result, Failure)
    assert result.status_code == 503


def test_network_error_is_failure():
    session = FakeSession(requests.exceptions.ConnectionError("offline"))
    result = make_store(session).load("ana")
    assert isinstance(result, Failure)
    assert "offline" in result.reason


def test_invalid_json_is_failure():
    body = requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
    result = make_store(FakeSession(FakeResponse(body=body))).load("ana")
    assert isinstance(result, Failure)


def test_unexpected_body_is_failure():
    result = make_store(FakeSession(FakeResponse(body={"rows": []}))).load("ana")
    assert isinstance(result, Failure)


def test_corrupt_collection_is_failure():
    session = FakeSession(FakeResponse(body=[{"coffee_data": "garbage"}]))
    assert isinstance(make_store(session).load("ana"), Failure)


def test_save_upserts_on_username():
    session = FakeSession(FakeResponse(status_code=201))
    collection = new_collection("ana")

    assert make_store(session).save("Ana", collection) == Saved()

    method, _, kwargs = session.calls[0]
    assert method == "POST"
    assert kwargs["params"] == {"on_conflict": "username"}
    assert kwargs["headers"]["Prefer"] == "resolution=merge-duplicates,return=minimal"
    assert kwargs["json"]["username"] == "ana"
    assert kwargs["json"]["coffee_data"]["entries"] == []
    assert "updated_at" in kwargs["json"]


def test_save_failure():
    session = FakeSession(requests.exceptions.Timeout("slow"))
    assert isinstance(make_store(session).save("ana", new_collection("ana")), Failure)


def test_exists():
    session = FakeSession(
        FakeResponse(body=[{"username": "ana"}]), FakeResponse(body=[])
    )
    store = make_store(session)
    assert store.exists("ana") is True
    assert store.exists("bea") is False


def test_theme():
    session = FakeSession(
        FakeResponse(body=[{"theme": "kuromi"}]),
        FakeResponse(body=[{"theme": "darth"}]),
        FakeResponse(status_code=204),
    )
    store = make_store(session)

    assert store.load_theme("ana") == "kuromi"
    assert store.load_theme("ana") is None
    assert store.save_theme("ana", "keroppi") == Saved()
    assert session.calls[2][2]["json"]["theme"] == "keroppi"


def test_delete():
    session = FakeSession(FakeResponse(status_code=204))
    assert make_store(session).delete("ana") == Saved()
    assert session.calls[0][0] == "DELETE"


@pytest.mark.parametrize("url", [None, ""])
def test_unconfigured_store_never_calls_out(url):
    session = FakeSession()
    store = make_store(session, url=url)

    assert not store.is_configured
    assert store.load("ana") == Failure(NOT_CONFIGURED)
    assert store.save("ana", new_collection("ana")) == Failure(NOT_CONFIGURED)
    assert store.exists("ana") == Failure(NOT_CONFIGURED)
    assert session.calls == []
