# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
from dataclasses import dataclass

from pydantic import BaseModel

from netcall.http.models import RawResponse, TransportError
from netcall.response import ErrorKind, Failure, HttpError, Success, interpret


class LoginDO(BaseModel):
    accessToken: str | None = None
    error: str | None = None


@dataclass
class Address:
    city: str
    street: str
    houseNo: int
    zip: str


@dataclass
class Person:
    firstName: str
    lastName: str
    age: int
    address: Address
    likes: list[str]


PERSON_JSON = (
    b'{"firstName":"John","lastName":"Doe","age":20,'
    b'"address":{"city":"Stockholm","street":"Upplandsgatan","houseNo":7,"zip":"17788"},'
    b'"likes":["pizza","coffee"]}'
)


def test_transport_error_becomes_client_error():
    raw = RawResponse(error=TransportError(message="The request timed out."))
    assert interpret(raw) == Failure(HttpError.client("The request timed out."))


def test_missing_status_is_wrong_response_type():
    outcome = interpret(RawResponse(content=b"junk"))
    assert outcome == Failure(HttpError(kind=ErrorKind.CLIENT, message="wrong response type"))


def test_non_2xx_is_server_error():
    for status in (199, 300, 404, 500):
        outcome = interpret(RawResponse(status_code=status, content=b"{}"))
        assert outcome == Failure(HttpError.server(status))
        assert outcome.error.message is None


def test_2xx_with_and_without_content():
    assert interpret(RawResponse(status_code=200, content=b"abc")) == Success(b"abc")
    assert interpret(RawResponse(status_code=204)) == Success(None)
    assert interpret(RawResponse(status_code=299)).succeeded is True


def test_map_decodes_dataclasses_and_models():
    person = Success(PERSON_JSON).map(Person)
    assert person == Person(
        firstName="John",
        lastName="Doe",
        age=20,
        address=Address(city="Stockholm", street="Upplandsgatan", houseNo=7, zip="17788"),
        likes=["pizza", "coffee"],
    )
    login = Success(b'{"accessToken":"abc"}').map(LoginDO)
    assert login == LoginDO(accessToken="abc")


def test_map_returns_none_for_empty_or_failed_outcomes():
    assert Success(None).map(Person) is None
    assert Failure(HttpError.server(404)).map(Person) is None
    assert Failure(HttpError.client("boom")).map(dict) is None


def test_map_logs_and_returns_none_on_decode_failure(caplog):
    with caplog.at_level(logging.WARNING, logger="netcall.response"):
        assert Success(b"not json").map(Person) is None
        assert Success(b'{"firstName":"John"}').map(Person) is None
    assert "json decoding error" in caplog.text


def test_map_does_not_coerce_json_types():
    assert Success(b'"5"').map(int) is None
    assert Success(b"5").map(str) is None
    assert Success(b"5").map(int) == 5
