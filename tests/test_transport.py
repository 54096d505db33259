"""httpx 响应适配"""

import httpx
import pytest

from aws_cognito_idp import (
    AdminGetUserResponse,
    AdminInitiateAuthResponse,
    CognitoClientError,
    HttpResponse,
)

pytestmark = pytest.mark.unit


def _resp(status_code: int, **kwargs) -> httpx.Response:
    request = httpx.Request("POST", "https://cognito-idp.us-east-1.amazonaws.com/")
    return httpx.Response(status_code, request=request, **kwargs)


def test_success_returns_json_object():
    response = HttpResponse(_resp(200, json={"Username": "alice"}))
    assert response.to_dict() == {"Username": "alice"}


def test_body_is_decoded_once():
    response = HttpResponse(_resp(200, json={"Username": "alice"}))
    assert response.to_dict() is response.to_dict()


def test_empty_body_is_empty_tree():
    assert HttpResponse(_resp(200)).to_dict() == {}


def test_non_object_body_is_client_error():
    with pytest.raises(CognitoClientError):
        HttpResponse(_resp(200, json=["a"])).to_dict()


def test_invalid_json_is_client_error():
    with pytest.raises(CognitoClientError):
        HttpResponse(_resp(200, content=b"<html>")).to_dict()


def test_error_status_parses_service_error():
    resp = _resp(
        400,
        json={"__type": "UserNotFoundException", "message": "User does not exist."},
        headers={"x-amzn-RequestId": "req-1"},
    )

    with pytest.raises(CognitoClientError) as exc_info:
        HttpResponse(resp).to_dict()

    error = exc_info.value.error
    assert error.status == 400
    assert error.type == "UserNotFoundException"
    assert error.detail == "User does not exist."
    assert error.request_id == "req-1"
    assert str(exc_info.value) == "[400] UserNotFoundException: User does not exist. (request: req-1)"


def test_error_status_with_plain_text_body():
    with pytest.raises(CognitoClientError) as exc_info:
        HttpResponse(_resp(502, text="Bad Gateway")).to_dict()

    assert exc_info.value.error.status == 502
    assert exc_info.value.error.detail == "Bad Gateway"


def test_custom_expected_codes():
    response = HttpResponse(_resp(202, json={"Session": "s"}), expected_codes=[200, 202])
    assert response.to_dict() == {"Session": "s"}


def test_results_read_from_http_response():
    user = AdminGetUserResponse(HttpResponse(_resp(200, json={
        "Username": "alice",
        "Enabled": True,
        "UserCreateDate": 1700000000.123456,
    })))
    assert user.username == "alice"
    assert user.enabled is True
    assert user.user_create_date.microsecond == 123456

    auth = AdminInitiateAuthResponse(HttpResponse(_resp(200, json={
        "AuthenticationResult": {"AccessToken": "abc", "ExpiresIn": 3600, "TokenType": "Bearer"},
    })))
    assert auth.authentication_result.token_type == "Bearer"


def test_result_surfaces_transport_error():
    result = AdminGetUserResponse(HttpResponse(_resp(400, json={"__type": "NotAuthorizedException"})))
    with pytest.raises(CognitoClientError) as exc_info:
        result.username
    assert exc_info.value.error.type == "NotAuthorizedException"
    assert not result.is_populated
