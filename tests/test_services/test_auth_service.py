from unittest.mock import MagicMock, patch

import pytest
import requests

from waterwise.core.exceptions import AuthenticationException, ExternalServiceException
from waterwise.services.auth_service import AuthService


@pytest.fixture
def mock_settings():
    with patch("waterwise.services.auth_service.settings") as mock:
        mock.auth_url = "http://auth.test/auth/v1/"
        mock.auth_anon_key = "anon-key"
        mock.auth_timeout = 5
        yield mock


def response(status_code, body=None):
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.json.return_value = body or {}
    return mock_response


def test_url_joining(mock_settings):
    assert AuthService._url("/token") == "http://auth.test/auth/v1/token"


@patch("waterwise.services.auth_service.requests.post")
def test_login_user_success(mock_post, mock_settings):
    mock_post.return_value = response(200, {"access_token": "token", "refresh_token": "refresh"})

    result = AuthService.login_user("asha@example.com", "pass")

    assert result["access_token"] == "token"
    kwargs = mock_post.call_args.kwargs
    assert kwargs["params"] == {"grant_type": "password"}
    assert kwargs["json"] == {"email": "asha@example.com", "password": "pass"}
    assert kwargs["headers"]["apikey"] == "anon-key"


@patch("waterwise.services.auth_service.requests.post")
def test_login_user_failure(mock_post, mock_settings):
    mock_post.return_value = response(400)

    with pytest.raises(AuthenticationException):
        AuthService.login_user("asha@example.com", "wrong")


@patch("waterwise.services.auth_service.requests.post")
def test_login_user_service_error(mock_post, mock_settings):
    mock_post.return_value = response(502)

    with pytest.raises(ExternalServiceException):
        AuthService.login_user("asha@example.com", "pass")


@patch("waterwise.services.auth_service.requests.post")
def test_login_user_unreachable(mock_post, mock_settings):
    mock_post.side_effect = requests.ConnectionError("refused")

    with pytest.raises(ExternalServiceException):
        AuthService.login_user("asha@example.com", "pass")


@patch("waterwise.services.auth_service.requests.post")
def test_refresh_user_token_success(mock_post, mock_settings):
    mock_post.return_value = response(200, {"access_token": "new_token"})

    result = AuthService.refresh_user_token("refresh_token")

    assert result["access_token"] == "new_token"
    assert mock_post.call_args.kwargs["params"] == {"grant_type": "refresh_token"}


@patch("waterwise.services.auth_service.requests.post")
def test_logout_sends_bearer(mock_post, mock_settings):
    mock_post.return_value = response(204)

    AuthService.logout_user("access")

    assert mock_post.call_args.kwargs["headers"]["Authorization"] == "Bearer access"


@patch("waterwise.services.auth_service.requests.post")
def test_logout_failure(mock_post, mock_settings):
    mock_post.return_value = response(401)

    with pytest.raises(AuthenticationException):
        AuthService.logout_user("access")
