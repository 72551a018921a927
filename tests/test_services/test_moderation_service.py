from unittest.mock import MagicMock, patch

import pytest
import requests

from waterwise.core.exceptions import ExternalServiceException
from waterwise.services.moderation_service import ModerationService


@pytest.fixture
def mock_settings():
    with patch("waterwise.services.moderation_service.settings") as mock:
        mock.moderation_enabled = True
        mock.moderation_api_key = "sk-test"
        mock.moderation_api_url = "https://llm.test/v1/chat/completions"
        mock.moderation_model = "gpt-4"
        mock.moderation_timeout = 5
        yield mock


def reply(content, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = {"choices": [{"message": {"content": content}}]}
    return response


@pytest.mark.parametrize("answer", ["YES", " yes\n", "Yes"])
@patch("waterwise.services.moderation_service.requests.post")
def test_relevant_comment(mock_post, answer, mock_settings):
    mock_post.return_value = reply(answer)

    assert ModerationService.is_relevant("Great tip on rain barrels!") is True

    kwargs = mock_post.call_args.kwargs
    assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
    assert kwargs["json"]["max_tokens"] == 5
    assert kwargs["json"]["model"] == "gpt-4"
    assert "Great tip on rain barrels!" in kwargs["json"]["messages"][1]["content"]


@pytest.mark.parametrize("answer", ["NO", "YES.", "Yes, it is", ""])
@patch("waterwise.services.moderation_service.requests.post")
def test_anything_but_yes_is_off_topic(mock_post, answer, mock_settings):
    mock_post.return_value = reply(answer)

    assert ModerationService.is_relevant("Buy cheap sneakers") is False


@patch("waterwise.services.moderation_service.requests.post")
def test_api_error_raises(mock_post, mock_settings):
    mock_post.return_value = reply("YES", status_code=500)

    with pytest.raises(ExternalServiceException):
        ModerationService.is_relevant("comment")


@patch("waterwise.services.moderation_service.requests.post")
def test_connection_error_raises(mock_post, mock_settings):
    mock_post.side_effect = requests.ConnectionError("down")

    with pytest.raises(ExternalServiceException):
        ModerationService.is_relevant("comment")


def test_malformed_response_is_not_relevant():
    assert ModerationService.parse_verdict({"choices": []}) is False
    assert ModerationService.parse_verdict({}) is False


@patch("waterwise.services.moderation_service.requests.post")
def test_non_json_reply_is_not_relevant(mock_post, mock_settings):
    response = MagicMock()
    response.status_code = 200
    response.text = "<html>oops</html>"
    response.json.side_effect = ValueError("Expecting value")
    mock_post.return_value = response

    assert ModerationService.is_relevant("water saving tip") is False


@patch("waterwise.services.moderation_service.requests.post")
def test_disabled_without_key(mock_post):
    with patch("waterwise.services.moderation_service.settings") as mock:
        mock.moderation_enabled = False
        assert ModerationService.is_relevant("anything") is True
    mock_post.assert_not_called()
