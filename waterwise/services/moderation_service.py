"""
Comment relevance check against an OpenAI compatible chat completions API.
"""

import logging

import requests

from waterwise.core.config import settings
from waterwise.core.constants import MODERATION_SYSTEM_PROMPT, MODERATION_USER_PROMPT
from waterwise.core.exceptions import ExternalServiceException

logger = logging.getLogger(__name__)


class ModerationService:
    @staticmethod
    def _payload(comment: str) -> dict:
        return {
            "model": settings.moderation_model,
            "messages": [
                {"role": "system", "content": MODERATION_SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": MODERATION_USER_PROMPT.format(comment=comment),
                },
            ],
            "max_tokens": 5,
        }

    @staticmethod
    def parse_verdict(body: dict) -> bool:
        """A comment is relevant only when the model answers exactly YES."""
        try:
            reply = body["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            logger.warning(f"Unexpected moderation response shape: {body}")
            return False
        return (reply or "").strip().upper() == "YES"

    @staticmethod
    def is_relevant(comment: str) -> bool:
        """
        Ask the model whether the comment is on topic.
        Without a configured API key every comment is accepted.
        """
        if not settings.moderation_enabled:
            logger.warning("MODERATION_API_KEY not set; skipping comment relevance check")
            return True

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {settings.moderation_api_key}",
        }
        try:
            response = requests.post(
                settings.moderation_api_url,
                json=ModerationService._payload(comment),
                headers=headers,
                timeout=settings.moderation_timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Moderation request failed: {e}")
            raise ExternalServiceException(message="Comment moderation unavailable")

        if response.status_code != 200:
            logger.error(
                f"Moderation API error. Status: {response.status_code}, Body: {response.text}"
            )
            raise ExternalServiceException(
                message="Comment moderation unavailable",
                details={"status_code": response.status_code},
            )

        try:
            body = response.json()
        except ValueError:
            logger.warning(f"Moderation response is not JSON: {response.text!r}")
            return False
        return ModerationService.parse_verdict(body)
