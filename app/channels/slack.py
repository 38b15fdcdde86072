from typing import Any

import requests
from aws_lambda_powertools import Logger

from .base import BaseChannel


logger = Logger(child=True)

SLACK_API_BASE = "https://slack.com/api"


def _auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}", "Content-Type": "application/json; charset=utf-8"}


class SlackChannel(BaseChannel):
    def __init__(self, enabled: bool, token: str):
        self._enabled = enabled
        self._token = token

    @property
    def name(self) -> str:
        return "slack"

    def is_enabled(self) -> bool:
        return self._enabled and bool(self._token)

    def post(self, text: str, channel_ref: str) -> bool:
        payload = self._build_payload(text, channel_ref)

        try:
            response = requests.post(
                f"{SLACK_API_BASE}/chat.postMessage",
                json=payload,
                headers=_auth_headers(self._token),
                timeout=10,
            )
            response.raise_for_status()

            result = response.json()
            if result.get("ok"):
                logger.info("Slack message sent", extra={"channel": channel_ref, "ts": result.get("ts")})
                return True
            else:
                logger.error("Slack API error", extra={"channel": channel_ref, "error": result.get("error")})
                return False
        except requests.RequestException as e:
            logger.error("Failed to send Slack message", extra={"channel": channel_ref, "error": str(e)})
            return False

    @staticmethod
    def _build_payload(text: str, channel_ref: str) -> dict[str, Any]:
        return {"channel": channel_ref, "text": text, "unfurl_links": False}


class SlackUserDirectory:
    """Looks up display names with users.info."""

    def __init__(self, token: str):
        self._token = token

    def display_name(self, user_id: str) -> str | None:
        try:
            response = requests.get(
                f"{SLACK_API_BASE}/users.info",
                params={"user": user_id},
                headers=_auth_headers(self._token),
                timeout=10,
            )
            response.raise_for_status()
            result = response.json()
        except requests.RequestException as e:
            logger.warning("Failed to look up Slack user", extra={"user_id": user_id, "error": str(e)})
            return None

        if not result.get("ok"):
            logger.warning("Slack users.info error", extra={"user_id": user_id, "error": result.get("error")})
            return None

        user = result.get("user", {})
        return user.get("profile", {}).get("real_name") or user.get("real_name") or user.get("name")
