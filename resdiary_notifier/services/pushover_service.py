"""Pushover service for slot notifications."""

import logging

import httpx

from resdiary_notifier.config import Settings

logger = logging.getLogger(__name__)

PUSHOVER_MESSAGES_URL = "https://api.pushover.net/1/messages.json"


def build_slot_message(restaurant: str, display_time: str) -> str:
    """Build the one-line notification text for an acceptable slot."""
    return f"found slot at {restaurant}: {display_time}"


class PushoverService:
    """Service for sending push notifications through Pushover.

    Failures are logged and reported through the return value, never
    raised, so one failed notification does not stop the run.
    """

    def __init__(
        self,
        api_key: str,
        recipient: str,
        client: httpx.Client | None = None,
        messages_url: str = PUSHOVER_MESSAGES_URL,
    ) -> None:
        """Initialize the Pushover service."""
        self.api_key = api_key
        self.recipient = recipient
        self.messages_url = messages_url
        self._client = client
        logger.info("Pushover service initialized")

    @classmethod
    def from_settings(
        cls, settings: Settings, client: httpx.Client | None = None
    ) -> "PushoverService":
        return cls(settings.pushover_api_key, settings.pushover_recipient, client=client)

    def _post(self, data: dict[str, str]) -> httpx.Response:
        if self._client is not None:
            return self._client.post(self.messages_url, data=data)
        return httpx.post(self.messages_url, data=data)

    def send_message(self, message: str) -> bool:
        """Send a message to the configured recipient.

        Args:
            message: Notification text

        Returns:
            True if Pushover accepted the message, False otherwise
        """
        data = {
            "token": self.api_key,
            "user": self.recipient,
            "message": message,
        }

        try:
            response = self._post(data)
        except httpx.HTTPError:
            logger.exception("Failed to send Pushover notification")
            return False

        if not response.is_success:
            logger.error(
                f"Pushover rejected notification (status {response.status_code}): "
                f"{response.text[:500]}"
            )
            return False

        try:
            body = response.json()
        except ValueError:
            logger.exception("Pushover returned a non-JSON response")
            return False

        if not isinstance(body, dict) or body.get("status") != 1:
            errors = body.get("errors") if isinstance(body, dict) else body
            logger.error(f"Pushover rejected notification: {errors}")
            return False

        logger.debug(f"Pushover accepted notification, request {body.get('request')}")
        return True
