"""LINE Notify API client.

API docs: https://notify-bot.line.me/doc/en/
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

from weatherline.datasources.line_notify.models import NotifyErrorBody
from weatherline.errors import DecodeError, NotifyError
from weatherline.services.http import create_session

if TYPE_CHECKING:
    import requests

LINE_NOTIFY_API_BASE = "https://notify-api.line.me"
NOTIFY_PATH = "/api/notify"


class LineNotifyClient:
    """Posts text messages with a personal access token."""

    def __init__(
        self,
        token: str,
        *,
        base_url: str = LINE_NOTIFY_API_BASE,
        session: requests.Session | None = None,
    ) -> None:
        self.token = token
        self.url = base_url.rstrip("/") + NOTIFY_PATH
        self.session = session or create_session()

    def send(self, message: str) -> None:
        """
        Send ``message`` as-is.

        Raises:
            requests.RequestException: Transport failure.
            DecodeError: Non-200 response whose body is not the error JSON.
            NotifyError: LINE Notify rejected the message.
        """
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/x-www-form-urlencoded",
        }
        with self.session.post(self.url, data={"message": message}, headers=headers) as resp:
            if resp.status_code == 200:
                return
            status = resp.status_code
            body = resp.content

        try:
            err = NotifyErrorBody.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"invalid LINE Notify error response (HTTP {status}): {e}") from e
        raise NotifyError(err.status, err.message)
