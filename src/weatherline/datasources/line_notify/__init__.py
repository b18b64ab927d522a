"""LINE Notify data sink.

Public API:
  - client: LineNotifyClient, LINE_NOTIFY_API_BASE
"""

from weatherline.datasources.line_notify.client import LINE_NOTIFY_API_BASE, LineNotifyClient
from weatherline.datasources.line_notify.models import NotifyErrorBody

__all__ = ["LINE_NOTIFY_API_BASE", "LineNotifyClient", "NotifyErrorBody"]
