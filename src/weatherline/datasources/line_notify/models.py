"""LINE Notify response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class NotifyErrorBody(BaseModel):
    """Error payload returned with any non-200 status."""

    model_config = ConfigDict(strict=True, frozen=True)

    status: int = 0
    message: str = ""
