"""
Notification schema for the toast-style surface.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

NotificationVariant = Literal["default", "destructive"]


class Notification(BaseModel):
    title: str
    description: str
    variant: NotificationVariant = "default"
    created_at: datetime
