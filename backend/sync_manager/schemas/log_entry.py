"""
External log file schemas (system / exception logs served by the integration backend).
"""

from datetime import datetime
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class LogSource(str, Enum):
    SYSTEM = "system"
    EXCEPTIONS = "exceptions"


class RawLogRecord(BaseModel):
    """One line as the backend returns it. Every field is optional."""
    model_config = ConfigDict(extra="ignore")

    timestamp: str | None = None
    level: str | None = None
    message: str | None = None
    raw: str | None = None


class LogEntry(BaseModel):
    """Normalized view of one raw log line."""
    model_config = ConfigDict(frozen=True)

    id: str
    timestamp: datetime
    level: str
    source: str
    message: str
    details: str | None = None


class FileStat(BaseModel):
    """Size and line count of one log file on the backend."""
    model_config = ConfigDict(populate_by_name=True)

    exists: bool = False
    size_bytes: int = Field(default=0, validation_alias=AliasChoices("sizeBytes", "size_bytes", "size"))
    line_count: int = Field(default=0, validation_alias=AliasChoices("lineCount", "line_count", "lines"))


class LogStats(BaseModel):
    system: FileStat
    exceptions: FileStat


class LogListResponse(BaseModel):
    source: LogSource
    entries: list[LogEntry]
    total: int
