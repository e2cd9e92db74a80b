"""
Common Pydantic schemas (filters).
"""

from pydantic import BaseModel, Field

ALL_LEVELS = "all"


class LogFilter(BaseModel):
    """Search/level filter shared by the sync log and the external log views."""

    search_term: str = Field(default="", description="Case-insensitive substring")
    level: str = Field(default=ALL_LEVELS, description="Status/level to keep, or 'all'")

    def matches(self, level: str, *texts: str | None) -> bool:
        wanted = self.level.strip().lower()
        if wanted != ALL_LEVELS and (level or "").lower() != wanted:
            return False
        if not self.search_term:
            return True
        needle = self.search_term.lower()
        return any(needle in text.lower() for text in texts if text)
