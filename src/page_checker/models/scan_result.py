"""Reporting schemas for a partial page check."""

from typing import Dict, List, Union
from pydantic import BaseModel, Field


class TelemetryEvent(BaseModel):
    """A fire-and-forget analytics event"""

    name: str = Field(description="Event name, e.g. partialPagesRemoved")
    attributes: Dict[str, Union[int, str]] = Field(
        default_factory=dict,
        description="Key/value attributes attached to the event",
        examples=[{"pagesRemoved": 3, "width": "_1920"}],
    )


class ScanResult(BaseModel):
    """Outcome of a completed check across all configured widths"""

    widths: List[str] = Field(
        default_factory=list, description="Width tags scanned, in scan order"
    )
    deleted: Dict[str, int] = Field(
        default_factory=dict, description="Number of images deleted per width tag"
    )

    def record(self, width: str, deleted_count: int) -> None:
        self.widths.append(width)
        self.deleted[width] = deleted_count

    @property
    def total_deleted(self) -> int:
        return sum(self.deleted.values())
