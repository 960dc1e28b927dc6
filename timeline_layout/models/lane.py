# File: timeline_layout/models/lane.py

from dataclasses import dataclass
from typing import Optional

DEFAULT_LANE_ID = "default"


@dataclass(frozen=True)
class Lane:
    """A named vertical partition of the timeline (a 'column' in the planner UI)."""
    id: str
    title: Optional[str] = None

    @property
    def display_title(self) -> str:
        """Header text; falls back to the upper-cased id."""
        return self.title or self.id.upper()

    def to_dict(self) -> dict:
        return {'id': self.id, 'title': self.title}


def lane_from_dict(data: dict) -> Lane:
    """Create a Lane from a dictionary."""
    return Lane(id=str(data['id']), title=data.get('title'))
