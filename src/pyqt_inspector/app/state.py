"""
Inspector selection state and caches.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from pyqt_inspector.services.inspection_service import ObjectListEntry
from pyqt_inspector.store.ids import ObjectId
from pyqt_inspector.store.metadata import ComponentMetadataMap


class DetailTab(Enum):
    COMPONENTS = "Components"
    RELATIONSHIPS = "Relationships"


@dataclass
class InspectorState:
    """
    What the operator is looking at.

    previous_selection / previous_tab record what the detail panel last
    showed; the detail panel is rebuilt only when they differ from the
    current selection or tab.
    """
    selected: Optional[ObjectId] = None
    active_tab: DetailTab = DetailTab.COMPONENTS
    filter_text: str = ""
    previous_selection: Optional[ObjectId] = None
    previous_tab: Optional[DetailTab] = None

    def select(self, object_id: Optional[ObjectId]) -> None:
        self.selected = object_id

    def set_tab(self, tab: DetailTab) -> None:
        self.active_tab = tab

    @property
    def needs_rebuild(self) -> bool:
        return self.selected != self.previous_selection or self.active_tab != self.previous_tab

    def mark_rebuilt(self) -> None:
        self.previous_selection = self.selected
        self.previous_tab = self.active_tab

    def request_rebuild(self) -> None:
        """Force the next cycle to rebuild the detail panel."""
        self.previous_tab = None


@dataclass
class InspectorCache:
    """Object list data reused across cycles."""
    entries: List[ObjectListEntry] = field(default_factory=list)
    filtered: List[ObjectListEntry] = field(default_factory=list)
    metadata: Optional[ComponentMetadataMap] = None
    stale: bool = True
