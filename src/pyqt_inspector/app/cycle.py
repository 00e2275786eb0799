"""
Inspector update cycle.

One cycle runs its phases strictly in this order:

1. object cache refresh   (read phase)
2. write-back             (exclusive write phase)
3. detail rebuild, only if the selection or tab changed   (read phase)

Input has already been turned into queued changes by the time a cycle runs,
so the write phase never overlaps a traversal.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from pyqt_inspector.core.performance_monitor import get_monitor, timer
from pyqt_inspector.protocols.inspector_config import InspectorConfig, get_inspector_config
from pyqt_inspector.services.field_change_dispatcher import FieldChangeDispatcher
from pyqt_inspector.services.inspection_service import (
    InspectionService, ObjectInspection, ObjectListEntry, RelationshipsData,
)
from pyqt_inspector.services.search_service import SearchService
from pyqt_inspector.services.write_back_service import WriteBackFailure, WriteBackService
from pyqt_inspector.store.metadata import ComponentMetadataMap
from pyqt_inspector.store.protocols import StoreAccessor
from .state import DetailTab, InspectorCache, InspectorState

logger = logging.getLogger(__name__)

EMPTY_SELECTION_MESSAGE = "Select an object to view details"
STALE_SELECTION_MESSAGE = "Selected object no longer exists"


class DetailKind(Enum):
    EMPTY = "empty"
    ERROR = "error"
    COMPONENTS = "components"
    RELATIONSHIPS = "relationships"


@dataclass(frozen=True)
class DetailContent:
    """Everything the detail panel needs to render one rebuild."""
    kind: DetailKind
    message: str = ""
    inspection: Optional[ObjectInspection] = None
    relationships: Optional[RelationshipsData] = None


@dataclass
class CycleResult:
    list_changed: bool = False
    entries: List[ObjectListEntry] = field(default_factory=list)
    failures: List[WriteBackFailure] = field(default_factory=list)
    detail: Optional[DetailContent] = None


class InspectorCycle:
    """
    Drives one inspector over one store.

    Usage:
        cycle = InspectorCycle(world)
        cycle.state.select(player)
        result = cycle.run_cycle()
        if result.detail is not None:
            panel.show_content(result.detail)
    """

    def __init__(self, store: StoreAccessor,
                 dispatcher: Optional[FieldChangeDispatcher] = None,
                 state: Optional[InspectorState] = None,
                 inspection: Optional[InspectionService] = None,
                 write_back: Optional[WriteBackService] = None,
                 config: Optional[InspectorConfig] = None):
        self.store = store
        self.config = config or get_inspector_config()
        self.dispatcher = dispatcher or FieldChangeDispatcher()
        self.state = state or InspectorState()
        self.cache = InspectorCache()
        self.inspection = inspection or InspectionService(config=self.config)
        self.write_back = write_back or WriteBackService()
        self.search: SearchService = SearchService(
            {}, lambda entry: entry.display_name, self.config.search_min_chars,
        )
        self._detail_kind: Optional[DetailKind] = None
        self._monitor = get_monitor("Inspector cycle")

    def set_filter(self, text: str) -> None:
        if text != self.state.filter_text:
            self.state.filter_text = text
            self.cache.stale = True

    def run_cycle(self) -> CycleResult:
        result = CycleResult()
        with self._monitor.measure(), timer("Inspector cycle", self.config.slow_cycle_threshold_ms):
            result.list_changed = self.refresh_cache()
            result.entries = list(self.cache.filtered)
            result.failures = self.write_back.apply_pending(self.store, self.dispatcher.pending)
            result.detail = self.rebuild_detail()
        return result

    # ========== PHASES ==========

    def refresh_cache(self) -> bool:
        """Re-read the object list. Returns True if the filtered list changed."""
        with self.store.read_phase():
            if self.cache.metadata is None:
                self.cache.metadata = ComponentMetadataMap.generate(self.store)
            else:
                self.cache.metadata.update(self.store)
            entries = self.inspection.list_entries(self.store, self.cache.metadata)

            selected = self.state.selected
            if (selected is not None and not self.store.contains(selected)
                    and self._detail_kind is not DetailKind.ERROR):
                self.state.request_rebuild()

        changed = self.cache.stale or entries != self.cache.entries
        if changed:
            self.cache.entries = entries
            self.search.update_items({entry.object_id: entry for entry in entries})
            self.cache.filtered = list(self.search.filter(self.state.filter_text).values())
            self.cache.stale = False
        return changed

    def rebuild_detail(self) -> Optional[DetailContent]:
        """Build detail content if the selection or tab changed since the last rebuild."""
        if not self.state.needs_rebuild:
            return None
        self.state.mark_rebuilt()

        selected = self.state.selected
        with self.store.read_phase():
            if selected is None:
                content = DetailContent(DetailKind.EMPTY, EMPTY_SELECTION_MESSAGE)
            elif not self.store.contains(selected):
                content = DetailContent(DetailKind.ERROR, STALE_SELECTION_MESSAGE)
            elif self.state.active_tab is DetailTab.COMPONENTS:
                content = DetailContent(
                    DetailKind.COMPONENTS,
                    inspection=self.inspection.inspect_object(self.store, selected, self._metadata()),
                )
            else:
                content = DetailContent(
                    DetailKind.RELATIONSHIPS,
                    relationships=self.inspection.relationships(self.store, selected),
                )

        self._detail_kind = content.kind
        logger.debug(f"Rebuilt detail panel: {content.kind.value}")
        return content

    def _metadata(self) -> ComponentMetadataMap:
        if self.cache.metadata is None:
            self.cache.metadata = ComponentMetadataMap.generate(self.store)
        return self.cache.metadata
