"""
Inspector panels: object list and detail view.
"""

from .object_list import ObjectListPanel
from .detail_panel import DetailPanel

__all__ = [
    "ObjectListPanel",
    "DetailPanel",
]
