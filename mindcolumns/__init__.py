"""Column-based drill-down navigation for mind maps."""

__version__ = "1.0.0"
__app_id__ = "io.github.mindcolumns"

from mindcolumns.column_stack import (
    Column,
    ColumnNotFound,
    ColumnStack,
    MindColumnsError,
    ScrollTarget,
    TreeNode,
)
from mindcolumns.mindmap import MindmapNode
from mindcolumns.settings import NavigationSettings

__all__ = [
    "Column",
    "ColumnNotFound",
    "ColumnStack",
    "MindColumnsError",
    "MindmapNode",
    "NavigationSettings",
    "ScrollTarget",
    "TreeNode",
]
