"""Column stack navigation controller for mindcolumns.

A ColumnStack holds the columns currently shown left to right. Column 0 is
the root of the mind map; every column to its right lists the children of
the node selected in the column before it.
"""

import logging
from typing import Optional, List, Tuple, Callable, Protocol

from mindcolumns.settings import NavigationSettings

logger = logging.getLogger(__name__)

# schedule(delay_ms, callback) -> source id. The callback returns False so a
# GLib timeout source fires only once.
Scheduler = Callable[[int, Callable[[], bool]], int]


class TreeNode(Protocol):
    """A node of the mind map, as far as the column stack needs to know it."""

    def is_displayable_node(self) -> bool: ...

    def get_title(self) -> str: ...


class Column(Protocol):
    """One column of sibling nodes on screen."""

    def resize(self) -> None: ...

    def deselect_all(self) -> None: ...

    def get_parent_node(self) -> Optional[TreeNode]: ...


class ScrollTarget(Protocol):
    """The view that hosts the columns."""

    def scroll_to_end(self) -> None: ...


class MindColumnsError(Exception):
    """Base class for mindcolumns errors."""


class ColumnNotFound(MindColumnsError, LookupError):
    """Raised when an operation names a column that is not on the stack."""

    def __init__(self, column: object):
        super().__init__(f"Column {column!r} is not on the column stack")
        self.column = column


class _Lifeline:
    """Liveness flag shared between a stack and its pending UI callbacks."""

    __slots__ = ("alive",)

    def __init__(self):
        self.alive = True


class ColumnStack:
    """Ordered stack of columns, root on the left."""

    def __init__(self,
                 scroll_target: Optional[ScrollTarget] = None,
                 schedule: Optional[Scheduler] = None,
                 settings: Optional[NavigationSettings] = None):
        self.scroll_target = scroll_target
        self.schedule = schedule
        self.settings = settings or NavigationSettings()
        self._columns: List[Column] = []
        self._lifeline = _Lifeline()

        # Callbacks
        self.on_column_attached: Optional[Callable[[Column], None]] = None
        self.on_column_detached: Optional[Callable[[Column], None]] = None
        self.on_changed: Optional[Callable[[], None]] = None

    @property
    def columns(self) -> Tuple[Column, ...]:
        """Snapshot of the columns, left to right."""
        return tuple(self._columns)

    @property
    def root_column(self) -> Optional[Column]:
        return self._columns[0] if self._columns else None

    @property
    def rightmost_column(self) -> Optional[Column]:
        return self._columns[-1] if self._columns else None

    @property
    def is_closed(self) -> bool:
        return not self._lifeline.alive

    def __len__(self) -> int:
        return len(self._columns)

    # ==================== Mutation ====================

    def append(self, column: Column):
        """Add a column on the right.

        The caller is trusted to pass a column listing the children of the
        node selected in the current rightmost column.
        """
        self._columns.append(column)
        if self.on_column_attached:
            self.on_column_attached(column)
        logger.debug("Column stack now has %d columns", len(self._columns))
        self._notify_changed()

    def remove_rightmost_column(self) -> bool:
        """Remove the rightmost column.

        The root column is never removed: with fewer than two columns this
        does nothing and returns False. Otherwise the column is detached, the
        new rightmost column gets all its nodes deselected, and True is
        returned.
        """
        if len(self._columns) < 2:
            return False

        self._detach_rightmost()
        # The selection in the new rightmost column pointed at the column we
        # just dropped
        self._columns[-1].deselect_all()

        logger.debug("Column stack now has %d columns", len(self._columns))
        self._notify_changed()
        return True

    def remove_all_columns_right_of(self, column: Column):
        """Remove every column to the right of `column`.

        Columns are removed one at a time from the right, so each new
        rightmost column is deselected in turn. If `column` appears more than
        once, its last occurrence counts.

        Raises:
            ColumnNotFound: `column` is not on the stack. Nothing is removed.
        """
        index = self._last_index_of(column)
        if index is None:
            logger.warning("Cannot truncate column stack: %r is not on it", column)
            raise ColumnNotFound(column)

        while len(self._columns) - 1 > index:
            self.remove_rightmost_column()

    def remove_all_columns(self):
        """Remove every column, the root included.

        Only used when a new mind map is loaded; the caller appends the new
        root column right after.
        """
        if not self._columns:
            return
        while self._columns:
            self._detach_rightmost()
        logger.debug("Column stack cleared")
        self._notify_changed()

    def resize_all_columns(self):
        """Let every column recompute its width, left to right."""
        for column in list(self._columns):
            column.resize()

    def close(self):
        """Tear the stack down.

        Pending scroll actions become no-ops and callbacks are dropped. The
        columns themselves are left to the owner of the widgets.
        """
        self._lifeline.alive = False
        self.on_column_attached = None
        self.on_column_detached = None
        self.on_changed = None

    # ==================== Queries ====================

    def get_number_of_columns(self) -> int:
        return len(self._columns)

    def get_title_of_rightmost_parent(self) -> str:
        """Title of the node whose children the rightmost column shows.

        This is the node the user clicked last. Returns an empty string when
        there are no columns or the parent is not a titled mind map node.
        """
        if not self._columns:
            return ""

        parent = self._columns[-1].get_parent_node()
        if parent is None:
            return ""

        is_displayable = getattr(parent, "is_displayable_node", None)
        if not callable(is_displayable) or not is_displayable():
            return ""

        get_title = getattr(parent, "get_title", None)
        if not callable(get_title):
            return ""

        title = get_title()
        return title if isinstance(title, str) else ""

    # ==================== Scrolling ====================

    def request_scroll_to_end(self):
        """Scroll the view all the way to the right, after a short delay.

        The delay lets the host lay out a freshly appended column first.
        Repeated requests are harmless since they all scroll to the same
        place.
        """
        if self.is_closed or self.scroll_target is None or self.schedule is None:
            return

        lifeline = self._lifeline
        target = self.scroll_target

        def _do_scroll() -> bool:
            if lifeline.alive:
                target.scroll_to_end()
            return False

        self.schedule(self.settings.scroll_delay_ms, _do_scroll)

    # ==================== Helpers ====================

    def _last_index_of(self, column: Column) -> Optional[int]:
        for index in range(len(self._columns) - 1, -1, -1):
            if self._columns[index] is column:
                return index
        return None

    def _detach_rightmost(self):
        column = self._columns.pop()
        if self.on_column_detached:
            self.on_column_detached(column)

    def _notify_changed(self):
        if self.on_changed:
            self.on_changed()
