"""GTK front end for the column stack."""

from typing import Optional, Callable, Any

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk, GLib

from mindcolumns.column_stack import Column, ColumnStack
from mindcolumns.settings import NavigationSettings


def glib_scheduler(delay_ms: int, callback: Callable[[], bool]) -> int:
    """Run `callback` on the main loop after `delay_ms` milliseconds."""
    return GLib.timeout_add(delay_ms, callback)


def call_on_ui_thread(func: Callable[..., Any], *args) -> int:
    """Marshal a call onto the GLib main loop.

    Column stacks are only ever touched from the UI thread; worker threads
    hand their updates over through this.
    """
    def _run_once():
        func(*args)
        return False
    return GLib.idle_add(_run_once)


class HorizontalColumnView(Gtk.ScrolledWindow):
    """Horizontally scrolling strip of node columns.

    Columns handed to `add_column` must be GTK widgets implementing the
    Column protocol.
    """

    def __init__(self, settings: Optional[NavigationSettings] = None):
        super().__init__()
        self.settings = settings or NavigationSettings.from_env()

        self.set_policy(Gtk.PolicyType.AUTOMATIC, Gtk.PolicyType.NEVER)
        self.set_hexpand(True)
        self.set_vexpand(True)
        self.add_css_class("column-view")

        # A scrolled window takes a single child, so the columns live in a box
        self.box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL)
        self.box.set_vexpand(True)
        self.set_child(self.box)

        self.stack = ColumnStack(
            scroll_target=self,
            schedule=glib_scheduler,
            settings=self.settings,
        )
        self.stack.on_column_attached = self._on_column_attached
        self.stack.on_column_detached = self._on_column_detached

        # Viewport width changes
        self.get_hadjustment().connect("notify::page-size", self._on_page_size_changed)
        self.connect("destroy", self._on_destroy)

    def add_column(self, column: Column):
        """Append a column and bring it into view."""
        self.stack.append(column)
        self.stack.request_scroll_to_end()

    def column_width(self) -> int:
        """Width a column should take, given the current viewport.

        Column widgets call this from their `resize()` and apply it with
        `set_size_request`; the view calls `resize()` on every column
        whenever the viewport width changes.
        """
        page_size = self.get_hadjustment().get_page_size()
        return max(1, int(page_size * self.settings.column_width_fraction))

    def scroll_to_end(self):
        """Scroll fully to the right."""
        adjustment = self.get_hadjustment()
        adjustment.set_value(adjustment.get_upper() - adjustment.get_page_size())

    def _on_column_attached(self, column):
        self.box.append(column)

    def _on_column_detached(self, column):
        if column.get_parent() is self.box:
            self.box.remove(column)

    def _on_page_size_changed(self, adjustment, _pspec):
        self.stack.resize_all_columns()

    def _on_destroy(self, _widget):
        self.stack.close()
