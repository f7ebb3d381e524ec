# tests/conftest.py
from typing import Callable, List, Optional, Tuple

import sys
from pathlib import Path

import pytest

# Add the project root to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from mindcolumns.column_stack import ColumnStack
from mindcolumns.settings import NavigationSettings


class FakeNode:
    def __init__(self, title: str = "", displayable: bool = True):
        self.title = title
        self.displayable = displayable

    def is_displayable_node(self) -> bool:
        return self.displayable

    def get_title(self) -> str:
        return self.title


class FakeColumn:
    """Column that records every call in a journal shared across columns."""

    def __init__(self, name: str, journal: List[Tuple[str, str]], parent=None):
        self.name = name
        self.journal = journal
        self.parent = parent

    def __repr__(self):
        return f"FakeColumn({self.name!r})"

    def resize(self):
        self.journal.append(("resize", self.name))

    def deselect_all(self):
        self.journal.append(("deselect_all", self.name))

    def get_parent_node(self):
        return self.parent


class FakeScheduler:
    def __init__(self):
        self.pending: List[Tuple[int, Callable[[], bool]]] = []

    def __call__(self, delay_ms: int, callback: Callable[[], bool]) -> int:
        self.pending.append((delay_ms, callback))
        return len(self.pending)

    def run_pending(self) -> List[bool]:
        pending, self.pending = self.pending, []
        return [callback() for _, callback in pending]


class FakeScrollTarget:
    def __init__(self):
        self.scrolls = 0

    def scroll_to_end(self):
        self.scrolls += 1


@pytest.fixture
def journal():
    return []


@pytest.fixture
def make_column(journal):
    def _make(name: str, parent: Optional[FakeNode] = None) -> FakeColumn:
        return FakeColumn(name, journal, parent)
    return _make


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def scroll_target():
    return FakeScrollTarget()


@pytest.fixture
def stack(scheduler, scroll_target):
    return ColumnStack(
        scroll_target=scroll_target,
        schedule=scheduler,
        settings=NavigationSettings(scroll_delay_ms=100),
    )


@pytest.fixture
def five_columns(stack, make_column, journal):
    columns = [make_column(f"c{i}") for i in range(1, 6)]
    for column in columns:
        stack.append(column)
    journal.clear()
    return columns
