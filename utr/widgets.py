"""Key-driven models for the search prompt and the paginated lists."""

from bisect import bisect_right
from typing import Any, Callable, Optional

from .constants import (
    DEFAULT_CHAR_LIMIT,
    DEFAULT_LIST_HEIGHT,
    DEFAULT_LIST_WIDTH,
    LIST_DOWN_KEYS,
    LIST_END_KEYS,
    LIST_NEXT_PAGE_KEYS,
    LIST_PREV_PAGE_KEYS,
    LIST_START_KEYS,
    LIST_UP_KEYS,
)


class TextField:
    """Single-line text entry with a cursor and a character limit."""

    def __init__(self, placeholder: str = '', char_limit: int = DEFAULT_CHAR_LIMIT):
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.value = ''
        self.cursor = 0

    def set_value(self, value: str) -> None:
        self.value = value[:self.char_limit]
        self.cursor = len(self.value)

    def insert(self, text: str) -> None:
        room = self.char_limit - len(self.value)
        if room <= 0:
            return
        text = text[:room]
        self.value = self.value[:self.cursor] + text + self.value[self.cursor:]
        self.cursor += len(text)

    def handle_key(self, key: str, character: Optional[str] = None) -> None:
        """Apply an editing key. Unknown keys are ignored."""
        if key == 'backspace':
            if self.cursor > 0:
                self.value = self.value[:self.cursor - 1] + self.value[self.cursor:]
                self.cursor -= 1
        elif key == 'delete':
            self.value = self.value[:self.cursor] + self.value[self.cursor + 1:]
        elif key == 'left':
            self.cursor = max(0, self.cursor - 1)
        elif key == 'right':
            self.cursor = min(len(self.value), self.cursor + 1)
        elif key in ('home', 'ctrl+a'):
            self.cursor = 0
        elif key in ('end', 'ctrl+e'):
            self.cursor = len(self.value)
        elif key == 'ctrl+u':
            self.value = self.value[self.cursor:]
            self.cursor = 0
        elif character and character.isprintable():
            self.insert(character)


class ListModel:
    """
    A paginated, navigable list of rows.

    Pages are packed greedily from the first row: a row joins the current
    page while the lines used so far, its own height and the spacing before
    it still fit in `height`. Row heights come from `measure(item, index,
    focused, width)` when given, else every row is `row_height` lines. The
    focused row may be taller than its siblings, so pages are recomputed
    from the cursor rather than stored, and a resize can move the cursor
    onto a different page but never off the list.
    """

    def __init__(
        self,
        row_height: int = 1,
        width: int = DEFAULT_LIST_WIDTH,
        height: int = DEFAULT_LIST_HEIGHT,
        spacing: int = 0,
        measure: Optional[Callable[[Any, int, bool, int], int]] = None,
    ):
        self.row_height = row_height
        self.width = width
        self.height = height
        self.spacing = spacing
        self.measure = measure
        self.items: list[Any] = []
        self.index = 0

    def _row_lines(self, index: int) -> int:
        if self.measure is None:
            return self.row_height
        return max(1, self.measure(self.items[index], index, index == self.index, self.width))

    def page_starts(self) -> list[int]:
        """Index of the first row on each page."""
        starts = [0]
        used = 0
        for index in range(len(self.items)):
            lines = self._row_lines(index)
            if index == starts[-1]:
                used = lines
            elif used + self.spacing + lines <= self.height:
                used += self.spacing + lines
            else:
                starts.append(index)
                used = lines
        return starts

    @property
    def page(self) -> int:
        return bisect_right(self.page_starts(), self.index) - 1

    @property
    def total_pages(self) -> int:
        return len(self.page_starts())

    def set_items(self, items) -> None:
        self.items = list(items)
        self.index = 0

    def clear(self) -> None:
        self.set_items([])

    def set_size(self, width: int, height: int) -> None:
        self.width = max(1, width)
        self.height = max(1, height)

    def selected(self) -> Optional[Any]:
        if not self.items:
            return None
        return self.items[self.index]

    def visible(self) -> list[tuple[int, Any]]:
        """(index, item) pairs on the current page."""
        starts = self.page_starts()
        page = bisect_right(starts, self.index) - 1
        end = starts[page + 1] if page + 1 < len(starts) else len(self.items)
        return [(index, self.items[index]) for index in range(starts[page], end)]

    def cursor_up(self) -> None:
        if self.index > 0:
            self.index -= 1

    def cursor_down(self) -> None:
        if self.index < len(self.items) - 1:
            self.index += 1

    def prev_page(self) -> None:
        starts = self.page_starts()
        page = bisect_right(starts, self.index) - 1
        if page > 0:
            self.index = starts[page - 1]

    def next_page(self) -> None:
        starts = self.page_starts()
        page = bisect_right(starts, self.index) - 1
        if page < len(starts) - 1:
            self.index = starts[page + 1]

    def go_to_start(self) -> None:
        self.index = 0

    def go_to_end(self) -> None:
        if self.items:
            self.index = len(self.items) - 1

    def handle_key(self, key: str) -> None:
        """Apply a navigation key. Unknown keys are ignored."""
        if key in LIST_UP_KEYS:
            self.cursor_up()
        elif key in LIST_DOWN_KEYS:
            self.cursor_down()
        elif key in LIST_PREV_PAGE_KEYS:
            self.prev_page()
        elif key in LIST_NEXT_PAGE_KEYS:
            self.next_page()
        elif key in LIST_START_KEYS:
            self.go_to_start()
        elif key in LIST_END_KEYS:
            self.go_to_end()
