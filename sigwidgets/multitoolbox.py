"""Tool box model in which several sections may be expanded at once."""

from __future__ import annotations

from typing import Callable, List, Optional

NO_PAGE = "(no page)"
EXPANDED_MARK = " ▼ "
COLLAPSED_MARK = " ▶ "


class ToolBoxItem:
    """A named section that can be expanded or collapsed."""

    def __init__(self, name: str, visible: bool = True) -> None:
        self.name = name
        self.collapsed = not visible
        self.shown = visible
        self._listeners: List[Callable[["ToolBoxItem"], None]] = []

    @property
    def visible(self) -> bool:
        """Whether the section is expanded."""
        return not self.collapsed

    def subscribe(self, listener: Callable[["ToolBoxItem"], None]) -> None:
        """Call listener whenever the expanded state changes."""
        self._listeners.append(listener)

    def set_visible(self, visible: bool) -> bool:
        """Expand or collapse. Return whether the state changed."""
        if self.visible == bool(visible):
            return False
        self.collapsed = not visible
        for listener in list(self._listeners):
            listener(self)
        return True


class MultiToolBox:
    """An ordered list of sections with a current page."""

    def __init__(self) -> None:
        self._items: List[ToolBoxItem] = []
        self.current_index = -1

    def __len__(self) -> int:
        return len(self._items)

    def _refresh(self, _item: Optional[ToolBoxItem] = None) -> None:
        for item in self._items:
            item.shown = item.visible

    def add_item(self, item: ToolBoxItem) -> int:
        """Append a section and return its index."""
        self._items.append(item)
        item.subscribe(self._refresh)
        self._refresh()
        return len(self._items) - 1

    def add_page(self, title: str) -> int:
        """Append a new section with a title and make it the current one."""
        index = self.add_item(ToolBoxItem(title))
        self.set_current_index(index)
        return index

    def set_current_index(self, index: int) -> bool:
        """Expand only the section at index. Return whether the index changed."""
        if index == self.current_index:
            return False
        self.current_index = index
        for position, item in enumerate(self._items):
            item.set_visible(position == index)
        return True

    def item_at(self, index: int) -> Optional[ToolBoxItem]:
        """The section at index, or None if there is none."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def page_title(self) -> str:
        """Title of the current section."""
        item = self.item_at(self.current_index)
        return NO_PAGE if item is None else item.name

    def set_page_title(self, name: str) -> bool:
        """Rename the current section. Return False if there is none."""
        item = self.item_at(self.current_index)
        if item is None:
            return False
        item.name = name
        self._refresh()
        return True

    def show_item(self, index: int) -> bool:
        """Show the contents of a section. Return False if there is none."""
        item = self.item_at(index)
        if item is None:
            return False
        item.shown = True
        return True

    def hide_item(self, index: int) -> bool:
        """Hide the contents of a section. Return False if there is none."""
        item = self.item_at(index)
        if item is None:
            return False
        item.shown = False
        return True

    def toggle(self, index: int) -> Optional[bool]:
        """Flip a section as its header button would; return its new state.

        An expanded section becomes current. None if there is no such section.
        """
        item = self.item_at(index)
        if item is None:
            return None
        item.set_visible(not item.visible)
        if item.visible:
            self.current_index = index
        return item.visible

    def button_labels(self) -> List[str]:
        """Header texts, with a mark showing whether each section is expanded."""
        return [
            (EXPANDED_MARK if item.visible else COLLAPSED_MARK) + item.name
            for item in self._items
        ]