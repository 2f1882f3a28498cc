from __future__ import annotations


class NavigationHandler:
    """Index arithmetic shared by select and multi-select.

    With ``cyclic`` off, moving past either end is a no-op and reports that
    no redraw is needed; with it on, the index wraps around.
    """

    def __init__(self, item_count: int, cyclic: bool = False) -> None:
        self.item_count = max(item_count, 0)
        self.cyclic = cyclic

    def process_arrow_key(self, current_index: int, direction: str) -> tuple[int, bool]:
        if self.item_count == 0:
            return 0, False
        if direction == "up":
            if current_index > 0:
                return current_index - 1, True
            if self.cyclic:
                return self.item_count - 1, True
            return current_index, False
        if direction == "down":
            if current_index < self.item_count - 1:
                return current_index + 1, True
            if self.cyclic:
                return 0, True
            return current_index, False
        return current_index, False

    def validate_index(self, index: int) -> int:
        if index < 0 or index >= self.item_count:
            return 0
        return index
