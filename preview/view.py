"""Interaction state kept beside a scene: hover target and dimension editing."""
from typing import Callable

from parcel.types import Side
from parcel.constants import SIDES

DimensionCallback = Callable[[Side, str], None]


class ViewContext:
    """Mutable view state for one preview; never stored inside a Scene.

    on_dimension_change(side, value) is invoked with the raw text the user
    typed for a side while editing.
    """

    def __init__(self, editing: bool = False, hovered: int | None = None,
                 on_dimension_change: DimensionCallback | None = None):
        self.editing = editing
        self.hovered = hovered
        self.on_dimension_change = on_dimension_change

    def hover(self, index: int):
        self.hovered = index

    def leave(self):
        self.hovered = None

    def toggle_editing(self) -> bool:
        self.editing = not self.editing
        return self.editing

    def change_dimension(self, side: Side, value: str):
        """Forward an edited side value to the callback (no-op without one)."""
        if side not in SIDES:
            raise ValueError(f"Unknown side {side!r}; expected one of {SIDES}")
        if self.on_dimension_change is not None:
            self.on_dimension_change(side, value)

    def __repr__(self):
        return f"ViewContext(editing={self.editing}, hovered={self.hovered})"
