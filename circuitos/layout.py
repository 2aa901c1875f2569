"""Layouts that size and position their child elements."""

from __future__ import annotations

import enum
from typing import Optional

from circuitos.element import Element, ElementContainer


class WHType(enum.Enum):
    """How a layout determines its width or height."""

    FIXED = 0
    CHILDREN = 1
    PARENT = 2


class LayoutDirection(enum.Enum):
    """Direction in which a linear layout stacks its children."""

    HORIZONTAL = 0
    VERTICAL = 1


class Layout(ElementContainer):
    """Container whose size is fixed, follows its children or fills its parent."""

    def __init__(self, parent: Optional[ElementContainer] = None) -> None:
        super().__init__(parent)
        self.gutter = 0
        self.padding = 0
        self.w_type = WHType.FIXED
        self.h_type = WHType.FIXED
        self._width = 0
        self._height = 0

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = value

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = value

    @property
    def available_width(self) -> int:
        """Width inside the padding."""
        return self._width - 2 * self.padding

    @property
    def available_height(self) -> int:
        """Height inside the padding."""
        return self._height - 2 * self.padding

    def set_padding(self, padding: int) -> Layout:
        self.padding = padding
        return self

    def set_gutter(self, gutter: int) -> Layout:
        self.gutter = gutter
        return self

    def set_wh_type(self, w_type: WHType, h_type: WHType) -> None:
        self.w_type = w_type
        self.h_type = h_type

    def _require_parent(self) -> ElementContainer:
        if self.parent is None:
            raise ValueError("layout sized by its parent has no parent")
        return self.parent

    def reflow(self) -> None:
        """Recompute the size from the children or the parent."""
        if self.w_type is WHType.CHILDREN:
            self.width = max((child.width for child in self.children), default=0)
        elif self.w_type is WHType.PARENT:
            self.width = self._require_parent().available_width

        if self.h_type is WHType.CHILDREN:
            self.height = max((child.height for child in self.children), default=0)
        elif self.h_type is WHType.PARENT:
            self.height = self._require_parent().available_height

    def repos(self) -> None:
        """Position the children, then let each position its own children."""
        self.repos_children()
        for child in self.children:
            child.repos()

    def repos_children(self) -> None:
        """Place the direct children; a plain layout leaves them where they are."""


class LinearLayout(Layout):
    """Stacks children in a row or a column, separated by the gutter."""

    def __init__(self, parent: Optional[ElementContainer], direction: LayoutDirection) -> None:
        super().__init__(parent)
        self.direction = direction

    def repos_children(self) -> None:
        x = y = self.padding
        for child in self.children:
            child.set_pos(x, y)
            if self.direction is LayoutDirection.VERTICAL:
                y += self.gutter + child.height
            else:
                x += self.gutter + child.width

    def _stacked(self, sizes: list[int]) -> int:
        total = 2 * self.padding
        if sizes:
            total += sum(sizes) + self.gutter * (len(sizes) - 1)
        return total

    def reflow(self) -> None:
        widths = [child.width for child in self.children]
        heights = [child.height for child in self.children]
        horizontal = self.direction is LayoutDirection.HORIZONTAL

        if self.w_type is WHType.PARENT:
            self.width = self._require_parent().available_width
        elif self.w_type is WHType.CHILDREN:
            if horizontal:
                self.width = self._stacked(widths)
            else:
                self.width = max(widths, default=0) + 2 * self.padding

        if self.h_type is WHType.PARENT:
            self.height = self._require_parent().available_height
        elif self.h_type is WHType.CHILDREN:
            if horizontal:
                self.height = max(heights, default=0) + 2 * self.padding
            else:
                self.height = self._stacked(heights)


class GridLayout(Layout):
    """Arranges children in rows of ``cols`` elements."""

    def __init__(self, parent: Optional[ElementContainer], cols: int) -> None:
        if cols <= 0:
            raise ValueError("a grid needs at least one column")
        super().__init__(parent)
        self.cols = cols

    def reflow(self) -> None:
        if self.w_type is WHType.PARENT:
            self.width = self._require_parent().available_width
        elif self.w_type is WHType.CHILDREN and self.children:
            max_row_width = 0
            row_width = 0
            for count, child in enumerate(self.children, start=1):
                row_width += child.width + self.gutter
                if count % self.cols == 0:
                    max_row_width = max(max_row_width, row_width - self.gutter)
                    row_width = 0
            if row_width != 0:
                max_row_width = max(max_row_width, row_width - self.gutter)
            self.width = 2 * self.padding + max_row_width

        if self.h_type is WHType.PARENT:
            self.height = self._require_parent().available_height
        elif self.h_type is WHType.CHILDREN and self.children:
            height = 2 * self.padding
            row_height = 0
            for count, child in enumerate(self.children, start=1):
                row_height = max(row_height, child.height)
                if count % self.cols == 0:
                    height += row_height + self.gutter
                    row_height = 0
            if row_height == 0:
                # The last row was complete: drop its trailing gutter.
                row_height = -self.gutter
            self.height = height + row_height

    def repos_children(self) -> None:
        x = y = self.padding
        col = 0
        max_height = 0
        for child in self.children:
            child.set_pos(x, y)
            x += child.width + self.gutter
            max_height = max(max_height, child.height)
            col += 1
            if col == self.cols:
                y += max_height + self.gutter
                x = self.padding
                max_height = 0
                col = 0


class ScrollLayout(Layout):
    """Shows a window onto a single child that may be larger than itself."""

    def __init__(self, parent: Optional[ElementContainer] = None) -> None:
        super().__init__(parent)
        self._scroll_x = 0
        self._scroll_y = 0

    @property
    def scroll_x(self) -> int:
        return self._scroll_x

    @property
    def scroll_y(self) -> int:
        return self._scroll_y

    def add_child(self, element: Optional[Element]) -> ScrollLayout:
        """Set the single child, replacing any previous one; None removes it."""
        if element is None:
            self.children.clear()
        elif not self.children:
            self.children.append(element)
        else:
            self.children[0] = element
        return self

    def _place_child(self) -> None:
        if self.children:
            self.children[0].set_pos(self.padding - self._scroll_x, self.padding - self._scroll_y)

    def repos_children(self) -> None:
        self._place_child()

    def set_scroll(self, scroll_x: int, scroll_y: int) -> None:
        self._scroll_x = scroll_x
        self._scroll_y = scroll_y
        self._place_child()

    @property
    def max_scroll_x(self) -> int:
        if not self.children or self.children[0].width < self.width:
            return 0
        return self.children[0].width - self.width

    @property
    def max_scroll_y(self) -> int:
        if not self.children or self.children[0].height < self.height:
            return 0
        return self.children[0].height - self.height

    def scroll_into_view(self, child: int, over: int = 0) -> None:
        """Scroll so that the ``child``-th element of the contained container is visible.

        ``over`` is how far to scroll past the element. Raises TypeError if
        the scrolled element is not a container.
        """
        if not self.children:
            return
        container = self.children[0]
        if not isinstance(container, ElementContainer):
            raise TypeError("the scrolled element is not a container")
        if not 0 <= child < len(container.children):
            return
        element = container.get_child(child)

        scroll_x = self._scroll_x
        scroll_y = self._scroll_y

        if element.x < self._scroll_x:
            scroll_x = element.x - over
        elif element.x + element.width + over > self._scroll_x + self.width:
            scroll_x = element.x + element.width + over - self.width

        if element.y < self._scroll_y:
            scroll_y = element.y - over
        elif element.y + element.height + over > self._scroll_y + self.height:
            scroll_y = element.y + element.height + over - self.height

        self.set_scroll(
            max(0, min(scroll_x, self.max_scroll_x)),
            max(0, min(scroll_y, self.max_scroll_y)),
        )