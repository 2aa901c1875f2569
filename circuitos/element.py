"""Base classes of the element tree used to lay out a user interface."""

from __future__ import annotations

import abc
from typing import Optional

BLACK = 0x0000
TRANSPARENT = 0x0120


class Element(abc.ABC):
    """Something with a size and a position relative to its parent."""

    def __init__(self, parent: Optional[ElementContainer] = None) -> None:
        self.parent = parent
        self.x = 0
        self.y = 0
        self.background = BLACK
        self.border_color = BLACK
        self.border_width = 0
        self.chroma_key = TRANSPARENT
        self.chroma = True

    @property
    @abc.abstractmethod
    def width(self) -> int:
        """Width in pixels."""

    @property
    @abc.abstractmethod
    def height(self) -> int:
        """Height in pixels."""

    def set_border(self, width: int, color: int) -> None:
        self.border_width = width
        self.border_color = color

    def set_pos(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    @property
    def total_x(self) -> int:
        """Horizontal position relative to the root of the tree."""
        return self.x + (self.parent.total_x if self.parent is not None else 0)

    @property
    def total_y(self) -> int:
        """Vertical position relative to the root of the tree."""
        return self.y + (self.parent.total_y if self.parent is not None else 0)

    def repos(self) -> None:
        """Recompute the positions of any children; a plain element has none."""


class ElementContainer(Element):
    """Element that holds child elements."""

    def __init__(self, parent: Optional[ElementContainer] = None) -> None:
        super().__init__(parent)
        self.children: list[Element] = []

    def add_child(self, element: Element) -> ElementContainer:
        """Append a child; returns the container for chaining."""
        self.children.append(element)
        return self

    def get_child(self, index: int) -> Element:
        return self.children[index]

    @property
    @abc.abstractmethod
    def available_width(self) -> int:
        """Width left for children."""

    @property
    @abc.abstractmethod
    def available_height(self) -> int:
        """Height left for children."""

    def repos(self) -> None:
        """Move every child to the origin and let it reposition its own children."""
        for child in self.children:
            child.set_pos(0, 0)
            child.repos()


class CustomElement(Element):
    """Element with an explicitly set size."""

    def __init__(self, parent: Optional[ElementContainer], width: int, height: int) -> None:
        super().__init__(parent)
        self._width = width
        self._height = height

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