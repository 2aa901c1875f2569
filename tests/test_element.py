import pytest

from circuitos.element import CustomElement, Element, ElementContainer


class Box(ElementContainer):
    def __init__(self, parent=None, width=100, height=50):
        super().__init__(parent)
        self._w = width
        self._h = height

    @property
    def width(self):
        return self._w

    @property
    def height(self):
        return self._h

    @property
    def available_width(self):
        return self._w

    @property
    def available_height(self):
        return self._h


def test_element_is_abstract():
    with pytest.raises(TypeError):
        Element()


def test_custom_element_size_is_settable():
    el = CustomElement(None, 10, 20)
    assert (el.width, el.height) == (10, 20)
    el.width = 30
    el.height = 40
    assert (el.width, el.height) == (30, 40)


def test_set_border():
    el = CustomElement(None, 5, 5)
    el.set_border(3, 0xF800)
    assert el.border_width == 3
    assert el.border_color == 0xF800


def test_default_border_is_off():
    assert CustomElement(None, 1, 1).border_width == 0


def test_total_position_adds_parent_offsets():
    root = Box()
    root.set_pos(5, 7)
    inner = Box(root)
    inner.set_pos(10, 20)
    leaf = CustomElement(inner, 1, 1)
    leaf.set_pos(1, 2)
    assert leaf.total_x == 5 + 10 + 1
    assert leaf.total_y == 7 + 20 + 2


def test_total_position_without_parent_is_own_position():
    el = CustomElement(None, 1, 1)
    el.set_pos(4, 9)
    assert (el.total_x, el.total_y) == (4, 9)


def test_add_child_chains_and_get_child():
    box = Box()
    a = CustomElement(box, 1, 1)
    b = CustomElement(box, 2, 2)
    assert box.add_child(a).add_child(b) is box
    assert box.get_child(0) is a
    assert box.get_child(1) is b
    assert box.children == [a, b]


def test_get_child_out_of_range_raises():
    box = Box()
    only = CustomElement(box, 1, 1)
    box.add_child(only)
    assert box.get_child(0) is only
    with pytest.raises(IndexError):
        box.get_child(1)


def test_repos_resets_children_recursively():
    root = Box()
    inner = Box(root)
    leaf = CustomElement(inner, 1, 1)
    root.add_child(inner)
    inner.add_child(leaf)
    inner.set_pos(3, 4)
    leaf.set_pos(5, 6)
    root.repos()
    assert (inner.x, inner.y) == (0, 0)
    assert (leaf.x, leaf.y) == (0, 0)


def test_repos_leaves_container_itself_in_place():
    root = Box()
    root.set_pos(8, 9)
    root.add_child(CustomElement(root, 1, 1))
    root.repos()
    assert (root.x, root.y) == (8, 9)