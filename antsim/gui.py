"""Layout model of the editor's widgets: items, containers, buttons, sliders."""

from enum import Enum
from typing import Callable, List, Optional, Tuple

Vec2 = Tuple[float, float]
Color = Tuple[int, int, int, int]
Callback = Callable[[], None]

WHITE: Color = (255, 255, 255, 255)


class Size(Enum):
    """How an item's extent along one axis is decided."""

    AUTO = "auto"
    FIXED = "fixed"
    FIT_CONTENT = "fit_content"


class Alignment(Enum):
    NONE = "none"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def create_color(r, g, b) -> Color:
    """Opaque colour from three channel values truncated to bytes."""
    return (int(r) & 0xFF, int(g) & 0xFF, int(b) & 0xFF, 255)


def _vec(value) -> Vec2:
    return (float(value[0]), float(value[1]))


class Item:
    """A rectangular widget with children and change observers."""

    SCALE = 1.0

    def __init__(self, size: Vec2 = (0.0, 0.0), position: Vec2 = (0.0, 0.0)) -> None:
        self.size = _vec(size)
        self.position = _vec(position)
        self.size_type: List[Size] = [Size.AUTO, Size.AUTO]
        self.padding = 0.0
        self.sub_items: List["Item"] = []
        self.name = ""
        self.catch_event = True
        self.clicking = False
        self._observers: List[Callback] = []
        self._size_observers: List[Callback] = []

    def set_size(self, size: Vec2) -> None:
        new_size = _vec(size)
        if new_size == self.size:
            return
        self.size = new_size
        self.on_size_change()
        for callback in list(self._size_observers):
            callback()

    def set_position(self, position: Vec2) -> None:
        new_position = _vec(position)
        if new_position == self.position:
            return
        self.position = new_position
        self.on_position_change()

    def set_width(self, width: float, size_type: Size = Size.FIXED) -> None:
        self.size_type[0] = size_type
        self.set_size((width, self.size[1]))

    def set_height(self, height: float, size_type: Size = Size.FIXED) -> None:
        self.size_type[1] = size_type
        self.set_size((self.size[0], height))

    def add_item(self, item: "Item", name: str = "") -> None:
        item.name = name
        self.sub_items.append(item)

    def get_by_name(self, name: str) -> Optional["Item"]:
        """The direct child registered under ``name``, or None."""
        if not name:
            return None
        return next((item for item in self.sub_items if item.name == name), None)

    def watch(self, item: "Item", callback: Callback) -> None:
        """Call ``callback`` whenever ``item`` reports a change."""
        item._observers.append(callback)

    def watch_size(self, item: "Item", callback: Callback) -> None:
        """Call ``callback`` whenever ``item`` changes size."""
        item._size_observers.append(callback)

    def notify_changed(self) -> None:
        for callback in list(self._observers):
            callback()

    def on_click(self, mouse_position: Vec2, button) -> None:
        pass

    def on_mouse_move(self, mouse_position: Vec2) -> None:
        pass

    def on_size_change(self) -> None:
        pass

    def on_position_change(self) -> None:
        pass


class _TextLabel(Item):
    def __init__(self, text: str, char_size: int, size: Vec2 = (0.0, 0.0), position: Vec2 = (0.0, 0.0)) -> None:
        super().__init__(size, position)
        self.padding = 1.0
        self.text = text
        self.char_size = char_size
        self.color: Color = (100, 100, 100, 255)
        self.alignment = Alignment.CENTER

    def set_text(self, text: str) -> None:
        self.text = text


class Container(Item):
    """Lays its children out in a row or a column."""

    def __init__(
        self,
        orientation: Orientation,
        size: Vec2 = (0.0, 0.0),
        position: Vec2 = (0.0, 0.0),
    ) -> None:
        super().__init__(size, position)
        self.orientation = orientation
        self.spacing = 8.0
        self.padding = 8.0
        self.color: Color = WHITE
        self._axis1 = 0 if orientation is Orientation.HORIZONTAL else 1
        self._axis2 = 1 - self._axis1

    def _make_vec(self, coord1: float, coord2: float) -> Vec2:
        result = [0.0, 0.0]
        result[self._axis1] = coord1
        result[self._axis2] = coord2
        return (result[0], result[1])

    def add_item(self, item: Item, name: str = "") -> None:
        Item.add_item(self, item, name)
        self.watch_size(item, self.update_items)
        self.update_items()

    def remove_item(self, item: Item) -> None:
        for index, sub in enumerate(self.sub_items):
            if sub is item:
                del self.sub_items[index]
                self.update_items()
                return

    def on_size_change(self) -> None:
        self.update_items()

    def on_position_change(self) -> None:
        self.update_items()

    def is_empty(self) -> bool:
        return not self.sub_items

    def auto_item_size(self) -> Optional[float]:
        """Extent along the main axis for each auto-sized child, or None."""
        count = len(self.sub_items)
        if count == 0:
            return None
        a1 = self._axis1
        auto_count = count
        remaining = self.size[a1] - 2.0 * self.padding
        for item in self.sub_items:
            if item.size_type[a1] is not Size.AUTO:
                remaining -= item.size[a1]
                auto_count -= 1
        if auto_count == 0:
            return None
        remaining -= self.spacing * (count - 1)
        return remaining / auto_count

    def update_items(self) -> None:
        """Position and size the children, then fit this container if asked."""
        a1, a2 = self._axis1, self._axis2
        all_fixed = True
        this_coord2 = self.size[a2]
        current_pos = self.padding
        auto_size = self.auto_item_size()
        auto_value = auto_size if auto_size is not None else 0.0
        coord2_size = this_coord2 - 2.0 * self.padding
        for item in list(self.sub_items):
            new_size = list(item.size)
            if item.size_type[a2] is Size.AUTO:
                new_size[a2] = coord2_size
            if item.size_type[a1] is Size.AUTO:
                new_size[a1] = auto_value
                all_fixed = False
            item.set_position(
                self._make_vec(current_pos, self.padding + (coord2_size - item.size[a2]) * 0.5)
            )
            item.set_size((new_size[0], new_size[1]))
            this_coord2 = max(this_coord2, new_size[a2] + 2.0 * self.padding)
            current_pos += item.size[a1] + self.spacing
        new_own = list(self.size)
        if self.size_type[a1] is Size.FIT_CONTENT and all_fixed:
            new_own[a1] = current_pos + self.padding - self.spacing * (1.0 if self.sub_items else 0.0)
        if self.size_type[a2] is Size.FIT_CONTENT:
            new_own[a2] = this_coord2
        self.set_size((new_own[0], new_own[1]))

    def fit_content(self) -> None:
        self.size_type = [Size.FIT_CONTENT, Size.FIT_CONTENT]


class NamedContainer(Container):
    """A titled panel whose content lives in an inner ``root`` container."""

    def __init__(self, name: str, orientation: Orientation = Orientation.VERTICAL) -> None:
        super().__init__(Orientation.VERTICAL)
        self.padding = 7.0
        self.spacing = 5.0
        self.size_type[1] = Size.FIT_CONTENT
        self.background_intensity = 220
        self.show_root = True

        self.header = Container(Orientation.HORIZONTAL)
        self.header.padding = 0.0
        self.header.spacing = 0.0
        self.header.size_type[1] = Size.FIT_CONTENT

        self.label = _TextLabel(name, 14)
        self.label.color = (100, 100, 100, 255)
        self.label.set_height(20.0)
        self.label.alignment = Alignment.LEFT
        self.header.add_item(self.label)

        self.root = Container(orientation)
        self.root.padding = 0.0
        self.root.size_type[1] = Size.FIT_CONTENT

        Container.add_item(self, self.header)

    def hide_root(self) -> None:
        self.show_root = False
        Container.remove_item(self, self.root)

    def unhide_root(self) -> None:
        if not self.show_root:
            self.show_root = True
            Container.add_item(self, self.root)

    def fit_label(self) -> None:
        """Keep the header as wide as its label."""

        def follow() -> None:
            self.header.set_width(self.label.size[0])

        follow()
        self.watch_size(self.label, follow)

    def add_item(self, item: Item, name: str = "") -> None:
        if self.root.is_empty() and self.show_root:
            Container.add_item(self, self.root)
        self.root.add_item(item, name)

    def remove_item(self, item: Item) -> None:
        self.root.remove_item(item)
        if self.root.is_empty():
            Container.remove_item(self, self.root)

    def fit_content(self) -> None:
        Container.fit_content(self)
        self.root.fit_content()


class DefaultButton(Item):
    """An item that runs a callback when clicked."""

    def __init__(
        self,
        callback: Optional[Callback] = None,
        size: Vec2 = (0.0, 0.0),
        position: Vec2 = (0.0, 0.0),
    ) -> None:
        super().__init__(size, position)
        self.click_callback: Callback = callback if callback is not None else (lambda: None)

    def on_click(self, mouse_position: Vec2, button) -> None:
        self.click_callback()


class Button(DefaultButton):
    """A clickable item with a text label covering it."""

    def __init__(self, text: str, callback: Optional[Callback] = None) -> None:
        super().__init__(callback)
        self.angle_radius = 5.0
        self.background_color: Color = WHITE
        self.label = _TextLabel(text, 14)
        self.label.catch_event = False
        self.add_item(self.label)

    def on_size_change(self) -> None:
        self.label.set_size(self.size)

    def on_position_change(self) -> None:
        self.label.set_position((0.0, 0.0))


class Slider(Item):
    """Horizontal cursor choosing a value between a minimum and a maximum."""

    def __init__(
        self,
        max_value: float,
        min_value: float = 0.0,
        size: Vec2 = (0.0, 0.0),
        position: Vec2 = (0.0, 0.0),
    ) -> None:
        super().__init__(size, position)
        self.current_ratio = 0.5
        self.min_value = min_value
        self.max_value = max_value
        self.set_height(20.0)
        self.padding = 3.0

    def value(self) -> float:
        return self.min_value + (self.max_value - self.min_value) * self.current_ratio

    def set_cursor_position(self, x: float) -> None:
        width = self.size[0] - 2.0 * self.padding
        max_x = self.size[0] - self.padding
        clamped = min(max(x, self.padding), max_x)
        self.current_ratio = (clamped - self.padding) / width
        self.notify_changed()

    def on_click(self, mouse_position: Vec2, button) -> None:
        self.set_cursor_position(mouse_position[0])

    def on_mouse_move(self, mouse_position: Vec2) -> None:
        if self.clicking:
            self.set_cursor_position(mouse_position[0])


class SliderLabel(Container):
    """A slider with a label showing its integer value."""

    def __init__(
        self,
        max_value: float,
        min_value: float = 0.0,
        size: Vec2 = (0.0, 0.0),
        position: Vec2 = (0.0, 0.0),
    ) -> None:
        super().__init__(Orientation.HORIZONTAL, size, position)
        self.size_type[1] = Size.FIT_CONTENT
        self.slider = Slider(max_value, min_value)
        self.label = _TextLabel("", 16)
        self.label.set_width(20.0)
        self.add_item(self.label)
        self.add_item(self.slider)
        self.watch(self.slider, self.update_label)
        self.update_label()

    def update_label(self) -> None:
        self.label.set_text(str(int(self.slider.value())))
        self.notify_changed()

    def value(self) -> float:
        return self.slider.value()