from types import SimpleNamespace
from typing import List

import pytest

pytest.importorskip("pyqtgraph")
QtCore = pytest.importorskip("PySide6.QtCore")

from hodograph_editor import EditController, EditState, PointStore  # noqa: E402
from hodograph_editor.gui.canvas.pointer_view import PointerViewBox  # noqa: E402

LEFT = QtCore.Qt.MouseButton.LeftButton
RIGHT = QtCore.Qt.MouseButton.RightButton


class FakeMouseEvent:
    """Minimal stand-in for pyqtgraph's click and drag events."""

    def __init__(self, button, pos, down_pos=None, start=False, finish=False):
        self._button = button
        self._pos = pos
        self._down_pos = down_pos if down_pos is not None else pos
        self._start = start
        self._finish = finish
        self.accepted = None

    def button(self):
        return self._button

    def pos(self):
        return self._pos

    def buttonDownPos(self):
        return self._down_pos

    def isStart(self):
        return self._start

    def isFinish(self):
        return self._finish

    def accept(self):
        self.accepted = True

    def ignore(self):
        self.accepted = False


class RecordingController:
    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def press(self, position, button):
        self.calls.append(("press", position, button))

    def drag(self, position):
        self.calls.append(("drag", position))

    def release(self, button):
        self.calls.append(("release", button))

    def click(self, position, button):
        self.calls.append(("click", position, button))


def _view(controller) -> SimpleNamespace:
    # Skips widget construction; positions are already in view units
    return SimpleNamespace(
        controller=controller,
        _sync_tolerance=lambda: None,
        _to_view=lambda pos: (float(pos[0]), float(pos[1])),
    )


def test_click_forwards_press_release_click_in_order() -> None:
    controller = RecordingController()
    event = FakeMouseEvent(LEFT, (12, 34))

    PointerViewBox.mouseClickEvent(_view(controller), event)

    assert [call[0] for call in controller.calls] == ["press", "release", "click"]
    assert controller.calls[0][1] == (12.0, 34.0)
    assert event.accepted is True


def test_click_on_existing_point_does_not_duplicate_it() -> None:
    controller = EditController(PointStore([(50, 50)]), hit_tolerance=10)
    view = _view(controller)

    PointerViewBox.mouseClickEvent(view, FakeMouseEvent(LEFT, (52, 49)))
    assert controller.store.all() == ((50.0, 50.0),)

    PointerViewBox.mouseClickEvent(view, FakeMouseEvent(LEFT, (200, 200)))
    assert controller.store.all() == ((50.0, 50.0), (200.0, 200.0))


def test_right_click_removes_targeted_point() -> None:
    controller = EditController(PointStore([(50, 50), (90, 90)]), hit_tolerance=10)

    PointerViewBox.mouseClickEvent(_view(controller), FakeMouseEvent(RIGHT, (51, 51)))

    assert controller.store.all() == ((90.0, 90.0),)


def test_drag_presses_at_button_down_position() -> None:
    controller = EditController(PointStore([(50, 50)]), hit_tolerance=10)
    view = _view(controller)

    # pyqtgraph reports the first drag event after the pointer already moved
    PointerViewBox.mouseDragEvent(
        view, FakeMouseEvent(LEFT, (70, 70), down_pos=(50, 50), start=True)
    )
    assert controller.state is EditState.DRAGGING
    assert controller.store.all() == ((70.0, 70.0),)

    PointerViewBox.mouseDragEvent(view, FakeMouseEvent(LEFT, (120, 80)))
    PointerViewBox.mouseDragEvent(view, FakeMouseEvent(LEFT, (130, 90), finish=True))

    assert controller.state is EditState.IDLE
    assert controller.store.all() == ((130.0, 90.0),)


def test_secondary_drag_is_ignored() -> None:
    controller = RecordingController()
    event = FakeMouseEvent(RIGHT, (70, 70), down_pos=(50, 50), start=True)

    PointerViewBox.mouseDragEvent(_view(controller), event)

    assert controller.calls == []
    assert event.accepted is False
