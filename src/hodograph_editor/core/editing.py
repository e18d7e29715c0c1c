"""Pointer-driven editing of the control points.

The controller is a small state machine (idle / dragging a point) that
turns pointer events into ``PointStore`` mutations. It holds no reference
to any widget; the host forwards events and redraws when ``on_change``
fires.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from .picking import DEFAULT_HIT_TOLERANCE, closest_within_tolerance
from .points import PointStore, as_point

logger = logging.getLogger(__name__)


class PointerButton(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


class PointerKind(Enum):
    PRESS = "press"
    RELEASE = "release"
    CLICK = "click"
    DRAG = "drag"


class EditState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class PointerEvent:
    """A pointer event in canvas coordinates."""

    kind: PointerKind
    button: PointerButton
    position: Tuple[float, float]


class EditController:
    """Translates pointer events into add / move / remove operations.

    Attributes:
        store: The point store being edited.
        hit_tolerance: Radius within which a press or click targets an
            existing point. The host may rescale it to follow view zoom.
    """

    def __init__(
        self,
        store: PointStore,
        hit_tolerance: float = DEFAULT_HIT_TOLERANCE,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self.store = store
        self.hit_tolerance = float(hit_tolerance)
        self._on_change = on_change
        self._state = EditState.IDLE
        self._selected: Optional[int] = None
        self._existing_point_targeted = False

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def state(self) -> EditState:
        return self._state

    @property
    def selected_index(self) -> Optional[int]:
        """Index of the point being dragged, or ``None``.

        An index that no longer fits the store reads as no selection.
        """
        if self.store.contains_index(self._selected):
            return self._selected
        return None

    # ------------------------------------------------------------------
    # Event entry points
    # ------------------------------------------------------------------
    def handle(self, event: PointerEvent) -> None:
        if event.kind is PointerKind.PRESS:
            self.press(event.position, event.button)
        elif event.kind is PointerKind.DRAG:
            self.drag(event.position)
        elif event.kind is PointerKind.RELEASE:
            self.release(event.button)
        elif event.kind is PointerKind.CLICK:
            self.click(event.position, event.button)

    def press(self, position: Sequence[float], button: PointerButton = PointerButton.PRIMARY) -> None:
        if button is not PointerButton.PRIMARY:
            return

        self._existing_point_targeted = False
        index = self.hit_test(position)
        if index is None:
            return

        self._existing_point_targeted = True
        self._state = EditState.DRAGGING
        self._selected = index
        logger.debug("Dragging point %d", index)
        self._notify()

    def drag(self, position: Sequence[float]) -> None:
        if self._state is not EditState.DRAGGING:
            return
        index = self.selected_index
        if index is None:
            return
        self.store.set(index, as_point(position))
        self._notify()

    def release(self, button: PointerButton = PointerButton.PRIMARY) -> None:
        if button is not PointerButton.PRIMARY:
            return
        if self._state is EditState.IDLE and self._selected is None:
            return
        self._state = EditState.IDLE
        self._selected = None
        self._notify()

    def click(self, position: Sequence[float], button: PointerButton = PointerButton.PRIMARY) -> None:
        if button is PointerButton.SECONDARY:
            index = self.hit_test(position)
            if index is not None:
                self.store.remove_at(index)
                self._notify()
            return

        if not self._existing_point_targeted:
            self.store.add(position)
            self._notify()
        self._existing_point_targeted = False

    # ------------------------------------------------------------------
    def hit_test(self, position: Sequence[float]) -> Optional[int]:
        return closest_within_tolerance(position, self.store.all(), self.hit_tolerance)

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()
