"""View box that forwards mouse interaction to the edit controller."""

from __future__ import annotations

from typing import Optional, Tuple

import pyqtgraph as pg
from PySide6.QtCore import QPointF, Qt

from ...core import EditController, PointerButton


_BUTTONS = {
    Qt.MouseButton.LeftButton: PointerButton.PRIMARY,
    Qt.MouseButton.RightButton: PointerButton.SECONDARY,
}


class PixelViewBox(pg.ViewBox):
    """View box whose data coordinates are widget pixels, origin top-left."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setMenuEnabled(False)
        self.setMouseEnabled(x=False, y=False)
        self.disableAutoRange()
        self.invertY(True)
        self.sigResized.connect(self._match_pixel_range)

    def _match_pixel_range(self, *_args) -> None:
        width = max(self.width(), 1.0)
        height = max(self.height(), 1.0)
        self.setRange(xRange=(0.0, width), yRange=(0.0, height), padding=0)


class PointerViewBox(PixelViewBox):
    """Pixel view box that turns clicks and drags into controller calls.

    A click becomes press, release and click in that order. A drag becomes
    press at the button-down position, then moves, then release.

    Attributes:
        controller: Receives every forwarded pointer event.
    """

    def __init__(self, controller: EditController, tolerance_px: float, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.controller = controller
        self._tolerance_px = float(tolerance_px)

    def mouseClickEvent(self, ev):  # type: ignore[override]
        button = _BUTTONS.get(ev.button())
        if button is None:
            ev.ignore()
            return

        self._sync_tolerance()
        position = self._to_view(ev.pos())
        self.controller.press(position, button)
        self.controller.release(button)
        self.controller.click(position, button)
        ev.accept()

    def mouseDragEvent(self, ev, axis=None):  # type: ignore[override]
        if _BUTTONS.get(ev.button()) is not PointerButton.PRIMARY:
            ev.ignore()
            return

        ev.accept()
        if ev.isStart():
            self._sync_tolerance()
            self.controller.press(self._to_view(ev.buttonDownPos()), PointerButton.PRIMARY)

        self.controller.drag(self._to_view(ev.pos()))

        if ev.isFinish():
            self.controller.release(PointerButton.PRIMARY)

    def _to_view(self, item_pos: QPointF) -> Tuple[float, float]:
        data_pos = self.mapToView(item_pos)
        return (float(data_pos.x()), float(data_pos.y()))

    def _sync_tolerance(self) -> None:
        """Convert the pixel tolerance into view units for the current zoom."""
        pixel_size: Optional[Tuple[float, float]] = self.viewPixelSize()
        if pixel_size is None:
            return
        pixel_dx, pixel_dy = pixel_size
        pixel_scale = max(abs(pixel_dx), abs(pixel_dy)) if pixel_dx and pixel_dy else 1.0
        self.controller.hit_tolerance = self._tolerance_px * pixel_scale
