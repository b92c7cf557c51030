"""Frame selection over a sprite sheet laid out in columns and rows."""

from __future__ import annotations

from typing import Protocol

from wanderer.geometry import Point, Rect, Size


class SizedTexture(Protocol):
    def get_size(self) -> tuple[int, int]: ...


class Animation:
    """Cycles through the columns of the current row of a sprite sheet."""

    def __init__(
        self, texture: SizedTexture, column_count: int, row_count: int, switch_time: float
    ) -> None:
        self._column = 0
        self._row = 0
        self._total_time = 0.0
        self._switch_time = switch_time
        self.set_texture(texture, column_count, row_count)

    def set_column(self, column: int) -> None:
        """Select a column; an index past the end is clamped without refreshing the frame."""
        if column < 0:
            raise ValueError("column must not be negative")
        if column >= self._column_count:
            self._column = self._column_count - 1
            return
        self._column = column
        self._update_view_rect()

    def set_row(self, row: int) -> None:
        """Select a row; an index past the end is clamped without refreshing the frame."""
        if row < 0:
            raise ValueError("row must not be negative")
        if row >= self._row_count:
            self._row = self._row_count - 1
            return
        self._row = row
        self._update_view_rect()

    def set_texture(self, texture: SizedTexture, column_count: int, row_count: int) -> None:
        """Use a new sheet; the visible frame goes back to the top-left one."""
        if column_count <= 0 or row_count <= 0:
            raise ValueError("column and row counts must be positive")
        self.texture = texture
        self._column_count = column_count
        self._row_count = row_count
        width, height = texture.get_size()
        self._frame_size = Size(width // column_count, height // row_count)
        self._view_pos = Point(0, 0)

    def set_switch_time(self, switch_time: float) -> None:
        self._switch_time = switch_time

    def update(self, delta_time: float) -> None:
        """Accumulate time and move to the next frame once the switch time is reached."""
        self._total_time += delta_time
        if self._total_time >= self._switch_time:
            self._total_time -= self._switch_time
            self._switch_frame()

    def view_rect(self) -> Rect:
        """The sheet region of the current frame."""
        return Rect(
            Point(self._view_pos.x, self._view_pos.y),
            Size(self._frame_size.width, self._frame_size.height),
        )

    def _update_view_rect(self) -> None:
        self._view_pos = Point(
            self._column * self._frame_size.width, self._row * self._frame_size.height
        )

    def _switch_frame(self) -> None:
        self._column += 1
        if self._column >= self._column_count:
            self._column = 0
        self._update_view_rect()