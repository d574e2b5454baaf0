"""Editing session: the opened image, the current settings and the history."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from imagex.filters import FilterType, apply_filters
from imagex.history import History

__all__ = ["Editor"]

BLUR_RANGE = range(0, 101)
BRIGHTNESS_RANGE = range(-100, 101)
CONTRAST_RANGE = range(0, 301)


def _check(name: str, value: int, allowed: range) -> int:
    if value not in allowed:
        raise ValueError(f"{name} must be between {allowed.start} and {allowed.stop - 1}, got {value}")
    return value


class Editor:
    """Holds the original image and re-renders it whenever a setting changes."""

    def __init__(self) -> None:
        self.original: np.ndarray | None = None
        self.pixels: np.ndarray | None = None
        self.blur = 0
        self.brightness = 0
        self.contrast = 100
        self.filter_type = FilterType.NORMAL
        self.history = History()

    @property
    def image(self) -> Image.Image | None:
        """The displayed image, or ``None`` before anything is loaded."""
        return None if self.pixels is None else Image.fromarray(self.pixels, "RGB")

    def open(self, path) -> None:
        """Read an image file and show it unfiltered."""
        with Image.open(Path(path)) as image:
            self.load(image)

    def load(self, image) -> None:
        """Take an image (Pillow image or RGB array) as the new original."""
        if isinstance(image, Image.Image):
            pixels = np.asarray(image.convert("RGB"), dtype=np.uint8)
        else:
            pixels = np.asarray(image)
            if pixels.ndim != 3 or pixels.shape[2] != 3 or pixels.dtype != np.uint8:
                raise ValueError("expected a uint8 array of shape (height, width, 3)")
        self.original = np.array(pixels, copy=True)
        self.pixels = np.array(pixels, copy=True)
        self.commit()

    def save(self, path) -> None:
        """Write the displayed image to ``path``; the format follows the suffix."""
        image = self.image
        if image is None:
            raise ValueError("there is no image to save")
        image.save(Path(path))

    def set_blur(self, value: int) -> None:
        self.blur = _check("blur", value, BLUR_RANGE)
        self._render()

    def set_brightness(self, value: int) -> None:
        self.brightness = _check("brightness", value, BRIGHTNESS_RANGE)
        self._render()

    def set_contrast(self, value: int) -> None:
        self.contrast = _check("contrast", value, CONTRAST_RANGE)
        self._render()

    def set_filter(self, filter_type) -> None:
        self.filter_type = FilterType(filter_type)
        self._render()

    def commit(self) -> None:
        """Record the displayed image in the undo history."""
        self.history.push(self.pixels)

    def undo(self) -> None:
        """Show the previous snapshot; does nothing when there is none."""
        if self.history.can_undo():
            self.pixels = self.history.undo(self.pixels)

    def redo(self) -> None:
        """Show the snapshot undone last; does nothing when there is none."""
        if self.history.can_redo():
            self.pixels = self.history.redo(self.pixels)

    def _render(self) -> None:
        if self.original is None:
            return
        self.pixels = apply_filters(
            self.original, self.filter_type, self.blur, self.brightness, self.contrast
        )