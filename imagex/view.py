"""Fitting an image into a display area while keeping its aspect ratio."""

from __future__ import annotations

from PIL import Image

__all__ = ["fit_size", "scale_to_fit"]


def fit_size(image_size, bounds) -> tuple[int, int]:
    """Largest (width, height) with the image's aspect ratio inside ``bounds``."""
    width, height = image_size
    max_width, max_height = bounds
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {image_size}")
    if max_width <= 0 or max_height <= 0:
        raise ValueError(f"bounds must be positive, got {bounds}")
    scaled_width = max_height * width // height
    if scaled_width <= max_width:
        return scaled_width, max_height
    return max_width, max_width * height // width


def scale_to_fit(image: Image.Image, bounds) -> Image.Image:
    """Scale ``image`` smoothly to the largest size that fits ``bounds``."""
    size = fit_size(image.size, bounds)
    if 0 in size:
        raise ValueError(f"image {image.size} cannot be shown in {bounds}")
    return image.resize(size, Image.Resampling.BILINEAR)