"""Colour filters and tonal adjustments on RGB pixel arrays."""

from __future__ import annotations

import math
from enum import Enum

import numpy as np

__all__ = [
    "FilterType",
    "to_grayscale",
    "to_sepia",
    "invert",
    "cool",
    "warm",
    "gaussian_blur",
    "adjust",
    "apply_filters",
]


class FilterType(Enum):
    """The colour filter applied before blur and tonal adjustment."""

    NORMAL = "normal"
    GRAYSCALE = "grayscale"
    SEPIA = "sepia"
    INVERT = "invert"
    COOL = "cool"
    WARM = "warm"
    BACKGROUND_REMOVE = "background_remove"


# Rows give output (B, G, R) from input (B, G, R).
_SEPIA_BGR = np.array(
    [
        [0.272, 0.534, 0.131],
        [0.349, 0.686, 0.168],
        [0.393, 0.769, 0.189],
    ]
)

_LUMA_RGB = np.array([0.299, 0.587, 0.114])
_TINT = 20


def _as_pixels(pixels) -> np.ndarray:
    arr = np.asarray(pixels)
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError(f"expected an array of shape (height, width, 3), got {arr.shape}")
    if arr.dtype != np.uint8:
        raise ValueError(f"expected uint8 pixels, got {arr.dtype}")
    return arr


def _saturate(values: np.ndarray) -> np.ndarray:
    return np.ascontiguousarray(np.clip(np.rint(values), 0, 255).astype(np.uint8))


def to_grayscale(pixels) -> np.ndarray:
    """Replace every pixel by its luma, kept as three equal channels."""
    arr = _as_pixels(pixels)
    luma = _saturate(arr.astype(np.float64) @ _LUMA_RGB)
    return np.ascontiguousarray(np.repeat(luma[..., np.newaxis], 3, axis=2))


def to_sepia(pixels) -> np.ndarray:
    """Apply the sepia colour matrix, which works on channels in BGR order."""
    arr = _as_pixels(pixels)
    bgr = arr[..., ::-1].astype(np.float64)
    return np.ascontiguousarray(_saturate(bgr @ _SEPIA_BGR.T)[..., ::-1])


def invert(pixels) -> np.ndarray:
    """Return the photographic negative."""
    return np.ascontiguousarray(255 - _as_pixels(pixels))


def _tint(pixels, offset) -> np.ndarray:
    arr = _as_pixels(pixels)
    return _saturate(arr.astype(np.float64) + np.asarray(offset, dtype=np.float64))


def cool(pixels) -> np.ndarray:
    """Raise the red channel by a fixed amount, saturating at 255."""
    return _tint(pixels, (_TINT, 0, 0))


def warm(pixels) -> np.ndarray:
    """Raise the green and blue channels by a fixed amount, saturating at 255."""
    return _tint(pixels, (0, _TINT, _TINT))


def _gaussian_kernel(radius: int) -> np.ndarray:
    size = 2 * radius + 1
    sigma = 0.3 * ((size - 1) * 0.5 - 1) + 0.8
    offsets = np.arange(size) - radius
    kernel = np.exp(-(offsets**2) / (2 * sigma**2))
    return kernel / kernel.sum()


def _convolve_axis(data: np.ndarray, kernel: np.ndarray, axis: int) -> np.ndarray:
    radius = len(kernel) // 2
    padding = [(0, 0)] * data.ndim
    padding[axis] = (radius, radius)
    length = data.shape[axis]
    mode = "reflect" if length > 1 else "edge"
    padded = np.pad(data, padding, mode=mode)
    result = np.zeros_like(data)
    for offset, weight in enumerate(kernel):
        result += weight * np.take(padded, np.arange(offset, offset + length), axis=axis)
    return result


def gaussian_blur(pixels, radius: int) -> np.ndarray:
    """Blur with a Gaussian kernel of size 2 * radius + 1, reflecting at the borders."""
    arr = _as_pixels(pixels)
    if radius < 0:
        raise ValueError(f"blur radius must not be negative, got {radius}")
    if radius == 0 or arr.size == 0:
        return arr.copy()
    kernel = _gaussian_kernel(radius)
    data = arr.astype(np.float64)
    data = _convolve_axis(data, kernel, axis=0)
    data = _convolve_axis(data, kernel, axis=1)
    return _saturate(data)


def adjust(pixels, alpha: float, beta: float) -> np.ndarray:
    """Compute alpha * pixel + beta, rounded and saturated to 0..255."""
    arr = _as_pixels(pixels)
    if not math.isfinite(alpha) or not math.isfinite(beta):
        raise ValueError("alpha and beta must be finite")
    return _saturate(arr.astype(np.float64) * alpha + beta)


_COLOUR_FILTERS = {
    FilterType.GRAYSCALE: to_grayscale,
    FilterType.SEPIA: to_sepia,
    FilterType.INVERT: invert,
    FilterType.COOL: cool,
    FilterType.WARM: warm,
}


def apply_filters(
    pixels,
    filter_type=FilterType.NORMAL,
    blur: int = 0,
    brightness: int = 0,
    contrast: int = 100,
) -> np.ndarray:
    """Apply the colour filter, then the blur, then contrast and brightness.

    ``contrast`` is a percentage and ``brightness`` an offset added to every
    channel. Background removal leaves the colours as they are.
    """
    arr = _as_pixels(pixels)
    filter_type = FilterType(filter_type)
    colour_filter = _COLOUR_FILTERS.get(filter_type)
    result = colour_filter(arr) if colour_filter else arr.copy()
    if blur > 0:
        result = gaussian_blur(result, blur)
    return adjust(result, contrast / 100.0, brightness)