import numpy as np
import pytest

from imagex.filters import (
    FilterType,
    adjust,
    apply_filters,
    cool,
    gaussian_blur,
    invert,
    to_grayscale,
    to_sepia,
    warm,
)


@pytest.fixture
def pixels():
    rng = np.random.default_rng(7)
    return rng.integers(0, 256, size=(12, 9, 3), dtype=np.uint8)


def test_invert_is_its_own_inverse(pixels):
    assert np.array_equal(invert(invert(pixels)), pixels)


def test_invert_black_becomes_white():
    black = np.zeros((2, 2, 3), dtype=np.uint8)
    white = np.full((2, 2, 3), 255, dtype=np.uint8)
    assert np.array_equal(invert(black), white)


def test_grayscale_channels_are_equal(pixels):
    gray = to_grayscale(pixels)
    assert gray.shape == pixels.shape
    assert np.array_equal(gray[..., 0], gray[..., 1])
    assert np.array_equal(gray[..., 1], gray[..., 2])


def test_grayscale_leaves_gray_pixels_alone():
    gray = np.full((3, 3, 3), 77, dtype=np.uint8)
    assert np.array_equal(to_grayscale(gray), gray)


def test_sepia_keeps_black_black():
    black = np.zeros((2, 3, 3), dtype=np.uint8)
    assert np.array_equal(to_sepia(black), black)


def test_sepia_orders_channels_for_gray_input():
    gray = np.full((2, 2, 3), 100, dtype=np.uint8)
    out = to_sepia(gray).astype(int)
    assert out.shape == gray.shape
    assert out[..., 0].min() >= out[..., 1].max()
    assert out[..., 1].min() >= out[..., 2].max()


def test_cool_raises_red_only():
    base = np.full((2, 2, 3), 100, dtype=np.uint8)
    out = cool(base).astype(int)
    assert np.all(out[..., 0] - 100 == 20)
    assert np.array_equal(out[..., 1:], base[..., 1:].astype(int))


def test_warm_raises_green_and_blue():
    base = np.full((2, 2, 3), 100, dtype=np.uint8)
    out = warm(base).astype(int)
    assert np.array_equal(out[..., 0], base[..., 0].astype(int))
    assert np.all(out[..., 1:] - 100 == 20)


def test_tints_saturate():
    white = np.full((1, 1, 3), 255, dtype=np.uint8)
    assert np.array_equal(cool(white), white)
    assert np.array_equal(warm(white), white)


def test_blur_zero_is_identity(pixels):
    assert np.array_equal(gaussian_blur(pixels, 0), pixels)


def test_blur_keeps_uniform_image():
    flat = np.full((8, 8, 3), 131, dtype=np.uint8)
    assert np.array_equal(gaussian_blur(flat, 5), flat)


def test_blur_spreads_an_impulse():
    img = np.zeros((11, 11, 3), dtype=np.uint8)
    img[5, 5] = 255
    out = gaussian_blur(img, 2)
    assert out[5, 5, 0] < 255
    assert out[5, 6, 0] > 0
    assert np.array_equal(out[..., 0], out[..., 0].T)


def test_blur_radius_larger_than_image():
    img = np.full((2, 1, 3), 50, dtype=np.uint8)
    assert np.array_equal(gaussian_blur(img, 10), img)


def test_blur_negative_radius_rejected(pixels):
    with pytest.raises(ValueError):
        gaussian_blur(pixels, -1)


def test_adjust_identity(pixels):
    assert np.array_equal(adjust(pixels, 1.0, 0), pixels)


def test_adjust_saturates(pixels):
    assert np.array_equal(adjust(pixels, 1.0, 300), np.full_like(pixels, 255))
    assert np.array_equal(adjust(pixels, 1.0, -300), np.zeros_like(pixels))


def test_adjust_rejects_bad_shape():
    with pytest.raises(ValueError):
        adjust(np.zeros((4, 4), dtype=np.uint8), 1.0, 0)


def test_adjust_rejects_bad_dtype():
    with pytest.raises(ValueError):
        adjust(np.zeros((4, 4, 3), dtype=np.float32), 1.0, 0)


def test_apply_filters_defaults_are_identity(pixels):
    assert np.array_equal(apply_filters(pixels), pixels)


def test_apply_filters_background_remove_keeps_colours(pixels):
    out = apply_filters(pixels, FilterType.BACKGROUND_REMOVE)
    assert np.array_equal(out, pixels)


def test_apply_filters_accepts_filter_value(pixels):
    assert np.array_equal(apply_filters(pixels, "invert"), invert(pixels))


def test_apply_filters_unknown_filter(pixels):
    with pytest.raises(ValueError):
        apply_filters(pixels, "posterize")


def test_apply_filters_zero_contrast_gives_brightness(pixels):
    out = apply_filters(pixels, FilterType.NORMAL, 0, 40, 0)
    assert np.array_equal(out, np.full_like(pixels, 40))


def test_apply_filters_blur_keeps_shape(pixels):
    out = apply_filters(pixels, FilterType.GRAYSCALE, blur=3)
    assert out.shape == pixels.shape
    assert np.array_equal(out[..., 0], out[..., 2])