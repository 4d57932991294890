import pytest

from rgbsplit.image import Image, ImageError, blank_image
from rgbsplit.processing import (
    Channel,
    blend,
    channel_matrix,
    gray_average,
    gray_level,
    isolate_channel,
    to_black_white,
    to_grayscale,
)


@pytest.fixture
def sample():
    return Image.from_rows(
        [
            [(10, 20, 30), (200, 100, 50)],
            [(0, 0, 0), (255, 128, 7)],
        ]
    )


@pytest.mark.parametrize("channel", list(Channel))
def test_isolate_channel_keeps_only_one_component(sample, channel):
    result = isolate_channel(sample, channel)
    assert result.size == sample.size
    for original, pixel in zip(sample.pixels(), result.pixels()):
        for index in range(3):
            expected = original[index] if index == channel else 0
            assert pixel[index] == expected


def test_isolate_red_pixel(sample):
    assert isolate_channel(sample, Channel.RED).pixel(1, 0) == (200, 0, 0)


def test_channel_matrix_green(sample):
    assert channel_matrix(sample, Channel.GREEN) == ((20, 100), (0, 128))


def test_channel_matrix_matches_isolated_channel(sample):
    isolated = isolate_channel(sample, Channel.BLUE)
    assert channel_matrix(sample, Channel.BLUE) == channel_matrix(isolated, Channel.BLUE)


def test_gray_level_of_black_and_equal_components():
    assert gray_level(0, 0, 0) == 0
    assert gray_level(100, 100, 100) in (99, 100)


def test_gray_level_never_exceeds_brightest_component():
    for pixel in [(10, 20, 30), (200, 100, 50), (255, 128, 7)]:
        assert min(pixel) <= gray_level(*pixel) <= max(pixel)


def test_gray_average():
    assert gray_average(30, 60, 90) == 60
    assert gray_average(3, 3, 3) == 3
    assert gray_average(1, 1, 0) == 0


def test_to_grayscale_channels_equal(sample):
    result = to_grayscale(sample)
    for original, pixel in zip(sample.pixels(), result.pixels()):
        assert pixel[0] == pixel[1] == pixel[2] == gray_level(*original)


def test_black_white_only_two_colours(sample):
    result = to_black_white(sample, 100)
    assert set(result.pixels()) <= {(0, 0, 0), (255, 255, 255)}
    for original, pixel in zip(sample.pixels(), result.pixels()):
        assert (pixel == (255, 255, 255)) == (gray_level(*original) >= 100)


def test_black_white_zero_threshold_is_all_white(sample):
    assert set(to_black_white(sample, 0).pixels()) == {(255, 255, 255)}


def test_black_white_threshold_is_clamped(sample):
    assert to_black_white(sample, -50) == to_black_white(sample, 0)
    assert to_black_white(sample, 1000) == to_black_white(sample, 255)


def test_black_pixel_below_threshold_one():
    image = blank_image(2, 1)
    assert set(to_black_white(image, 1).pixels()) == {(0, 0, 0)}


def test_blend_of_black_images_is_black():
    image = blank_image(3, 2)
    assert blend(image, image, 128) == image


def test_blend_alpha_is_clamped(sample):
    other = Image.from_rows([[(5, 5, 5), (9, 9, 9)], [(1, 2, 3), (4, 5, 6)]])
    assert blend(sample, other, 300) == blend(sample, other, 255)
    assert blend(sample, other, -3) == blend(sample, other, 0)


def test_blend_stays_between_inputs(sample):
    other = Image.from_rows([[(5, 5, 5), (9, 9, 9)], [(1, 2, 3), (4, 5, 6)]])
    result = blend(sample, other, 77)
    assert result.size == sample.size
    for a, b, mixed in zip(sample.pixels(), other.pixels(), result.pixels()):
        for x, y, m in zip(a, b, mixed):
            assert m <= max(x, y)


def test_blend_size_mismatch_raises(sample):
    with pytest.raises(ImageError):
        blend(sample, blank_image(3, 3), 100)