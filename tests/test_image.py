import pytest

from rgbsplit.image import Image, ImageError, blank_image


@pytest.fixture
def sample():
    return Image(
        2,
        2,
        (
            ((10, 20, 30), (40, 50, 60)),
            ((70, 80, 90), (100, 110, 120)),
        ),
    )


def test_pixel_lookup(sample):
    assert sample.pixel(0, 0) == (10, 20, 30)
    assert sample.pixel(1, 0) == (40, 50, 60)
    assert sample.pixel(0, 1) == (70, 80, 90)
    assert sample.pixel(1, 1) == (100, 110, 120)


@pytest.mark.parametrize("x, y", [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_pixel_out_of_range(sample, x, y):
    with pytest.raises(IndexError):
        sample.pixel(x, y)


def test_rows_are_tuples_after_lists_given():
    image = Image(1, 1, [[[1, 2, 3]]])
    assert image.rows == (((1, 2, 3),),)


def test_row_count_mismatch():
    with pytest.raises(ImageError):
        Image(1, 2, (((0, 0, 0),),))


def test_row_width_mismatch():
    with pytest.raises(ImageError):
        Image(2, 1, (((0, 0, 0),),))


@pytest.mark.parametrize("bad", [(256, 0, 0), (0, -1, 0), (0, 0), (1, 2, 3, 4)])
def test_invalid_pixel(bad):
    with pytest.raises(ImageError):
        Image(1, 1, ((bad,),))


def test_negative_dimensions():
    with pytest.raises(ImageError):
        Image(-1, 0, ())


def test_map_pixels_identity(sample):
    assert sample.map_pixels(lambda p: p) == sample


def test_map_pixels_applies_function(sample):
    swapped = sample.map_pixels(lambda p: (p[2], p[1], p[0]))
    assert swapped.size == sample.size
    for x in range(2):
        for y in range(2):
            r, g, b = sample.pixel(x, y)
            assert swapped.pixel(x, y) == (b, g, r)


def test_map_pixels_validates_result(sample):
    with pytest.raises(ImageError):
        sample.map_pixels(lambda p: (p[0] + 200, p[1], p[2]))


def test_blank_image():
    image = blank_image(3, 2)
    assert image.size == (3, 2)
    assert set(image.pixels()) == {(0, 0, 0)}
    assert len(list(image.pixels())) == 6


def test_blank_image_negative():
    with pytest.raises(ImageError):
        blank_image(2, -3)


def test_from_rows_infers_size(sample):
    rebuilt = Image.from_rows(sample.rows)
    assert rebuilt == sample


def test_pixels_order(sample):
    assert list(sample.pixels()) == [p for row in sample.rows for p in row]