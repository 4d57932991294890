import pytest

from rgbsplit.image import Image, ImageError
from rgbsplit.pnm import (
    PnmHeader,
    decode_pnm,
    encode_pgm,
    encode_pnm,
    parse_pnm_header,
    read_pnm,
    read_pnm_header,
    write_pnm,
)


@pytest.fixture
def sample():
    return Image.from_rows(
        [
            [(255, 0, 0), (0, 255, 0), (0, 0, 255)],
            [(10, 20, 30), (40, 50, 60), (70, 80, 90)],
        ]
    )


def test_encode_pnm_header_and_body(sample):
    data = encode_pnm(sample)
    assert data.startswith(b"P6\n3 2\n255\n")
    assert data[len(b"P6\n3 2\n255\n"):] == bytes(
        [255, 0, 0, 0, 255, 0, 0, 0, 255, 10, 20, 30, 40, 50, 60, 70, 80, 90]
    )


def test_round_trip_bytes(sample):
    assert decode_pnm(encode_pnm(sample)) == sample


def test_round_trip_file(tmp_path, sample):
    path = tmp_path / "out.pnm"
    write_pnm(path, sample)
    assert read_pnm(path) == sample


def test_parse_header_skips_comments():
    data = b"P6\n# a comment\n# another\n4 3\n255\n" + bytes(36)
    header = parse_pnm_header(data)
    assert header.magic == "P6"
    assert (header.width, header.height, header.maxval) == (4, 3, 255)
    assert data[header.data_offset:] == bytes(36)


def test_read_header_from_file(tmp_path, sample):
    path = tmp_path / "img.pnm"
    write_pnm(path, sample)
    header = read_pnm_header(path)
    assert header == PnmHeader("P6", 3, 2, 255, len(b"P6\n3 2\n255\n"))


def test_decode_plain_p3():
    data = b"P3\n# comment\n2 1\n255\n1 2 3\n4 5 6\n"
    image = decode_pnm(data)
    assert image.size == (2, 1)
    assert image.pixel(0, 0) == (1, 2, 3)
    assert image.pixel(1, 0) == (4, 5, 6)


def test_decode_p3_equals_p6(sample):
    values = " ".join(str(c) for p in sample.pixels() for c in p)
    text = f"P3\n3 2\n255\n{values}\n".encode("ascii")
    assert decode_pnm(text) == decode_pnm(encode_pnm(sample))


def test_bad_magic_rejected():
    with pytest.raises(ImageError):
        parse_pnm_header(b"XX\n1 1\n255\n\x00\x00\x00")


def test_greymap_not_decoded_as_colour():
    with pytest.raises(ImageError):
        decode_pnm(encode_pgm([[1, 2], [3, 4]]))


def test_truncated_p6_rejected(sample):
    with pytest.raises(ImageError):
        decode_pnm(encode_pnm(sample)[:-1])


def test_truncated_p3_rejected():
    with pytest.raises(ImageError):
        decode_pnm(b"P3\n1 1\n255\n1 2\n")


def test_sample_above_maxval_rejected():
    with pytest.raises(ImageError):
        decode_pnm(b"P3\n1 1\n15\n1 2 16\n")


def test_oversized_image_rejected():
    with pytest.raises(ImageError):
        decode_pnm(b"P6\n600 1\n255\n" + bytes(1800))


def test_encode_pgm_layout():
    data = encode_pgm([[0, 128], [255, 7]])
    assert data == b"P5\n2 2\n255\n" + bytes([0, 128, 255, 7])


def test_encode_pgm_header_parses():
    data = encode_pgm([[1, 2, 3]])
    header = parse_pnm_header(data)
    assert (header.magic, header.width, header.height, header.maxval) == ("P5", 3, 1, 255)
    assert data[header.data_offset:] == bytes([1, 2, 3])


def test_encode_pgm_rejects_ragged_rows():
    with pytest.raises(ImageError):
        encode_pgm([[1, 2], [3]])


def test_encode_pgm_rejects_out_of_range():
    with pytest.raises(ImageError):
        encode_pgm([[256]])