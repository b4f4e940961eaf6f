import pytest

from grayworks.bmpheaders import (
    BitmapHeader,
    BmpError,
    BmpFileHeader,
    calculate_pad,
    create_bmp_file,
    is_a_bmp,
    read_bitmap_header,
    read_color_table,
    read_file_header,
)


@pytest.mark.parametrize("width", range(1, 40))
def test_pad_makes_rows_multiple_of_four(width):
    pad = calculate_pad(width)
    assert 0 <= pad < 4
    assert (width + pad) % 4 == 0


def test_pad_zero_for_aligned_width():
    assert calculate_pad(8) == 0


def test_create_and_read_file_header(tmp_path):
    path = tmp_path / "img.bmp"
    file_header, bitmap_header = create_bmp_file(path, 5, 7)
    read_back = read_file_header(path)
    assert read_back == file_header
    assert read_back.filetype == 0x4D42
    assert read_back.filesize == path.stat().st_size
    assert read_back.bitmapoffset == 14 + bitmap_header.size + 256 * 4


def test_create_and_read_bitmap_header(tmp_path):
    path = tmp_path / "img.bmp"
    _, bitmap_header = create_bmp_file(path, 5, 7)
    read_back = read_bitmap_header(path)
    assert read_back == bitmap_header
    assert read_back.width == 7
    assert read_back.height == 5
    assert read_back.size == 40
    assert read_back.bitsperpixel == 8
    assert read_back.colorsused == 256
    assert read_back.sizeofbitmap == 5 * (7 + calculate_pad(7))


def test_created_color_table_is_blank(tmp_path):
    path = tmp_path / "img.bmp"
    create_bmp_file(path, 2, 4)
    table = read_color_table(path, 256)
    assert len(table) == 256
    assert set(table) == {(0, 0, 0)}


def test_read_color_table_order(tmp_path):
    path = tmp_path / "img.bmp"
    create_bmp_file(path, 1, 4)
    data = bytearray(path.read_bytes())
    data[54:62] = bytes([1, 2, 3, 0, 4, 5, 6, 0])
    path.write_bytes(bytes(data))
    assert read_color_table(path, 2) == [(1, 2, 3), (4, 5, 6)]


def test_short_file_raises(tmp_path):
    path = tmp_path / "short.bmp"
    path.write_bytes(b"BM\x00")
    with pytest.raises(BmpError):
        read_file_header(path)
    with pytest.raises(BmpError):
        read_bitmap_header(path)


def test_is_a_bmp_accepts_created_file(tmp_path):
    path = tmp_path / "img.bmp"
    create_bmp_file(path, 3, 3)
    assert is_a_bmp(path) is True


def test_is_a_bmp_requires_extension(tmp_path):
    path = tmp_path / "img.dat"
    create_bmp_file(path, 3, 3)
    assert is_a_bmp(path) is False


def test_is_a_bmp_requires_magic(tmp_path):
    path = tmp_path / "fake.bmp"
    path.write_bytes(b"XX" + bytes(60))
    assert is_a_bmp(path) is False


def test_is_a_bmp_missing_file(tmp_path):
    assert is_a_bmp(tmp_path / "missing.bmp") is False


def test_file_header_describe():
    text = BmpFileHeader(filesize=1100, bitmapoffset=1078).describe()
    assert text.splitlines() == [
        "file type 4d42",
        "file size 1100",
        "bit map offset 1078",
    ]


def test_bitmap_header_describe():
    text = BitmapHeader(width=7, height=5).describe()
    lines = text.splitlines()
    assert lines[0] == "width 7"
    assert lines[1] == "height 5"
    assert "bitsperpixel 8" in lines
    assert "colorsused 256" in lines