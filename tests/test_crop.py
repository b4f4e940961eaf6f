import pytest

from grayworks.bmpheaders import create_bmp_file, read_bitmap_header
from grayworks.bmpimage import read_bmp_image, write_bmp_image
from grayworks.crop import crop_image, main


def _sample(height, width):
    return [[row * 10 + col for col in range(width)] for row in range(height)]


def test_crop_from_origin():
    image = _sample(4, 5)
    assert crop_image(image, 2, 3) == [[0, 1, 2], [10, 11, 12]]


def test_crop_with_offset():
    image = _sample(5, 5)
    assert crop_image(image, 2, 2, 1, 3) == [[13, 14], [23, 24]]


def test_crop_whole_image_is_copy():
    image = _sample(3, 4)
    result = crop_image(image, 3, 4)
    assert result == image
    result[0][0] = 99
    assert image[0][0] == 0


@pytest.mark.parametrize(
    "length, width, il, ie",
    [(4, 2, 0, 0), (2, 5, 0, 0), (2, 2, 2, 0), (2, 2, 0, 3), (1, 1, -1, 0), (1, 1, 0, -1)],
)
def test_crop_out_of_range(length, width, il, ie):
    with pytest.raises(ValueError):
        crop_image(_sample(3, 4), length, width, il, ie)


def test_main_crops_bmp(tmp_path):
    source = tmp_path / "in.bmp"
    target = tmp_path / "out.bmp"
    create_bmp_file(source, 6, 7)
    image = _sample(6, 7)
    write_bmp_image(source, image)
    assert main([str(source), str(target), "3", "4", "1", "2"]) == 0
    header = read_bitmap_header(target)
    assert (header.height, header.width) == (3, 4)
    assert read_bmp_image(target) == crop_image(image, 3, 4, 1, 2)


def test_main_default_start(tmp_path):
    source = tmp_path / "in.bmp"
    target = tmp_path / "out.bmp"
    create_bmp_file(source, 4, 4)
    image = _sample(4, 4)
    write_bmp_image(source, image)
    assert main([str(source), str(target), "2", "2"]) == 0
    assert read_bmp_image(target) == [[0, 1], [10, 11]]


@pytest.mark.parametrize("count", [0, 3, 5])
def test_main_usage(count, capsys):
    assert main(["x"] * count) == 0
    assert "usage: roundoff" in capsys.readouterr().out


def test_main_missing_input(tmp_path, capsys):
    missing = tmp_path / "none.bmp"
    assert main([str(missing), str(tmp_path / "out.bmp"), "1", "1"]) == 0
    assert "does not exist" in capsys.readouterr().out


def test_main_crop_too_large(tmp_path, capsys):
    source = tmp_path / "in.bmp"
    create_bmp_file(source, 2, 2)
    assert main([str(source), str(tmp_path / "out.bmp"), "5", "5"]) == 1
    assert "ERROR" in capsys.readouterr().out