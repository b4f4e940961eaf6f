import pytest

from grayworks.bmpheaders import create_bmp_file
from grayworks.bmpimage import read_image_array, write_image_array
from grayworks.emboss import MASK_COUNT, emboss_convolution, emboss_mask, main


def _uniform(value, rows=5, cols=6):
    return [[value] * cols for _ in range(rows)]


def _gradient(rows=6, cols=7):
    return [[(i * 37 + j * 23) % 256 for j in range(cols)] for i in range(rows)]


def test_mask_zero_matches_source():
    assert emboss_mask(0) == ((-1, 0, 1), (-1, 1, 1), (-1, 0, 1))


def test_mask_thirteen_matches_source():
    assert emboss_mask(13) == ((-1, -1, 1), (-1, 1, 1), (1, 1, 1))


@pytest.mark.parametrize("kind", [-1, 14, 100])
def test_unknown_mask_is_rejected(kind):
    with pytest.raises(ValueError):
        emboss_mask(kind)


def test_convolution_rejects_unknown_kind():
    with pytest.raises(ValueError):
        emboss_convolution(_uniform(10), 14)


@pytest.mark.parametrize("kind", range(MASK_COUNT))
def test_uniform_image_is_unchanged(kind):
    image = _uniform(50)
    assert emboss_convolution(image, kind) == image


@pytest.mark.parametrize("kind", range(MASK_COUNT))
def test_border_is_copied(kind):
    image = _gradient()
    result = emboss_convolution(image, kind)
    assert result[0] == image[0]
    assert result[-1] == image[-1]
    assert [row[0] for row in result] == [row[0] for row in image]
    assert [row[-1] for row in result] == [row[-1] for row in image]


@pytest.mark.parametrize("kind", range(MASK_COUNT))
def test_results_stay_in_range(kind):
    result = emboss_convolution(_gradient(), kind)
    assert all(0 <= value <= 255 for row in result for value in row)


def test_four_bit_images_clip_at_sixteen():
    result = emboss_convolution(_uniform(20), 0, bits_per_pixel=4)
    assert result[2][2] == 16
    assert result[0][0] == 20


def test_input_is_not_modified():
    image = _gradient()
    snapshot = [list(row) for row in image]
    emboss_convolution(image, 5)
    assert image == snapshot


def test_main_writes_embossed_file(tmp_path):
    source = tmp_path / "in.bmp"
    target = tmp_path / "out.bmp"
    image = _gradient()
    create_bmp_file(source, len(image), len(image[0]))
    write_image_array(source, image)
    assert main([str(source), str(target), "3"]) == 0
    assert read_image_array(target) == emboss_convolution(image, 3)


def test_main_rejects_bad_type(tmp_path):
    source = tmp_path / "in.bmp"
    create_bmp_file(source, 4, 4)
    assert main([str(source), str(tmp_path / "out.bmp"), "20"]) == 1
    assert not (tmp_path / "out.bmp").exists()


def test_main_with_missing_input(tmp_path):
    target = tmp_path / "out.bmp"
    assert main([str(tmp_path / "missing.bmp"), str(target), "0"]) == 0
    assert not target.exists()


def test_main_usage(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out