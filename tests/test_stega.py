import pytest

from grayworks.bmpheaders import create_bmp_file
from grayworks.bmpimage import read_image_array, write_image_array
from grayworks.stega import hide_image, is_odd, main, uncover_image


def test_is_odd():
    assert is_odd(3) is True
    assert is_odd(-3) is True
    assert is_odd(4) is False
    assert is_odd(0) is False


def test_hide_places_bits_most_significant_first():
    cover = [[0] * 8]
    message = [[0b10000001]]
    assert hide_image(cover, message, 8) == [[1, 0, 0, 0, 0, 0, 0, 1]]


def test_hide_keeps_upper_bits_of_cover():
    cover = [[200, 201, 50, 51, 7, 8, 255, 254]]
    message = [[0b01010101]]
    hidden = hide_image(cover, message, 8)
    assert [value >> 1 for value in hidden[0]] == [v >> 1 for v in cover[0]]
    assert [value & 1 for value in hidden[0]] == [0, 1, 0, 1, 0, 1, 0, 1]


def test_hide_does_not_change_input():
    cover = [[5] * 8]
    hide_image(cover, [[0]], 8)
    assert cover == [[5] * 8]


def test_round_trip_eight_bits():
    message = [[0, 17, 255], [128, 64, 99]]
    cover = [[(r * 31 + c * 7) % 256 for c in range(24)] for r in range(2)]
    hidden = hide_image(cover, message, 8)
    assert uncover_image(hidden, 8) == message


def test_uncover_bit_order_depends_on_lsb_flag():
    cover = [[1, 0, 0, 0, 0, 0, 0, 0]]
    assert uncover_image(cover, 8, lsb=True) == [[128]]
    assert uncover_image(cover, 8, lsb=False) == [[1]]


def test_uncover_shape():
    cover = [[0] * 12 for _ in range(3)]
    message = uncover_image(cover, 4)
    assert len(message) == 3
    assert all(len(row) == 3 for row in message)


def test_hide_rejects_wrong_width():
    with pytest.raises(ValueError):
        hide_image([[0] * 7], [[1]], 8)


def test_hide_rejects_wrong_length():
    with pytest.raises(ValueError):
        hide_image([[0] * 8, [0] * 8], [[1]], 8)


@pytest.mark.parametrize("n", [0, 9])
def test_bad_bit_count(n):
    with pytest.raises(ValueError):
        uncover_image([[0] * 8], n)


def test_main_hides_and_uncovers(tmp_path):
    cover_name = str(tmp_path / "cover.bmp")
    message_name = str(tmp_path / "message.bmp")
    found_name = str(tmp_path / "found.bmp")
    message = [[10, 250], [77, 3]]
    cover = [[(r + c) * 9 % 256 for c in range(16)] for r in range(2)]
    create_bmp_file(cover_name, 2, 16)
    write_image_array(cover_name, cover)
    create_bmp_file(message_name, 2, 2)
    write_image_array(message_name, message)

    assert main(["-h", cover_name, message_name, "8"]) == 0
    assert main(["-u", cover_name, found_name, "8"]) == 0
    assert read_image_array(found_name) == message


def test_main_rejects_narrow_cover(tmp_path):
    cover_name = str(tmp_path / "cover.bmp")
    message_name = str(tmp_path / "message.bmp")
    create_bmp_file(cover_name, 2, 8)
    create_bmp_file(message_name, 2, 2)
    assert main(["-h", cover_name, message_name, "8"]) == 3


def test_main_rejects_unequal_lengths(tmp_path):
    cover_name = str(tmp_path / "cover.bmp")
    message_name = str(tmp_path / "message.bmp")
    create_bmp_file(cover_name, 3, 16)
    create_bmp_file(message_name, 2, 2)
    assert main(["-h", cover_name, message_name, "8"]) == 2


def test_main_unknown_mode(tmp_path):
    assert main(["-x", "a.bmp", "b.bmp", "8"]) == 1


def test_main_usage(capsys):
    assert main([]) == 0
    assert "stega -h" in capsys.readouterr().out