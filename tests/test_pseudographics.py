import pytest

from practicum.pseudographics import GLYPHS, print_number, render


@pytest.mark.parametrize("digit", range(10))
def test_single_digit_renders_its_glyph(digit):
    rows = render(digit).splitlines()
    assert rows == [cell + " " for cell in GLYPHS[str(digit)]]


def test_one_is_drawn_exactly():
    assert render(1) == "... \n..| \n..| \n"


def test_zero_is_drawn_exactly():
    assert render(0) == "._. \n|.| \n|_| \n"


def test_two_digits_side_by_side():
    assert render(12) == "... ._. \n..| ._| \n..| |_. \n"


def test_many_digits():
    rows = render(123456789).splitlines()
    assert len(rows) == 3
    assert all(len(row) == 9 * 4 for row in rows)
    assert rows[0].startswith("... ._. ")


def test_negative_number_is_rejected():
    with pytest.raises(ValueError):
        render(-10)


def test_print_number_writes_rendering(capsys):
    print_number(8)
    assert capsys.readouterr().out == render(8)


def test_print_negative_number_is_rejected():
    with pytest.raises(ValueError):
        print_number(-1)