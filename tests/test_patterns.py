import pytest

from algodrills.patterns import main, render


def rows(number, size=None):
    return render(number, size).splitlines()


def test_every_row_ends_with_newline():
    text = render(2, 4)
    assert text.endswith("\n")
    assert text.count("\n") == 4


def test_square_default_size():
    lines = rows(1)
    assert len(lines) == 5
    assert all(line == "*" * 5 for line in lines)


def test_triangle_rows_grow():
    assert [len(line) for line in rows(2, 6)] == list(range(1, 7))
    assert [len(line) for line in rows(5, 6)] == list(range(6, 0, -1))


def test_counting_triangle_is_prefix_chain():
    lines = rows(3, 5)
    assert all(lines[k + 1].startswith(lines[k]) for k in range(len(lines) - 1))
    assert rows(6, 5) == lines[::-1]


def test_row_number_triangle_uses_row_digit():
    for index, line in enumerate(rows(4), start=1):
        assert set(line) == {str(index)}
        assert len(line) == index


def test_diamond_halves_mirror():
    lines = rows(9, 4)
    top, bottom = lines[:4], lines[4:]
    assert [line.count("*") for line in top] == [line.count("*") for line in bottom][::-1]


def test_arrow_is_symmetric():
    counts = [len(line) for line in rows(10, 5)]
    assert counts == counts[::-1]
    assert max(counts) == 5


def test_binary_triangle_pinned():
    assert render(11, 3) == "1\n01\n101\n"


def test_number_crown_rows_are_palindromes_of_equal_width():
    lines = rows(12)
    assert all(line == line[::-1] for line in lines)
    assert len({len(line) for line in lines}) == 1


def test_floyd_triangle_counts_consecutively():
    numbers = [int(tok) for line in rows(13, 5) for tok in line.split()]
    assert numbers == list(range(1, len(numbers) + 1))


def test_letter_triangles():
    up = rows(14, 5)
    assert rows(15, 5) == up[::-1]
    assert up[-1] == "ABCDE"


def test_row_letter_triangle():
    for index, line in enumerate(rows(16, 3)):
        assert set(line) == {chr(ord("A") + index)}


def test_letter_pyramid_pinned():
    assert render(17, 3) == "  A\n ABA\nABCBA\n"


def test_trailing_letters_end_with_last_letter():
    lines = rows(18)
    assert all(line.split()[-1] == "E" for line in lines)
    assert lines[-1].split()[0] == "A"


@pytest.mark.parametrize("number", [19, 20])
def test_star_shapes_are_mirror_symmetric(number):
    lines = rows(number)
    assert all(line == line[::-1] for line in lines)
    assert len({len(line) for line in lines}) == 1


def test_hollow_square():
    lines = rows(21, 4)
    assert lines[0] == lines[-1] == "*" * 4
    assert all(line[0] == line[-1] == "*" and line[1:-1].strip() == "" for line in lines[1:-1])


def test_concentric_squares_pinned():
    assert render(22, 2) == "222\n212\n222\n"


def test_concentric_squares_symmetric_matrix():
    lines = rows(22)
    assert lines == lines[::-1]
    assert all(line == line[::-1] for line in lines)
    assert [line[k] for k, line in enumerate(lines)] == list(lines[0][0] + "".join(line[k] for k, line in enumerate(lines))[1:])
    assert lines[3][3] == "1"


def test_unknown_pattern_raises():
    with pytest.raises(ValueError):
        render(7)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        render(1, -1)


def test_zero_size_is_empty():
    assert render(21, 0) == ""


def test_main_prints_rendered_pattern(capsys):
    assert main(["21", "--size", "3"]) == 0
    assert capsys.readouterr().out == render(21, 3)


def test_main_rejects_unknown_pattern():
    with pytest.raises(SystemExit):
        main(["7"])