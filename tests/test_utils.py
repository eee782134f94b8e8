import io

import pytest

from gdregress.utils import format_vector, mse, print_vector


def test_format_vector_six_decimals():
    assert format_vector([1.0, 2.5]) == "[1.000000, 2.500000]"


def test_format_vector_with_label_prefix():
    text = format_vector([1.0], "Final parameters: ")
    assert text.startswith("Final parameters: [")
    assert text == "Final parameters: " + format_vector([1.0])


def test_format_empty_vector():
    assert format_vector([], "v") == "v[]"


def test_print_vector_writes_line():
    out = io.StringIO()
    print_vector([3.0, -1.25], "p: ", file=out)
    assert out.getvalue() == format_vector([3.0, -1.25], "p: ") + "\n"


def test_print_vector_defaults_to_stdout(capsys):
    print_vector([0.5])
    assert capsys.readouterr().out == format_vector([0.5]) + "\n"


def test_mse_identical_is_zero():
    assert mse([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == 0.0


def test_mse_empty_is_zero():
    assert mse([], []) == 0.0


def test_mse_known_value():
    assert mse([1.0, 2.0], [3.0, 2.0]) == 2.0


def test_mse_symmetric_and_non_negative():
    a = [0.1, -2.0, 7.5]
    b = [1.0, 3.0, -4.0]
    assert mse(a, b) == mse(b, a)
    assert mse(a, b) > 0


def test_mse_length_mismatch():
    with pytest.raises(ValueError):
        mse([1.0], [1.0, 2.0])