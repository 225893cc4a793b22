import pytest

from dbccoder.formatter import (
    indented_string,
    make_c_name,
    print_type,
    prt_double,
    str_tolower,
    str_toupper,
    str_trim,
)


V = -124.10001110002220


@pytest.mark.parametrize(
    "precision, expected",
    [
        (0, "-124"),
        (1, "-124.1"),
        (2, "-124.1"),
        (3, "-124.1"),
        (4, "-124.1"),
        (5, "-124.10001"),
        (6, "-124.100011"),
        (7, "-124.1000111"),
        (8, "-124.1000111"),
        (9, "-124.1000111"),
    ],
)
def test_prt_double_without_dot(precision, expected):
    assert prt_double(V, precision, False) == expected


@pytest.mark.parametrize(
    "precision, usedot, expected",
    [
        (3, True, "123.0"),
        (2, True, "123.0"),
        (1, True, "123.0"),
        (0, True, "123.0"),
        (0, False, "123"),
        (1, False, "123"),
        (100, True, "123.0"),
        (1000, True, "123.0"),
    ],
)
def test_prt_double_integer_value(precision, usedot, expected):
    assert prt_double(123.0000, precision, usedot) == expected


def test_prt_double_small_value_zero_precision():
    assert prt_double(0.0110022, 0) == "0.0"


@pytest.mark.parametrize(
    "value, precision, expected",
    [
        (-20.47, 2, "-20.47"),
        (-20.47, 10, "-20.47"),
        (20.4699999999, 9, "20.469999999"),
        (20.4699999999, 8, "20.46999999"),
        (20.4699999999, 7, "20.4699999"),
        (20.4699999999, 3, "20.469"),
        (-20.4699999999, 8, "-20.46999999"),
        (-20.4699999999, 7, "-20.4699999"),
        (-20.4699999999, 3, "-20.469"),
        (-20.4699999999, 10, "-20.4699999999"),
        (-20.4699999999, 11, "-20.4699999999"),
        (-20.4699999999, 15, "-20.4699999999"),
        (123.012345678900000, 10, "123.0123456789"),
        (123.012345678900000, 11, "123.0123456789"),
        (123.012345678900000, 15, "123.0123456789"),
    ],
)
def test_prt_double_values(value, precision, expected):
    assert prt_double(value, precision) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("testdbc", "testdbc"),
        ("State one", "State_one"),
        ("1abc", "abc"),
        ("a-b.c", "abc"),
        ("Description for the value '0x7'", "Description_for_the_value_0x7"),
        ("", ""),
        ("123", ""),
    ],
)
def test_make_c_name(source, expected):
    assert make_c_name(source) == expected


def test_str_trim_removes_trailing_whitespace():
    assert str_trim("BO_ 1 X: 8 BCM \t\r") == "BO_ 1 X: 8 BCM"
    assert str_trim("  keep leading") == "  keep leading"


def test_str_trim_empty_gives_newline():
    assert str_trim("") == "\n"


def test_str_trim_all_blank():
    assert str_trim(" \t ") == ""


def test_case_conversion():
    assert str_toupper("testdb") == "TESTDB"
    assert str_tolower("TestDB") == "testdb"
    assert str_toupper("abc_123") == "ABC_123"


def test_case_conversion_is_ascii_only():
    assert str_toupper("ä") == "ä"
    assert str_tolower("Ä") == "Ä"


def test_print_type():
    assert print_type(0) == "int8_t"
    assert print_type(3) == "int64_t"
    assert print_type(4) == "uint8_t"
    assert print_type(7) == "uint64_t"
    assert print_type(8) == ""


def test_indented_string():
    assert indented_string(6, "ab") == "ab    "
    assert indented_string(4, "ab", "-") == "ab--"
    assert indented_string(1, "abc") == "abc"
    assert len(indented_string(40, "uint8_t ValTest;")) == 40