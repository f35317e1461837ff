import pytest

from fractol.textutil import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    split,
    strcmp,
    strncmp,
    strnstr,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123456789", 123456789),
        ("123456", 123456),
        ("12Three45678", 12),
        ("Hello World!", 0),
        ("+42 BLAH!", 42),
        ("-42", -42),
        ("     +42", 42),
        ("\t\n\v\f\r 42", 42),
        ("5", 5),
    ],
)
def test_atoi_cases(text, expected):
    assert atoi(text) == expected


def test_atoi_sign_without_digits_is_zero():
    assert atoi("-") == 0
    assert atoi("") == 0


@pytest.mark.parametrize("n", [1234, -5678, 0, 2147483647, -2147483648])
def test_itoa_round_trips_through_atoi(n):
    assert atoi(itoa(n)) == n


def test_itoa_values():
    assert itoa(1234) == "1234"
    assert itoa(-5678) == "-5678"
    assert itoa(0) == "0"


def test_split_words():
    assert split("Hello world 42", " ") == ["Hello", "world", "42"]


def test_split_drops_empty_pieces():
    result = split("  a  b   c ", " ")
    assert result == ["a", "b", "c"]
    assert split("", " ") == []
    assert split("----", "-") == []


def test_split_join_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(",".join(words), ",") == words


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim_example():
    assert strtrim("----Hello, world!-----", "-+") == "Hello, world!"


def test_strtrim_everything_and_nothing():
    assert strtrim("+-+-", "-+") == ""
    assert strtrim("keep", "") == "keep"
    assert strtrim("-a-b-", "-") == "a-b"


def test_substr_example():
    assert substr("davmendo 42 piscine", 9, 15) == "42 piscine"


def test_substr_past_end_is_empty():
    assert substr("abc", 3, 5) == ""
    assert substr("abc", 10, 1) == ""


def test_substr_length_bound():
    text = "davmendo 42 piscine"
    for start in range(len(text)):
        for length in range(len(text) + 2):
            piece = substr(text, start, length)
            assert len(piece) <= length
            assert text.startswith(piece, start)


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strnstr_example():
    big = "Hello, World! Welcome to C programming."
    index = strnstr(big, "World", 20)
    assert index == big.index("World")


def test_strnstr_needle_must_fit_in_length():
    big = "Hello, World!"
    start = big.index("World")
    assert strnstr(big, "World", start + len("World")) == start
    assert strnstr(big, "World", start + len("World") - 1) is None


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "z", 3) is None
    assert strnstr("ab", "abc", 10) is None


def test_strcmp_equal_and_antisymmetric():
    assert strcmp("mandelbrot", "mandelbrot") == 0
    pairs = [("abc", "abd"), ("abc", "ab"), ("", "a"), ("julia", "mandelbrot")]
    for a, b in pairs:
        assert strcmp(a, b) == -strcmp(b, a)
        assert (strcmp(a, b) < 0) == (a < b)


def test_strncmp_limits_comparison():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_prefix_with_terminator():
    assert strncmp("mandelbrot", "mandelbrot", 11) == 0
    assert strncmp("mandelbrotx", "mandelbrot", 11) > 0
    assert strncmp("julia", "julia", 6) == 0
    assert strncmp("jul", "julia", 6) < 0


def test_strncmp_rejects_negative():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_character_classes():
    assert is_alpha("A") and is_alpha("g") and not is_alpha("!")
    assert is_alnum("A") and is_alnum("9") and not is_alnum("!")
    assert is_digit("5") and is_digit("0") and not is_digit("A")
    assert is_ascii("A") and is_ascii("5") and not is_ascii(200)
    assert is_print("A") and is_print(" ") and not is_print("\t")


def test_character_classes_consistent_over_ascii():
    for code in range(-5, 300):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))
        if is_print(code):
            assert is_ascii(code)


def test_character_rejects_multi_char_string():
    with pytest.raises(ValueError):
        is_alpha("ab")