from chromapick.hex.validator import is_single_hex_digit, is_hex_no_alpha, is_hex_with_alpha
import string
import pytest

def test_single_hex_digit():
    for char in string.hexdigits:
        assert is_single_hex_digit(char)
    for text in ("", "g", "G", "#", " ", "aa", "١", "\n"):
        assert not is_single_hex_digit(text)

@pytest.mark.parametrize("text, no_alpha, with_alpha", [
    ("abcdef", True, True),
    ("ABCDEF", True, True),
    ("1a2B3c", True, True),
    ("1a2b3c4d", False, True),
    ("1a2b3c4", False, False),
    ("1a2b3", False, False),
    ("1a2b3c4d5", False, False),
    ("#1a2b3c", False, False),
    ("1a2b3g", False, False),
    ("1a2b3c\n", False, False),
    ("", False, False),
])
def test_whole_string_grammars(text, no_alpha, with_alpha):
    assert is_hex_no_alpha(text) is no_alpha
    assert is_hex_with_alpha(text) is with_alpha

def test_non_string_never_matches():
    assert not is_single_hex_digit(None)
    assert not is_hex_no_alpha(123456)
    assert not is_hex_with_alpha(b"abcdef")
