import pytest

from crop_replace.utils.filenames import file_extension, file_stem
from crop_replace.utils.text_search import string_indexes


def test_string_indexes_finds_non_overlapping_matches():
    cases = [
        ("abc", "n", []),
        ("abc", "a", [0]),
        ("abac", "a", [0, 2]),
        ("aaabc", "aa", [0]),
        ("aabgaa", "aa", [0, 4]),
        ("rabcabcd", "abc", [1, 4]),
        ("rrabcaabcd", "abc", [2, 6]),
        ("rrabaabcd", "abc", [5]),
        ("\tabc_deabc_dekiabc_def", "abc_de", [1, 7, 15]),
    ]
    for s, substr, expected in cases:
        assert string_indexes(s, substr) == expected, (s, substr)


def test_string_indexes_with_empty_substring_returns_nothing():
    assert string_indexes("abc", "") == []
    assert string_indexes("", "a") == []


def test_file_extension_uses_last_path_element():
    assert file_extension("https://example.com/uploads/2019/01/photo.png") == ".png"
    assert file_extension("https://example.com/uploads/archive.tar.gz") == ".gz"
    assert file_extension("https://example.com/uploads/v1.2/README") == ""
    assert file_extension("no-extension") == ""


def test_file_stem_strips_extension():
    assert file_stem("/2019/01/photo.png", ".png") == "/2019/01/photo"
    assert file_stem("rrrr-aa.png", ".png") == "rrrr-aa"


def test_file_stem_rejects_mismatched_extension():
    with pytest.raises(ValueError):
        file_stem("photo.png", ".jpg")
    with pytest.raises(ValueError):
        file_stem("photo", "")
