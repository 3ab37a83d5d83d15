import pytest

from algokit.search import PRIME, brute_search, horner_hash, rabin_karp

TEXT = (
    "from the dusty mesa, her looming shadow grows, hidden in the branches of a poison "
    "creosto, mountain comes will come to take away your bones."
)


@pytest.mark.parametrize("search", [rabin_karp, brute_search])
def test_source_cases(search):
    found = search(TEXT, "looming")
    assert found == TEXT.find("looming")
    assert TEXT[found : found + len("looming")] == "looming"
    assert search(TEXT, "cones") == -1


@pytest.mark.parametrize("search", [rabin_karp, brute_search])
@pytest.mark.parametrize("pattern", ["from", "bones.", "mesa, her", "come", "zzz", "the"])
def test_agrees_with_find(search, pattern):
    assert search(TEXT, pattern) == TEXT.find(pattern)


@pytest.mark.parametrize("search", [rabin_karp, brute_search])
def test_pattern_longer_than_text(search):
    assert search("ab", "abc") == -1


@pytest.mark.parametrize("search", [rabin_karp, brute_search])
def test_match_at_end(search):
    assert search("xxxab", "ab") == len("xxx")


@pytest.mark.parametrize("search", [rabin_karp, brute_search])
def test_empty_pattern(search):
    assert search("abc", "") == "abc".find("")


@pytest.mark.parametrize("pattern", ["looming", "cones", "a", TEXT])
def test_horner_hash_range(pattern):
    assert 0 <= horner_hash(pattern) < PRIME


def test_horner_hash_of_zero_digits():
    assert horner_hash("a" * 5) == horner_hash("")


def test_rabin_karp_finds_every_window():
    for start in range(0, len(TEXT) - 5, 7):
        window = TEXT[start : start + 5]
        assert rabin_karp(TEXT, window) == TEXT.find(window)