import itertools

import pytest

from grid_kernels.src.kernels import levenshtein


WORDS = ["", "a", "kitten", "sitting", "flaw", "lawn", "intention", "execution", "héllo", "hello"]


def test_kitten_sitting():
    assert levenshtein("kitten", "sitting") == 3


@pytest.mark.parametrize("word", WORDS)
def test_identity_is_zero(word):
    assert levenshtein(word, word) == 0


@pytest.mark.parametrize("word", WORDS)
def test_empty_gives_length(word):
    assert levenshtein("", word) == len(word)
    assert levenshtein(word, "") == len(word)


def test_symmetry():
    for a, b in itertools.combinations(WORDS, 2):
        assert levenshtein(a, b) == levenshtein(b, a)


def test_triangle_inequality():
    for a, b, c in itertools.permutations(WORDS[:7], 3):
        assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)


def test_known_pairs():
    assert levenshtein("flaw", "lawn") == 2
    assert levenshtein("intention", "execution") == 5
    assert levenshtein("abc", "yabd") == 2


def test_compares_code_points_not_bytes():
    # "é" is two bytes in UTF-8 but one character
    assert levenshtein("héllo", "hello") == 1
    assert levenshtein("日本語", "日本") == 1
    assert levenshtein("🙂", "🙃") == 1
