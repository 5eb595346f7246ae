import pytest

from wordtally.common import basename, charcmp, intcmp


@pytest.mark.parametrize("a,b", [(1, 2), (-5, 3), (0, 100)])
def test_intcmp_orders_smaller_first(a, b):
    assert intcmp(a, b) < 0
    assert intcmp(b, a) > 0


def test_intcmp_equal_is_zero():
    assert intcmp(42, 42) == 0


def test_intcmp_is_antisymmetric():
    for a, b in [(3, 9), (-2, -7), (10, 0)]:
        assert intcmp(a, b) == -intcmp(b, a)


def test_charcmp_orders_by_code_point():
    assert charcmp("a", "b") < 0
    assert charcmp("z", "a") > 0
    assert charcmp("A", "a") < 0


def test_charcmp_equal_is_zero():
    assert charcmp("q", "q") == 0


def test_intcmp_usable_as_sort_key():
    from functools import cmp_to_key

    values = [5, -1, 3, 3, 0]
    result = sorted(values, key=cmp_to_key(intcmp))
    assert result == [-1, 0, 3, 3, 5]
    assert [intcmp(a, b) <= 0 for a, b in zip(result, result[1:])] == [True] * 4


def test_basename_strips_directories():
    assert basename("/home/main/file.txt") == "file.txt"


def test_basename_without_separator_returns_input():
    assert basename("file.txt") == "file.txt"


def test_basename_trailing_separator_gives_empty():
    assert basename("some/dir/") == ""


def test_basename_relative_path():
    assert basename("data/oxford_dict.txt") == "oxford_dict.txt"