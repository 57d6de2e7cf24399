import string

import hypothesis.strategies as st
from hypothesis import given

from prefixdict.utils.comparison import IGNORE_CASE, ORDINAL, KeyComparer


def test_for_case() -> None:
    assert KeyComparer.for_case(True) is ORDINAL
    assert KeyComparer.for_case(False) is IGNORE_CASE


def test_ordinal_is_exact() -> None:
    assert ORDINAL.chars_equal("a", "a")
    assert not ORDINAL.chars_equal("a", "A")
    assert ORDINAL.match_length("Hello", "help") == 3
    assert ORDINAL.match_length("Hello", "hello") == 0


def test_ignore_case_folds() -> None:
    assert IGNORE_CASE.chars_equal("a", "A")
    assert IGNORE_CASE.match_length("Hello", "HELP") == 3
    assert IGNORE_CASE.is_prefix("HEL", "hello")
    assert not IGNORE_CASE.is_prefix("hello", "hel")


def test_folding_never_changes_length() -> None:
    # "ß" folds to "ss", but characters are compared one at a time
    assert not IGNORE_CASE.chars_equal("ß", "s")
    assert IGNORE_CASE.match_length("ßa", "ssa") == 0


@given(a=st.text(), b=st.text())
def test_match_length_bounds(a: str, b: str) -> None:
    for comparer in (ORDINAL, IGNORE_CASE):
        length = comparer.match_length(a, b)
        assert 0 <= length <= min(len(a), len(b))
        assert comparer.match_length(b, a) == length


@given(key=st.text(alphabet=string.ascii_letters), cut=st.integers(min_value=0, max_value=10))
def test_every_prefix_is_a_prefix(key: str, cut: int) -> None:
    prefix = key[:cut]
    assert ORDINAL.is_prefix(prefix, key)
    assert IGNORE_CASE.is_prefix(prefix.swapcase(), key)
    assert ORDINAL.is_prefix(prefix.swapcase(), key) == (prefix.swapcase() == prefix)
