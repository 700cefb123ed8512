import pytest

from innex.wordtype import word_type


@pytest.mark.parametrize("char", ["a", "Z", "é", "字", "ß"])
def test_alpha(char):
    assert word_type(char) == "alpha"


@pytest.mark.parametrize("char", ["0", "9", "½", "٣"])
def test_num(char):
    assert word_type(char) == "num"


@pytest.mark.parametrize("char", [" ", "-", "!", "\n", "_"])
def test_other(char):
    assert word_type(char) == "other"


@pytest.mark.parametrize("text", ["", "ab", "12"])
def test_not_a_single_character(text):
    with pytest.raises(ValueError):
        word_type(text)