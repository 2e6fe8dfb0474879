import pytest

from ferrules.text_ops import (
    array_and_vec,
    compose_me,
    is_a_color_word,
    replace_me,
    trim_me,
    vec_loop,
    vec_map,
)

EVENS = [2, 4, 6, 8, 10]
DOUBLED = [4, 8, 12, 16, 20]


@pytest.mark.parametrize("word", ["green", "blue", "red"])
def test_color_words(word):
    assert is_a_color_word(word) is True


@pytest.mark.parametrize("word", ["purple", "Green", ""])
def test_not_color_words(word):
    assert is_a_color_word(word) is False


def test_trim_a_string():
    assert trim_me("Hello!     ") == "Hello!"
    assert trim_me("  What's up!") == "What's up!"
    assert trim_me("   Hola!  ") == "Hola!"


def test_compose_a_string():
    assert compose_me("Hello") == "Hello world!"
    assert compose_me("Goodbye") == "Goodbye world!"


def test_replace_a_string():
    assert replace_me("I think cars are cool") == "I think balloons are cool"
    assert replace_me("I love to look at cars") == "I love to look at balloons"


def test_array_and_vec_similarity():
    array, vector = array_and_vec()
    assert list(array) == vector
    assert vector == [10, 20, 30, 40]


def test_vec_loop():
    values = list(EVENS)
    result = vec_loop(values)
    assert result == DOUBLED
    assert values == DOUBLED


def test_vec_map():
    values = list(EVENS)
    assert vec_map(values) == DOUBLED
    assert values == EVENS