import pytest

from drillrunner.drills.text import (
    capitalize_first,
    capitalize_words_string,
    capitalize_words_vector,
    compose_me,
    is_a_color_word,
    replace_me,
    trim_me,
)


@pytest.mark.parametrize(
    "word, expected",
    [("green", True), ("blue", True), ("red", True), ("purple", False), ("Green", False)],
)
def test_is_a_color_word(word, expected):
    assert is_a_color_word(word) is expected


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


def test_capitalize_success():
    assert capitalize_first("hello") == "Hello"


def test_capitalize_empty():
    assert capitalize_first("") == ""


def test_iterate_string_vec():
    assert capitalize_words_vector(["hello", "world"]) == ["Hello", "World"]


def test_iterate_into_string():
    assert capitalize_words_string(["hello", " ", "world"]) == "Hello World"