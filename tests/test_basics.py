import pytest

from ferrules.basics import (
    bigger,
    foo_if_fizz,
    is_even,
    maybe_icecream,
    sale_price,
    square,
)


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


def test_is_true_when_even():
    assert is_even(2) is True


def test_is_false_when_odd():
    assert is_even(5) is False


@pytest.mark.parametrize("price, expected", [(51, 48), (50, 40)])
def test_sale_price(price, expected):
    assert sale_price(price) == expected


def test_square():
    assert square(3) == 9


def test_check_icecream():
    assert maybe_icecream(9) == 5
    assert maybe_icecream(10) == 5
    assert maybe_icecream(23) == 0
    assert maybe_icecream(22) == 0
    assert maybe_icecream(25) is None


def test_raw_value():
    assert maybe_icecream(12) == 5


def test_icecream_rejects_negative_time():
    with pytest.raises(ValueError):
        maybe_icecream(-1)