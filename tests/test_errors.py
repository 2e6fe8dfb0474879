import pytest

from ferrules.errors import (
    CreationError,
    CreationErrorKind,
    ParseIntError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    generate_nametag_text,
    parse_int,
    parse_pos_nonzero,
    purchase,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as excinfo:
        generate_nametag_text("")
    assert str(excinfo.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ParseIntError) as excinfo:
        total_cost("beep boop")
    assert str(excinfo.value) == "invalid digit found in string"


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "cannot parse integer from empty string"),
        ("-", "invalid digit found in string"),
        (" 1", "invalid digit found in string"),
        ("1_000", "invalid digit found in string"),
        ("2147483648", "number too large to fit in target type"),
        ("-2147483649", "number too small to fit in target type"),
    ],
)
def test_parse_int_errors(text, message):
    with pytest.raises(ParseIntError) as excinfo:
        parse_int(text)
    assert str(excinfo.value) == message


@pytest.mark.parametrize(
    "text, expected", [("42", 42), ("+7", 7), ("-2147483648", -2147483648)]
)
def test_parse_int_values(text, expected):
    assert parse_int(text) == expected


def test_purchase_affordable(capsys):
    assert purchase(100, "8") == 59
    assert capsys.readouterr().out == "You now have 59 tokens.\n"


def test_purchase_too_expensive(capsys):
    assert purchase(100, "20") == 100
    assert capsys.readouterr().out == "You can't afford that many!\n"


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(CreationError) as negative:
        PositiveNonzeroInteger(-10)
    assert negative.value.kind is CreationErrorKind.NEGATIVE
    with pytest.raises(CreationError) as zero:
        PositiveNonzeroInteger(0)
    assert zero.value.kind is CreationErrorKind.ZERO


def test_creation_error_messages():
    assert str(CreationError(CreationErrorKind.NEGATIVE)) == "number is negative"
    assert str(CreationError(CreationErrorKind.ZERO)) == "number is zero"


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as excinfo:
        parse_pos_nonzero("not a number")
    assert isinstance(excinfo.value.error, ParseIntError)


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as excinfo:
        parse_pos_nonzero("-555")
    assert excinfo.value.error.kind is CreationErrorKind.NEGATIVE


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as excinfo:
        parse_pos_nonzero("0")
    assert excinfo.value.error.kind is CreationErrorKind.ZERO


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)


def test_parse_pos_nonzero_accepts_64_bit_values():
    assert parse_pos_nonzero("9223372036854775807").value == 9223372036854775807