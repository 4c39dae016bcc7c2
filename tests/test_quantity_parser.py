import pytest
from kitchenconv.errors import NumberFormatError
from kitchenconv.parsing import parse_quantity


def test_plain_numbers():
    assert parse_quantity("10") == 10.0
    assert parse_quantity("0.5") == 0.5
    assert parse_quantity("-40") == -40.0
    assert parse_quantity("1e3") == 1000.0

def test_fractions():
    assert parse_quantity("3/4") == 0.75
    assert parse_quantity("1/3") == pytest.approx(0.3333333)
    assert parse_quantity("0/5") == 0.0
    assert parse_quantity("+3/4") == 0.75

@pytest.mark.parametrize("token", [
    "", "abc", "10kg", "1.5.2", " 10", "10 ", "nan", "inf", "1_000",
    "3/", "/4", "3/4x", "-3/4", "3/-4", "1.5/2", "1/2/3", "3/0",
    "1e999", "-1e999", "1" + "0" * 400 + "/1", "1" + "0" * 5000 + "/1", "١٠", "١/٢",
])
def test_rejected(token):
    with pytest.raises(NumberFormatError):
        parse_quantity(token)

def test_message_names_token():
    with pytest.raises(NumberFormatError) as exc:
        parse_quantity("lots")
    assert "'lots'" in str(exc.value)
