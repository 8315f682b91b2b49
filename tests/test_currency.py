import pytest

from tripledger.core.exceptions import InvalidArgument
from tripledger.core.money import Money
from tripledger.utils.currency import convert_to_base, format_currency, get_currency_symbol


def test_currency_symbols():
    assert get_currency_symbol("EUR") == "€"
    assert get_currency_symbol("usd") == "$"
    assert get_currency_symbol("XYZ") == "XYZ"


def test_format_currency():
    assert format_currency(Money("1234.5"), "USD") == "$1,234.50"
    assert format_currency(Money("-3"), "EUR") == "-€3.00"
    assert format_currency("0.005", "GBP") == "£0.00"


def test_format_currency_defaults_to_base_currency():
    assert format_currency(Money(2)) == "$2.00"


def test_convert_to_base():
    assert convert_to_base(100, "0.92") == Money("92.00")
    assert convert_to_base("1000", "0.0067") == Money("6.70")
    assert convert_to_base("10.005", 1) == Money("10.00")


@pytest.mark.parametrize("rate", [0, -1])
def test_convert_rejects_non_positive_rate(rate):
    with pytest.raises(InvalidArgument):
        convert_to_base(10, rate)
