import pytest

from tripledger.core.money import Money
from tripledger.services.split_service import SplitService
from tripledger.utils.split_validation import SplitValidationError


def test_equal_split_keeps_every_cent():
    shares = SplitService.equal_split("100.00", ["A", "B", "C"])

    assert shares == {"A": Money("33.34"), "B": Money("33.33"), "C": Money("33.33")}
    assert Money.sum(shares.values()) == Money(100)


def test_equal_split_preserves_order():
    shares = SplitService.equal_split(10, ["C", "A", "B"])
    assert list(shares) == ["C", "A", "B"]
    assert shares["C"] == Money("3.34")


def test_equal_split_requires_participants():
    with pytest.raises(SplitValidationError):
        SplitService.equal_split(10, [])


def test_equal_split_rejects_duplicates():
    with pytest.raises(SplitValidationError):
        SplitService.equal_split(10, ["A", "A"])


def test_custom_split_returns_money():
    shares = SplitService.custom_split(100, {"A": "50", "B": 30, "C": 20.0})
    assert shares == {"A": Money(50), "B": Money(30), "C": Money(20)}
    assert all(isinstance(value, Money) for value in shares.values())


def test_custom_split_within_one_cent():
    shares = SplitService.custom_split(100, {"A": "33.33", "B": "33.33", "C": "33.33"})
    assert Money.sum(shares.values()) == Money("99.99")


def test_custom_split_drift_rejected():
    with pytest.raises(SplitValidationError, match="does not equal"):
        SplitService.custom_split(100, {"A": 50, "B": 30})


def test_custom_split_custom_tolerance():
    shares = SplitService.custom_split(100, {"A": 50, "B": 49}, tolerance=1)
    assert shares["B"] == Money(49)
