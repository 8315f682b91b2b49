"""
Money - exact decimal amounts.

Design principles:
- Wraps decimal.Decimal, never a float
- Immutable; every operation returns a new Money
- One process-wide decimal context (ROUND_HALF_EVEN), configured at import
- Equal splits go through allocate(), never a raw divide()
"""

import decimal
from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_EVEN
from typing import Any, Iterable, List, Union

from tripledger.core.config import settings
from tripledger.core.exceptions import DivisionByZero, InvalidAmount, InvalidArgument

# Minor units (cents) used by allocate()
MINOR_UNIT_SCALE = 2

MONEY_CONTEXT = decimal.Context(
    prec=settings.DECIMAL_PRECISION,
    rounding=ROUND_HALF_EVEN,
    traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
)

Numeric = Union["Money", Decimal, int, float, str]


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Money):
        return value._amount
    # bool is an int subclass; True is not an amount
    if isinstance(value, bool) or value is None:
        raise InvalidAmount(f"Not a monetary amount: {value!r}")
    if isinstance(value, float):
        value = repr(value)
    if isinstance(value, str):
        value = value.strip()
    if not isinstance(value, (Decimal, int, str)):
        raise InvalidAmount(f"Not a monetary amount: {value!r}")
    try:
        amount = Decimal(value)
    except (decimal.InvalidOperation, ValueError, TypeError) as exc:
        raise InvalidAmount(f"Not a monetary amount: {value!r}") from exc
    if not amount.is_finite():
        raise InvalidAmount(f"Amount must be finite: {value!r}")
    return amount


class Money:
    __slots__ = ("_amount",)

    def __init__(self, amount: Numeric = 0):
        object.__setattr__(self, "_amount", _to_decimal(amount))

    def __setattr__(self, name, value):
        raise AttributeError("Money is immutable")

    # Factories

    @classmethod
    def from_value(cls, amount: Numeric) -> "Money":
        return amount if isinstance(amount, cls) else cls(amount)

    @classmethod
    def zero(cls) -> "Money":
        return cls(0)

    @classmethod
    def sum(cls, amounts: Iterable[Numeric]) -> "Money":
        total = cls.zero()
        for amount in amounts:
            total = total.add(amount)
        return total

    # Arithmetic

    def add(self, other: Numeric) -> "Money":
        return Money(MONEY_CONTEXT.add(self._amount, _to_decimal(other)))

    def subtract(self, other: Numeric) -> "Money":
        return Money(MONEY_CONTEXT.subtract(self._amount, _to_decimal(other)))

    def multiply(self, factor: Numeric) -> "Money":
        return Money(MONEY_CONTEXT.multiply(self._amount, _to_decimal(factor)))

    def divide(self, divisor: Numeric) -> "Money":
        divisor = _to_decimal(divisor)
        if divisor == 0:
            raise DivisionByZero(f"Cannot divide {self} by zero")
        return Money(MONEY_CONTEXT.divide(self._amount, divisor))

    def round(self, places: int = MINOR_UNIT_SCALE) -> "Money":
        """Round to `places` decimals using banker's rounding."""
        exponent = Decimal(1).scaleb(-places)
        return Money(self._amount.quantize(exponent, rounding=ROUND_HALF_EVEN, context=MONEY_CONTEXT))

    def allocate(self, count: int) -> List["Money"]:
        """
        Split into `count` parts at minor-unit scale.

        The amount is floored to whole minor units, then the remainder is
        handed out one unit at a time to the first parts. The parts always
        sum to the floored amount and differ by at most one minor unit:

            Money("10.00").allocate(3) -> [3.34, 3.33, 3.33]
        """
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise InvalidArgument(f"Split count must be a positive integer, got {count!r}")

        total_minor = int(
            self._amount.scaleb(MINOR_UNIT_SCALE, context=MONEY_CONTEXT).to_integral_value(rounding=ROUND_FLOOR)
        )
        base, remainder = divmod(total_minor, count)

        parts = []
        for index in range(count):
            minor = base + 1 if index < remainder else base
            parts.append(Money(Decimal(minor).scaleb(-MINOR_UNIT_SCALE, context=MONEY_CONTEXT)))
        return parts

    def abs(self) -> "Money":
        return Money(abs(self._amount))

    # Comparison

    def equals(self, other: Numeric) -> bool:
        return self._amount == _to_decimal(other)

    def less_than(self, other: Numeric) -> bool:
        return self._amount < _to_decimal(other)

    def greater_than(self, other: Numeric) -> bool:
        return self._amount > _to_decimal(other)

    def is_zero(self) -> bool:
        return self._amount == 0

    # Value access

    def to_decimal(self) -> Decimal:
        return self._amount

    def to_float(self) -> float:
        """For display only; never feed the result back into a calculation."""
        return float(self._amount)

    def to_fixed(self, places: int = MINOR_UNIT_SCALE) -> str:
        return format(self.round(places)._amount, "f")

    # Python protocol

    def __add__(self, other):
        try:
            return self.add(other)
        except InvalidAmount:
            return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        try:
            return self.subtract(other)
        except InvalidAmount:
            return NotImplemented

    def __rsub__(self, other):
        try:
            return Money(other).subtract(self)
        except InvalidAmount:
            return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Money):
            return NotImplemented
        try:
            return self.multiply(other)
        except InvalidAmount:
            return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        try:
            return self.divide(other)
        except InvalidAmount:
            return NotImplemented

    def __neg__(self):
        return Money(-self._amount)

    def __abs__(self):
        return self.abs()

    def __eq__(self, other):
        try:
            return self.equals(other)
        except InvalidAmount:
            return NotImplemented

    def __lt__(self, other):
        try:
            return self.less_than(other)
        except InvalidAmount:
            return NotImplemented

    def __le__(self, other):
        try:
            return self._amount <= _to_decimal(other)
        except InvalidAmount:
            return NotImplemented

    def __gt__(self, other):
        try:
            return self.greater_than(other)
        except InvalidAmount:
            return NotImplemented

    def __ge__(self, other):
        try:
            return self._amount >= _to_decimal(other)
        except InvalidAmount:
            return NotImplemented

    def __hash__(self):
        return hash(self._amount)

    def __bool__(self):
        return not self.is_zero()

    def __reduce__(self):
        return (Money, (str(self),))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __str__(self):
        return format(self._amount, "f")

    def __repr__(self):
        return f"Money('{self}')"

    # Pydantic integration

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any):
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(
            cls.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any):
        return {"anyOf": [{"type": "number"}, {"type": "string"}], "examples": ["12.50"]}

    @classmethod
    def validate(cls, value: Any) -> "Money":
        # InvalidAmount is a ValueError, so pydantic reports it as a validation error
        return cls.from_value(value)
