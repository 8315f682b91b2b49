"""Error types raised by the ledger engine."""


class LedgerError(Exception):
    """Base class for ledger engine errors."""
    pass


class InvalidAmount(LedgerError, ValueError):
    """A money value could not be parsed from its source representation."""
    pass


class InvalidArgument(LedgerError, ArithmeticError):
    """An operation received an argument outside its domain (e.g. allocate(0))."""
    pass


class DivisionByZero(LedgerError, ZeroDivisionError):
    """Money divided by zero."""
    pass
