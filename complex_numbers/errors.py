"""Exceptions raised by complex number construction and operations."""


class ComplexNumberError(Exception):
    """Base class for errors raised by the complex_numbers package."""


class InvalidArgumentError(ComplexNumberError, TypeError, ValueError):
    """An operand or constructor argument is outside what the operation accepts.

    Raised for operands that are neither real numbers nor ComplexNumber
    instances, negative moduli, arguments outside (-pi, pi], unknown
    construction forms and non-finite components.
    """


class DivisionByZeroError(ComplexNumberError, ZeroDivisionError):
    """The divisor of a complex division is 0 + 0i."""


class UndefinedResultError(ComplexNumberError, ArithmeticError):
    """The mathematical result is undefined (log of zero, 0 ** w with Re(w) < 0, ...)."""
