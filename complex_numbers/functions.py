"""Coercing functions over complex numbers: accessors and transcendental functions.

Every function accepts real numbers (int, float, ...) wherever a complex
operand is expected and treats them as (value, 0). Results use the principal
branch, i.e. the one fixed by arg(z) in (-pi, pi].
"""

import math

from .errors import UndefinedResultError
from .number import ComplexNumber, Form, Operand, coerce


def Re(z: Operand) -> float:
    """Real part of z."""
    return coerce(z, "z", "ComplexNumber.Re()").get_real()


def Im(z: Operand) -> float:
    """Imaginary part of z."""
    return coerce(z, "z", "ComplexNumber.Im()").get_imaginary()


def arg(z: Operand) -> float:
    """Argument of z in (-pi, pi]; arg(0) is 0."""
    return coerce(z, "z", "ComplexNumber.arg()").get_argument()


def abs(z: Operand) -> float:
    """Modulus |z|."""
    return coerce(z, "z", "ComplexNumber.abs()").get_modulus()


def sqrt(z: Operand) -> ComplexNumber:
    """Principal square root.

    Built in modulus/argument form from sqrt(|z|) and arg(z) / 2, so the
    result's argument lies in (-pi/2, pi/2].

    Args:
        z: Real or complex operand

    Returns:
        ComplexNumber w with w * w == z (up to rounding)
    """
    z = coerce(z, "z", "ComplexNumber.sqrt()")
    return ComplexNumber(math.sqrt(z.get_modulus()), z.get_argument() / 2, Form.MODULUS_ARGUMENT)


def exp(z: Operand) -> ComplexNumber:
    """Complex exponential e^x * (cos y + i sin y).

    Raises:
        OverflowError: If e^x is not representable as a float
    """
    z = coerce(z, "z", "ComplexNumber.exp()")
    try:
        scale = math.exp(z.get_real())
    except OverflowError as err:
        raise OverflowError(f"In ComplexNumber.exp(), the result for {z} is out of range") from err
    y = z.get_imaginary()
    return ComplexNumber._from_parts(scale * math.cos(y), scale * math.sin(y))


def log(z: Operand, base: Operand = math.e) -> ComplexNumber:
    """Principal logarithm of z, natural by default.

    For base e the result is ln|z| + i arg(z). Any other base uses the
    change-of-base identity log(z) / log(base).

    Args:
        z: Nonzero real or complex operand
        base: Nonzero real or complex base other than 1 (default: e)

    Returns:
        ComplexNumber logarithm

    Raises:
        InvalidArgumentError: If z or base is not a number
        UndefinedResultError: If z is zero, base is zero or base is 1
    """
    z = coerce(z, "z", "ComplexNumber.log()")
    base = coerce(base, "base", "ComplexNumber.log()")

    if base == math.e:
        if not z:
            raise UndefinedResultError(
                'In ComplexNumber.log(), the first argument "z" passed in must be nonzero'
            )
        return ComplexNumber._from_parts(math.log(z.get_modulus()), z.get_argument())

    if not base:
        raise UndefinedResultError(
            'In ComplexNumber.log(), the second argument "base" passed in must be nonzero'
        )
    log_base = log(base)
    if not log_base:
        raise UndefinedResultError(
            f'In ComplexNumber.log(), the logarithm of the base {base} is zero'
        )
    return log(z).divided_by(log_base)


def pow(z: Operand, w: Operand) -> ComplexNumber:
    """Principal value of z ** w, computed as exp(w * log(z)).

    Zero base follows the usual numeric-library conventions:
    0 ** w is 0 for Re(w) > 0 and 1 for Re(w) == 0 (so 0 ** 0 == 1).

    Raises:
        UndefinedResultError: If z is zero and Re(w) < 0 (complex infinity)
    """
    z = coerce(z, "z", "ComplexNumber.pow()")
    w = coerce(w, "w", "ComplexNumber.pow()")

    if not z:
        if w.get_real() > 0:
            return ComplexNumber(0)
        if w.get_real() == 0:
            return ComplexNumber(1)
        raise UndefinedResultError(
            '(0 + 0i) ** w evaluates to "complex infinity" for all w where Re(w) < 0'
        )
    return exp(w.times(log(z)))


# Function registry for lookup by name
FUNCTIONS = {
    'Re': Re,
    'Im': Im,
    'arg': arg,
    'abs': abs,
    'sqrt': sqrt,
    'exp': exp,
    'log': log,
    'pow': pow,
}


def get_function(name: str):
    """Get a complex function by name.

    Args:
        name: Name of the function

    Returns:
        The function

    Raises:
        ValueError: If the name is not registered
    """
    if name not in FUNCTIONS:
        raise ValueError(f"Unknown function: {name}. Available: {list(FUNCTIONS.keys())}")
    return FUNCTIONS[name]
