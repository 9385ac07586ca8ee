"""Immutable complex number value type in rectangular form."""

import enum
import math
import numbers
from typing import Union

from .config import get_default_tolerance
from .errors import DivisionByZeroError, InvalidArgumentError


class Form(enum.IntEnum):
    """Interpretation of the two constructor arguments."""
    RECTANGULAR = 0  # (x, y)
    MODULUS_ARGUMENT = 1  # (r, theta)


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_number(value) -> bool:
    """Return True if value is a real number or a ComplexNumber."""
    return _is_real(value) or isinstance(value, ComplexNumber)


def _component(value, name: str, operation: str, accepted: str) -> float:
    """Validate a real operand and return it as a finite float."""
    if not _is_real(value):
        raise InvalidArgumentError(
            f'In {operation}, the argument "{name}" passed in must be one of: {accepted}'
        )
    try:
        component = float(value)
    except OverflowError as err:
        raise InvalidArgumentError(
            f'In {operation}, the argument "{name}" passed in is too large to be represented as a float'
        ) from err
    if not math.isfinite(component):
        raise InvalidArgumentError(
            f'In {operation}, the argument "{name}" passed in must be finite, got {component}'
        )
    return component


def _resolve_form(form) -> Form:
    if not isinstance(form, bool):
        if isinstance(form, str):
            try:
                return Form[form.upper()]
            except KeyError:
                pass
        elif isinstance(form, numbers.Integral):
            try:
                return Form(int(form))
            except ValueError:
                pass
    raise InvalidArgumentError(
        "The only input forms supported by ComplexNumber are: "
        "Form.RECTANGULAR, Form.MODULUS_ARGUMENT"
    )


def _functions():
    from . import functions
    return functions


class ComplexNumber:
    """A complex number z = x + iy.

    Instances are immutable: every operation returns a new ComplexNumber.
    Real operands (int, float, Fraction, NumPy scalars) are accepted wherever
    a complex operand is and are treated as (value, 0).

    Construction:
        ComplexNumber(3, 4)                               -> 3 + 4i
        ComplexNumber(2, math.pi / 2, Form.MODULUS_ARGUMENT) -> 2i (approximately)
    """

    __slots__ = ("_x", "_y")

    RECTANGULAR_FORM = Form.RECTANGULAR
    MODULUS_ARGUMENT_FORM = Form.MODULUS_ARGUMENT

    def __init__(self, x, y=0, form=Form.RECTANGULAR):
        x = _component(x, "x", "ComplexNumber()", "an integer, a float")
        y = _component(y, "y", "ComplexNumber()", "an integer, a float")
        form = _resolve_form(form)

        if form is Form.MODULUS_ARGUMENT:
            r, theta = x, y
            if r < 0:
                raise InvalidArgumentError(
                    f'The modulus "r" of the complex number given must be nonnegative, got {r}'
                )
            if not -math.pi < theta <= math.pi:
                raise InvalidArgumentError(
                    f'The argument "theta" of the complex number given must lie within the range (-pi, pi], got {theta}'
                )
            x = r * math.cos(theta)
            y = r * math.sin(theta)

        # -0.0 would put the argument of negative reals at -pi
        object.__setattr__(self, "_x", x)
        object.__setattr__(self, "_y", y + 0.0)

    @classmethod
    def _from_parts(cls, x: float, y: float) -> "ComplexNumber":
        """Build a result from already validated float components."""
        if not (math.isfinite(x) and math.isfinite(y)):
            raise OverflowError(f"Complex result out of range: ({x}, {y})")
        z = cls.__new__(cls)
        object.__setattr__(z, "_x", x)
        object.__setattr__(z, "_y", y + 0.0)
        return z

    @classmethod
    def from_polar(cls, r, theta) -> "ComplexNumber":
        """Construct from modulus r >= 0 and argument theta in (-pi, pi]."""
        return cls(r, theta, Form.MODULUS_ARGUMENT)

    @classmethod
    def from_complex(cls, value) -> "ComplexNumber":
        """Construct from a Python complex (or anything with real and imag parts)."""
        if not isinstance(value, numbers.Complex) or isinstance(value, bool):
            raise InvalidArgumentError(
                f"ComplexNumber.from_complex() expects a complex number, got {type(value).__name__}"
            )
        return cls(float(value.real), float(value.imag))

    # ---------- immutability ----------

    def __setattr__(self, name, value):
        raise AttributeError(f"ComplexNumber is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"ComplexNumber is immutable, cannot delete {name!r}")

    def __reduce__(self):
        return (type(self), (self._x, self._y))

    # ---------- components ----------

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    real = x
    imag = y

    def get_real(self) -> float:
        """Return the real part x."""
        return self._x

    def get_imaginary(self) -> float:
        """Return the imaginary part y."""
        return self._y

    def get_modulus(self) -> float:
        """Return |z| without overflow or underflow in the intermediate squares."""
        return math.hypot(self._x, self._y)

    def get_argument(self) -> float:
        """Return arg(z) in (-pi, pi]; the argument of 0 is 0."""
        return math.atan2(self._y, self._x)

    def get_complex_conjugate(self) -> "ComplexNumber":
        """Return x - iy."""
        return self._from_parts(self._x, -self._y)

    conjugate = get_complex_conjugate

    # ---------- static coercing accessors ----------

    @staticmethod
    def Re(z) -> float:
        return _functions().Re(z)

    @staticmethod
    def Im(z) -> float:
        return _functions().Im(z)

    @staticmethod
    def arg(z) -> float:
        return _functions().arg(z)

    @staticmethod
    def abs(z) -> float:
        return _functions().abs(z)

    # ---------- arithmetic ----------

    def add(self, z) -> "ComplexNumber":
        """Return self + z."""
        if isinstance(z, ComplexNumber):
            return self._from_parts(self._x + z._x, self._y + z._y)
        value = _component(z, "z", "ComplexNumber.add()", _ACCEPTED)
        return self._from_parts(self._x + value, self._y)

    def subtract(self, z) -> "ComplexNumber":
        """Return self - z."""
        if isinstance(z, ComplexNumber):
            return self._from_parts(self._x - z._x, self._y - z._y)
        value = _component(z, "z", "ComplexNumber.subtract()", _ACCEPTED)
        return self._from_parts(self._x - value, self._y)

    def multiply(self, z) -> "ComplexNumber":
        """Return self * z."""
        w = coerce(z, "z", "ComplexNumber.multiply()")
        return self._from_parts(
            self._x * w._x - self._y * w._y,
            self._x * w._y + self._y * w._x,
        )

    def divide(self, z) -> "ComplexNumber":
        """Return self / z.

        Raises:
            DivisionByZeroError: If z is 0 + 0i
        """
        w = coerce(z, "z", "ComplexNumber.divide()")
        if not w:
            raise DivisionByZeroError(
                'In ComplexNumber.divide(), the argument "z" provided must be nonzero'
            )
        # Smith's method: |w|^2 is never formed, so it cannot under- or overflow
        if math.fabs(w._x) >= math.fabs(w._y):
            ratio = w._y / w._x
            denominator = w._x + w._y * ratio
            return self._from_parts(
                (self._x + self._y * ratio) / denominator,
                (self._y - self._x * ratio) / denominator,
            )
        ratio = w._x / w._y
        denominator = w._x * ratio + w._y
        return self._from_parts(
            (self._x * ratio + self._y) / denominator,
            (self._y * ratio - self._x) / denominator,
        )

    plus = add
    minus = subtract
    times = multiply
    multiplied_by = multiply
    over = divide
    divided_by = divide

    # ---------- transcendental functions ----------

    @staticmethod
    def sqrt(z) -> "ComplexNumber":
        return _functions().sqrt(z)

    @staticmethod
    def exp(z) -> "ComplexNumber":
        return _functions().exp(z)

    @staticmethod
    def log(z, base=math.e) -> "ComplexNumber":
        return _functions().log(z, base)

    @staticmethod
    def pow(z, w) -> "ComplexNumber":
        return _functions().pow(z, w)

    # ---------- comparison ----------

    def isclose(self, other, rel_tol=None, abs_tol=None) -> bool:
        """Component-wise math.isclose, defaulting to the configured tolerance."""
        other = coerce(other, "other", "ComplexNumber.isclose()")
        tolerance = get_default_tolerance()
        rel_tol = tolerance.rel_tol if rel_tol is None else rel_tol
        abs_tol = tolerance.abs_tol if abs_tol is None else abs_tol
        return (
            math.isclose(self._x, other._x, rel_tol=rel_tol, abs_tol=abs_tol)
            and math.isclose(self._y, other._y, rel_tol=rel_tol, abs_tol=abs_tol)
        )

    def __eq__(self, other):
        if isinstance(other, ComplexNumber):
            return self._x == other._x and self._y == other._y
        if isinstance(other, numbers.Complex) and not isinstance(other, bool):
            return self._x == other.real and self._y == other.imag
        return NotImplemented

    def __hash__(self):
        # Matches hash() of an equal int, float or complex
        return hash(complex(self._x, self._y))

    def __bool__(self):
        return self._x != 0 or self._y != 0

    def __complex__(self):
        return complex(self._x, self._y)

    # ---------- operator sugar ----------

    def __add__(self, other):
        if not is_number(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not is_number(other):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not is_number(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not is_number(other):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, other):
        if not is_number(other):
            return NotImplemented
        return _functions().pow(self, other)

    __radd__ = __add__
    __rmul__ = __mul__

    def __rsub__(self, other):
        if not is_number(other):
            return NotImplemented
        return coerce(other, "z", "ComplexNumber.subtract()").subtract(self)

    def __rtruediv__(self, other):
        if not is_number(other):
            return NotImplemented
        return coerce(other, "z", "ComplexNumber.divide()").divide(self)

    def __rpow__(self, other):
        if not is_number(other):
            return NotImplemented
        return _functions().pow(other, self)

    def __neg__(self):
        return self._from_parts(-self._x, -self._y)

    def __pos__(self):
        return self

    def __abs__(self):
        return self.get_modulus()

    def __repr__(self):
        return f"ComplexNumber({self._x!r}, {self._y!r})"

    def __str__(self):
        sign = "-" if self._y < 0 else "+"
        return f"{self._x} {sign} {math.fabs(self._y)}i"

    # camelCase names
    getReal = get_real
    getImaginary = get_imaginary
    getModulus = get_modulus
    getArgument = get_argument
    getComplexConjugate = get_complex_conjugate
    multipliedBy = multiply
    dividedBy = divide


_ACCEPTED = "an integer, a float, a complex number"

Operand = Union[int, float, ComplexNumber]


def coerce(value, name: str = "z", operation: str = "ComplexNumber()") -> ComplexNumber:
    """Return value as a ComplexNumber, treating real numbers as (value, 0).

    Args:
        value: Real number or ComplexNumber
        name: Parameter name reported on failure
        operation: Operation name reported on failure

    Returns:
        The ComplexNumber itself, or a new one with zero imaginary part

    Raises:
        InvalidArgumentError: If value is neither a real number nor a ComplexNumber
    """
    if isinstance(value, ComplexNumber):
        return value
    return ComplexNumber._from_parts(_component(value, name, operation, _ACCEPTED), 0.0)
