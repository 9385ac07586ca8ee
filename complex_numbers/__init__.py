"""Complex numbers: an immutable complex value type with principal-branch transcendental functions."""

from .errors import (
    ComplexNumberError,
    InvalidArgumentError,
    DivisionByZeroError,
    UndefinedResultError
)

from .number import (
    ComplexNumber,
    Form,
    coerce,
    is_number
)

from .functions import (
    Re,
    Im,
    arg,
    abs,
    sqrt,
    exp,
    log,
    pow,
    get_function,
    FUNCTIONS
)

from .config import (
    ToleranceConfig,
    get_default_tolerance,
    set_default_tolerance
)

from .jax_utils import (
    to_array,
    from_array,
    check_nan_inf
)

__version__ = "0.1.0"
__author__ = "Complex Numbers Team"
__description__ = "Immutable complex numbers with principal-branch transcendental functions"
