"""Conversion between ComplexNumber values and JAX / NumPy complex arrays."""

import warnings
from typing import Dict, Iterable, List, Optional, Tuple

import jax
import jax.numpy as jnp
import numpy as np
from jax import Array

from .errors import InvalidArgumentError
from .number import ComplexNumber, Operand, coerce


def check_nan_inf(x) -> Tuple[bool, Dict[str, int]]:
    """Check for NaN and Inf values in an array.

    Counting is done in NumPy at the array's own precision, so float64
    input is not squeezed through float32 on the way.

    Args:
        x: Array-like (JAX, NumPy or nested sequences)

    Returns:
        Tuple of (has_issues, stats_dict)
    """
    arr = np.asarray(x)
    stats = {
        'nan': int(np.sum(np.isnan(arr))),
        'inf': int(np.sum(np.isinf(arr))),
        'total': int(arr.size),
    }
    return stats['nan'] + stats['inf'] > 0, stats


def to_array(values: Iterable[Operand], dtype: Optional[jnp.dtype] = None) -> Array:
    """Pack complex (or real) values into a 1-D JAX complex array.

    Args:
        values: Iterable of ComplexNumber or real numbers
        dtype: complex64 or complex128 (default: the widest JAX allows)

    Returns:
        Complex JAX array with one entry per value

    Raises:
        InvalidArgumentError: If an entry is not a number
        ValueError: If dtype is not a complex dtype
    """
    numbers = [coerce(value, f"values[{i}]", "to_array()") for i, value in enumerate(values)]

    requested = jnp.dtype(jnp.complex128 if dtype is None else dtype)
    if not jnp.issubdtype(requested, jnp.complexfloating):
        raise ValueError(f"to_array() needs a complex dtype, got {requested}")

    # Without jax_enable_x64, JAX silently stores complex128 as complex64
    actual = jax.dtypes.canonicalize_dtype(requested)
    if dtype is not None and actual != requested:
        warnings.warn(
            f"Requested {requested} but jax_enable_x64 is disabled; "
            f"values are stored as {actual} and lose precision"
        )

    return jnp.array([complex(z) for z in numbers], dtype=actual).reshape(len(numbers))


def from_array(array) -> List[ComplexNumber]:
    """Unpack a real or complex array of any shape into ComplexNumber values.

    Args:
        array: JAX or NumPy array (or nested sequences) of numbers

    Returns:
        Flat list of ComplexNumber in row-major order

    Raises:
        InvalidArgumentError: If the array is not numeric or holds NaN/Inf
    """
    arr = np.asarray(array)
    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.number):
        raise InvalidArgumentError(
            f"from_array() needs a numeric array, got dtype {arr.dtype}"
        )

    flat = arr.reshape(-1)
    has_issues, stats = check_nan_inf(flat)
    if has_issues:
        index = int(np.flatnonzero(~np.isfinite(flat))[0])
        raise InvalidArgumentError(
            f"from_array() got non-finite entry {flat[index]} at flat index {index} "
            f"({stats['nan']} NaN, {stats['inf']} Inf of {stats['total']})"
        )

    return [ComplexNumber.from_complex(complex(value)) for value in flat]
