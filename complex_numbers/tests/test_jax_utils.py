"""Unit tests for array conversion helpers."""

import jax
import jax.numpy as jnp
import numpy as np
import pytest
from jax import random

from complex_numbers.errors import InvalidArgumentError
from complex_numbers.jax_utils import check_nan_inf, from_array, to_array
from complex_numbers.number import ComplexNumber


X64_ENABLED = jax.dtypes.canonicalize_dtype(jnp.complex128) == jnp.complex128


class TestArrayConversion:
    """Test suite for to_array / from_array."""

    @pytest.fixture
    def values(self):
        return [ComplexNumber(1, 2), 3, -0.5, ComplexNumber(0, -4)]

    def test_to_array(self, values):
        result = to_array(values)
        assert jnp.iscomplexobj(result)
        assert result.shape == (4,)
        expected = jnp.array([1 + 2j, 3 + 0j, -0.5 + 0j, -4j])
        assert jnp.allclose(result, expected, atol=1e-6)

    def test_to_array_empty(self):
        result = to_array([])
        assert result.shape == (0,)
        assert jnp.iscomplexobj(result)

    def test_to_array_complex64(self, values):
        result = to_array(values, dtype=jnp.complex64)
        assert result.dtype == jnp.complex64

    @pytest.mark.skipif(X64_ENABLED, reason="complex128 is available with jax_enable_x64")
    def test_to_array_warns_on_precision_loss(self, values):
        with pytest.warns(UserWarning, match="jax_enable_x64"):
            result = to_array(values, dtype=jnp.complex128)
        assert result.dtype == jnp.complex64

    def test_to_array_rejects_real_dtype(self, values):
        with pytest.raises(ValueError, match="complex dtype"):
            to_array(values, dtype=jnp.float32)

    def test_to_array_rejects_non_numbers(self):
        with pytest.raises(InvalidArgumentError, match=r"values\[1\]"):
            to_array([ComplexNumber(1, 1), "2"])
        with pytest.raises(InvalidArgumentError):
            to_array([1j])

    def test_from_array(self):
        arr = np.array([[1 + 2j, 3], [0, -1j]])
        result = from_array(arr)
        assert result == [
            ComplexNumber(1, 2), ComplexNumber(3, 0), ComplexNumber(0, 0), ComplexNumber(0, -1)
        ]

    def test_from_real_array(self):
        result = from_array(jnp.arange(3))
        assert result == [ComplexNumber(0), ComplexNumber(1), ComplexNumber(2)]
        assert all(isinstance(z, ComplexNumber) for z in result)

    def test_from_array_keeps_double_precision(self):
        arr = np.array([1e300 + 1e-300j])
        assert from_array(arr) == [ComplexNumber(1e300, 1e-300)]

    def test_from_array_rejects_non_finite(self):
        with pytest.raises(InvalidArgumentError, match="flat index 1"):
            from_array(np.array([1.0, np.nan, np.inf]))
        with pytest.raises(InvalidArgumentError, match="flat index 0"):
            from_array(np.array([complex(0, np.inf)]))

    def test_from_array_rejects_non_numeric(self):
        with pytest.raises(InvalidArgumentError, match="numeric"):
            from_array(np.array(["a", "b"]))
        with pytest.raises(InvalidArgumentError, match="numeric"):
            from_array(np.array([True, False]))

    def test_round_trip(self):
        key = random.PRNGKey(42)
        z = random.normal(key, (2, 5), dtype=jnp.complex64)
        numbers = from_array(z)
        assert len(numbers) == 10
        assert jnp.allclose(to_array(numbers).reshape(2, 5), z, atol=1e-6)

    def test_check_nan_inf(self):
        has_issues, stats = check_nan_inf(np.array([1.0, np.inf, np.nan, -np.inf]))
        assert has_issues
        assert stats == {'nan': 1, 'inf': 2, 'total': 4}

        has_issues, stats = check_nan_inf(jnp.ones((3, 3), dtype=jnp.complex64))
        assert not has_issues
        assert stats['total'] == 9


if __name__ == "__main__":
    pytest.main([__file__])
