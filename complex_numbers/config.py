"""Tolerance configuration for approximate comparison of complex numbers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceConfig:
    """Configuration for approximate equality checks."""
    rel_tol: float = 1e-9
    abs_tol: float = 1e-12  # Needed for comparisons against exact zero

    def __post_init__(self):
        if self.rel_tol < 0 or self.abs_tol < 0:
            raise ValueError(
                f"Tolerances must be nonnegative, got rel_tol={self.rel_tol}, abs_tol={self.abs_tol}"
            )


_default_tolerance = ToleranceConfig()


def get_default_tolerance() -> ToleranceConfig:
    """Return the tolerance used when none is passed explicitly."""
    return _default_tolerance


def set_default_tolerance(config: ToleranceConfig) -> ToleranceConfig:
    """Replace the default tolerance.
    
    Args:
        config: New default configuration
        
    Returns:
        The previously active configuration, so callers can restore it
        
    Raises:
        TypeError: If config is not a ToleranceConfig
    """
    global _default_tolerance
    if not isinstance(config, ToleranceConfig):
        raise TypeError(f"Expected ToleranceConfig, got {type(config).__name__}")
    previous = _default_tolerance
    _default_tolerance = config
    return previous
