"""Shared helpers for scorers."""

from contribution_scoring.domain.models import clamp_unit


def normalize(raw: float, minimum: float = 0.0, maximum: float = 100.0) -> float:
    """Rescale ``raw`` from [minimum, maximum] to [0, 1], clamping outside.

    Example:
        >>> normalize(80)
        0.8
        >>> normalize(120)
        1.0
    """
    if raw >= maximum:
        return 1.0
    if raw <= minimum:
        return 0.0
    return (raw - minimum) / (maximum - minimum)


def apply_weight(score: float, weight: float) -> float:
    """Apply a scorer's intrinsic weight and keep the result in [0, 1]."""
    return clamp_unit(score * weight)
