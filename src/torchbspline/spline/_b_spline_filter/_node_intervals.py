"""Node grid selection for the B-spline filter."""

import warnings
from typing import Tuple

from .._domain_error import DomainError
from .._node_spacing_warning import NodeSpacingWarning
from ._constants import (
    MAX_NODES_PER_WAVELENGTH,
    MAX_POINTS_PER_INTERVAL,
    MIN_NODE_INTERVALS,
    MIN_NODES_PER_WAVELENGTH,
    TARGET_NODES_PER_WAVELENGTH,
)


def node_intervals(
    sample_count: int,
    span: float,
    wavelength: float,
) -> Tuple[int, float]:
    """
    Choose the number of node intervals for a sample domain.

    Parameters
    ----------
    sample_count : int
        Number of samples (NX). Must be at least 2.
    span : float
        Width of the sample domain, ``xmax - xmin``. Must be positive.
    wavelength : float
        Cutoff wavelength, ``0 < wavelength <= span``.

    Returns
    -------
    intervals : int
        Number of node intervals M (M + 1 nodes).
    spacing : float
        Node spacing ``span / M``.

    Raises
    ------
    DomainError
        If the inputs admit no grid, including when the samples run out
        before the grid reaches the minimum number of nodes per cutoff
        wavelength.

    Warns
    -----
    NodeSpacingWarning
        If the samples only allow a grid below the target number of nodes
        per cutoff wavelength.

    Notes
    -----
    Starting from ten intervals, the count is first increased until there
    are at least two nodes per cutoff wavelength. It is then refined while
    there are fewer than four nodes per wavelength or more than two samples
    per interval, never exceeding fifteen nodes per wavelength and always
    keeping at least one sample per interval.
    """
    if sample_count < 2:
        raise DomainError(f"Need at least 2 samples, got {sample_count}")

    if not span > 0:
        raise DomainError(
            f"Sample domain must have positive width, got {span}"
        )

    if not 0 < wavelength <= span:
        raise DomainError(
            f"Cutoff wavelength {wavelength} must lie in (0, {span}]"
        )

    def ratios(n: int) -> Tuple[float, float]:
        # Nodes per cutoff wavelength, samples per node interval
        return wavelength * n / span, sample_count / (n + 1)

    n = MIN_NODE_INTERVALS

    per_wavelength, per_interval = ratios(n)

    while True:
        if per_interval < 1.0:
            raise DomainError(
                f"{sample_count} samples cannot resolve a cutoff wavelength "
                f"of {wavelength} with {n} node intervals"
            )

        if per_wavelength >= MIN_NODES_PER_WAVELENGTH:
            break

        n += 1
        per_wavelength, per_interval = ratios(n)

    while (
        per_wavelength < TARGET_NODES_PER_WAVELENGTH
        or per_interval > MAX_POINTS_PER_INTERVAL
    ):
        next_per_wavelength, next_per_interval = ratios(n + 1)

        if (
            next_per_interval < 1.0
            or next_per_wavelength > MAX_NODES_PER_WAVELENGTH
        ):
            break

        n += 1
        per_wavelength, per_interval = next_per_wavelength, next_per_interval

    if per_wavelength < TARGET_NODES_PER_WAVELENGTH:
        warnings.warn(
            f"{sample_count} samples allow only {per_wavelength:.2f} nodes "
            f"per cutoff wavelength of {wavelength}",
            NodeSpacingWarning,
            stacklevel=3,
        )

    return n, span / n
