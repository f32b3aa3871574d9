from ._spline_error import SplineError


class DomainError(SplineError):
    """Raised when sample abscissas and cutoff wavelength admit no node grid.

    This occurs when:
    - The cutoff wavelength exceeds the span of the samples
    - The cutoff wavelength is not a positive finite number
    - Fewer than two samples are given, or some are not finite
    """

    pass
