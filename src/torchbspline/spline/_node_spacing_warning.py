class NodeSpacingWarning(UserWarning):
    """Warning for node grids too coarse to resolve the cutoff wavelength."""

    pass
