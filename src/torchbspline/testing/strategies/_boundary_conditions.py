import hypothesis.strategies


def boundary_conditions() -> hypothesis.strategies.SearchStrategy[int]:
    """Strategy for boundary condition selectors."""
    return hypothesis.strategies.sampled_from([0, 1, 2])
