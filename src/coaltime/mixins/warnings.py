class DatingEstimateWarning(UserWarning):
    """A warning class for saturated or otherwise degenerate estimates."""

    pass
