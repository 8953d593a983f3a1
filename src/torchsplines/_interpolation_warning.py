class InterpolationWarning(UserWarning):
    """Collocation matrix of a fit is rank deficient.

    The fit still returns the least-squares solution, which may not
    reproduce the observations.
    """

    pass
