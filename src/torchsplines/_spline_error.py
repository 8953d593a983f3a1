class SplineError(Exception):
    """Base exception for basis and spline operations."""

    pass
