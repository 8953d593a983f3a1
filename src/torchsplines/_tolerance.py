"""Default tolerances for knot and point comparisons.

Every tolerance-banded comparison in the package takes one of these as
the default of a keyword argument.
"""

DENOMINATOR_TOLERANCE = 1e-6
"""Knot spans at or below this width count as zero in recurrences."""

DOMAIN_TOLERANCE = 1e-6
"""Slack for points at the first and last knot of a basis."""

KNOT_TOLERANCE = 1e-6
"""Knots closer than this belong to the same breakpoint."""
