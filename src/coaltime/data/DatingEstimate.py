"""Module describing the result record of a coalescence time estimate.

A DatingEstimate stores a date range that may be considered a 95% confidence
range in which the true coalescence time between two sequences lies,
together with the median estimate.
"""

from typing import NamedTuple


class DatingEstimate(NamedTuple):
    """Coalescence time estimate for a pair of aligned sequences.

    The three fields are times in the unit of the mutation rate used for the
    estimate (e.g. generations or years). `lower` is derived from the 95%
    target level of the binomial CDF and `upper` from the 5% target level,
    so that ``lower <= middle <= upper``. ``DatingEstimate()`` is the
    all-zero estimate.

    Attributes:
        lower: Time at the 5% end of the confidence range.
        middle: Median time.
        upper: Time at the 95% end of the confidence range.
    """

    lower: float = 0.0
    middle: float = 0.0
    upper: float = 0.0

    def __str__(self) -> str:
        return f"Coalescence time estimate:\n5%: {self.lower}, 95%: {self.upper}"
