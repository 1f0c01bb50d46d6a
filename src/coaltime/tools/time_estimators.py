"""Utilities for estimating the coalescence time of two aligned sequences.

Mutation accumulation between two sequences is modelled as a Bernoulli
process: each of the N aligned sites has independently mutated with a
probability p, which over t units of time along both lineages is roughly
2µt. Given K observed mutations, the binomial CDF is inverted at the 95%,
50% and 5% levels to bound p, and each bound is converted into a time by
dividing by 2µ and rounding up.

Estimates can be computed from raw counts, from a genetic distance, from
MutationCount records, or from containers of records. Containers are mapped
element-wise and keep their shape (and labels, where they have them).
"""

import functools
import math
import warnings
from collections.abc import Hashable, Sequence
from typing import Any

import numpy as np
import pandas as pd
from scipy.spatial.distance import squareform

from coaltime import utils
from coaltime.constants import CONFIDENCE_LEVELS
from coaltime.data import DatingEstimate, PairwiseMatrix
from coaltime.mixins import DatingEstimateWarning, logger
from coaltime.tools.root_finding import binomzero
from coaltime.typing import CountSequence, EstimateLike, HasMutationCounts


def estimate_time(
    n_sites: int,
    n_mutations: int,
    mutation_rate: float,
    *,
    root_finding: dict[str, Any] | None = None,
) -> DatingEstimate:
    """Compute the coalescence time between two sequences.

    The probability of mutation per site is bounded by solving
    ``binom.cdf(K, N, p) == level`` for levels 0.95, 0.5 and 0.05. Each bound
    is divided by twice the mutation rate and rounded up. The field `lower`
    therefore comes from the 0.95 level and `upper` from the 0.05 level.

    When every site is mutated (``K == N``, including ``N == K == 0``) the
    CDF equals 1 for every p and the bounds saturate at p = 1. All three
    fields are then ``ceil(1 / 2µ)`` and a DatingEstimateWarning is raised.

    Args:
        n_sites: Length of the two aligned sequences (N).
        n_mutations: Estimated number of mutations between them (K).
        mutation_rate: Assumed mutation rate per site per unit of time (µ).
        root_finding: Keyword arguments forwarded to :func:`binomzero`
            (``xtol``, ``rtol``, ``maxiter``).

    Returns:
        A DatingEstimate with three non-negative, integer-valued times.

    Raises:
        InvalidArgumentError: If the counts are not integers satisfying
            ``N >= K >= 0``, or the mutation rate is not finite and positive.
        RootNotFoundError: If a confidence bound cannot be found.
    """
    utils._check_counts(n_sites, n_mutations)
    utils._check_mutation_rate(mutation_rate)
    if root_finding is None:
        root_finding = {}

    saturated = n_mutations == n_sites
    if saturated:
        warnings.warn(
            f"All {n_sites} sites are mutated; the probability of mutation is "
            "saturated and the estimate only bounds the coalescence time from below.",
            DatingEstimateWarning,
            stacklevel=2,
        )

    div = 2 * mutation_rate
    times = {}
    for field, level in CONFIDENCE_LEVELS.items():
        if saturated:
            bound = 1.0
        else:
            bound = binomzero(level, int(n_sites), int(n_mutations), **root_finding)
        times[field] = float(np.ceil(bound / div))

    estimate = DatingEstimate(**times)
    logger.debug(
        f"N={n_sites}, K={n_mutations}, mu={mutation_rate}: "
        f"lower={estimate.lower}, middle={estimate.middle}, upper={estimate.upper}"
    )
    return estimate


def estimate_time_from_distance(
    n_sites: int,
    distance: float,
    mutation_rate: float,
    *,
    root_finding: dict[str, Any] | None = None,
) -> DatingEstimate:
    """Compute the coalescence time from a genetic distance.

    The number of mutations is taken as ``ceil(distance * n_sites)``.

    Args:
        n_sites: Length of the two aligned sequences.
        distance: Estimated genetic distance, between 0 and 1.
        mutation_rate: Assumed mutation rate per site per unit of time.
        root_finding: Keyword arguments forwarded to :func:`binomzero`.

    Returns:
        A DatingEstimate.

    Raises:
        InvalidArgumentError: If the distance is not in [0, 1] or the
            sequence length is not a non-negative integer.
    """
    utils._check_distance(distance)
    utils._check_counts(n_sites, 0)
    n_mutations = int(math.ceil(distance * n_sites))
    return estimate_time(n_sites, n_mutations, mutation_rate, root_finding=root_finding)


def estimate_time_from_count(
    mutation_count: HasMutationCounts,
    mutation_rate: float,
    *,
    root_finding: dict[str, Any] | None = None,
) -> DatingEstimate:
    """Compute the coalescence time from a MutationCount record.

    Args:
        mutation_count: Record with `n_sites` and `n_mutations` fields.
        mutation_rate: Assumed mutation rate per site per unit of time.
        root_finding: Keyword arguments forwarded to :func:`binomzero`.

    Returns:
        A DatingEstimate.

    Raises:
        TypeError: If the record lacks `n_sites` or `n_mutations`.
    """
    if not utils._is_mutation_count(mutation_count):
        raise TypeError(
            f"Unsupported type {type(mutation_count)}. Expected a record with "
            "`n_sites` and `n_mutations` fields."
        )
    return estimate_time(
        mutation_count.n_sites,
        mutation_count.n_mutations,
        mutation_rate,
        root_finding=root_finding,
    )


def estimate_times(
    mutation_counts: CountSequence,
    mutation_rate: float,
    *,
    root_finding: dict[str, Any] | None = None,
) -> list:
    """Compute the coalescence time for every record of a sequence.

    Nested sequences (e.g. one list of records per reference sequence) are
    mapped recursively.

    Args:
        mutation_counts: Sequence, or sequence of sequences, of records.
        mutation_rate: Assumed mutation rate per site per unit of time.
        root_finding: Keyword arguments forwarded to :func:`binomzero`.

    Returns:
        Lists of DatingEstimates with the same shape and order as the input.
    """
    logger.info(f"Estimating coalescence times for {len(mutation_counts)} entries.")
    estimator = functools.partial(
        estimate_time_from_count, mutation_rate=mutation_rate, root_finding=root_finding
    )
    return utils._map_nested(estimator, mutation_counts)


def estimate_times_pairwise(
    mutation_counts: PairwiseMatrix,
    mutation_rate: float,
    *,
    root_finding: dict[str, Any] | None = None,
) -> PairwiseMatrix:
    """Compute the coalescence time for every pair of a pairwise matrix.

    Args:
        mutation_counts: PairwiseMatrix of records, one per pair of sequences.
        mutation_rate: Assumed mutation rate per site per unit of time.
        root_finding: Keyword arguments forwarded to :func:`binomzero`.

    Returns:
        A PairwiseMatrix of DatingEstimates with the same labels, and an
        all-zero DatingEstimate on the diagonal.
    """
    if not isinstance(mutation_counts, PairwiseMatrix):
        raise TypeError(f"Unsupported type {type(mutation_counts)}. Expected a PairwiseMatrix.")

    logger.info(
        f"Estimating coalescence times for {len(mutation_counts.values)} pairs of "
        f"{mutation_counts.n} sequences."
    )
    estimator = functools.partial(
        estimate_time_from_count, mutation_rate=mutation_rate, root_finding=root_finding
    )
    return mutation_counts.map(estimator, diagonal=DatingEstimate())


def estimate_times_labeled(
    mutation_counts: pd.Series | pd.DataFrame,
    mutation_rate: float,
    *,
    root_finding: dict[str, Any] | None = None,
) -> pd.Series | pd.DataFrame:
    """Compute the coalescence time for every record of a labeled array.

    Args:
        mutation_counts: Series or DataFrame holding one record per cell.
        mutation_rate: Assumed mutation rate per site per unit of time.
        root_finding: Keyword arguments forwarded to :func:`binomzero`.

    Returns:
        A Series or DataFrame of DatingEstimates with the same index (and
        columns).
    """
    if not isinstance(mutation_counts, (pd.Series, pd.DataFrame)):
        raise TypeError(
            f"Unsupported type {type(mutation_counts)}. Expected a pandas Series or DataFrame."
        )

    logger.info(f"Estimating coalescence times for {mutation_counts.size} entries.")
    estimator = functools.partial(
        estimate_time_from_count, mutation_rate=mutation_rate, root_finding=root_finding
    )
    return mutation_counts.map(estimator)


def _get_field(estimates: EstimateLike, field: str):
    if isinstance(estimates, DatingEstimate):
        return getattr(estimates, field)

    if isinstance(estimates, PairwiseMatrix):
        n = estimates.n
        values = np.array([getattr(e, field) for e in estimates.values], dtype=float)
        square = squareform(values) if n > 1 else np.zeros((n, n))
        if estimates.diagonal is not None:
            np.fill_diagonal(square, getattr(estimates.diagonal, field))
        labels = estimates.labels if estimates.labels is not None else list(range(n))
        return pd.DataFrame(square, index=labels, columns=labels)

    if isinstance(estimates, (pd.Series, pd.DataFrame)):
        return estimates.map(lambda e: getattr(e, field)).astype(float)

    if isinstance(estimates, Sequence):
        return [getattr(e, field) for e in estimates]

    raise TypeError(f"Unsupported type {type(estimates)} for DatingEstimate field access.")


def lower(estimates: EstimateLike):
    """Returns the 5% time of an estimate, or of every estimate in a container.

    Args:
        estimates: A DatingEstimate, a sequence of them, a pandas Series or
            DataFrame of them, or a PairwiseMatrix of them.

    Returns:
        A float for a single estimate, a list for a sequence, a pandas object
        of the same shape for pandas input, and a square DataFrame for a
        PairwiseMatrix.
    """
    return _get_field(estimates, "lower")


def middle(estimates: EstimateLike):
    """Returns the median time of an estimate, or of every estimate in a container.

    See :func:`lower` for the supported containers.
    """
    return _get_field(estimates, "middle")


def upper(estimates: EstimateLike):
    """Returns the 95% time of an estimate, or of every estimate in a container.

    See :func:`lower` for the supported containers.
    """
    return _get_field(estimates, "upper")


def estimates_to_frame(
    estimates: Sequence[DatingEstimate],
    index: Sequence[Hashable] | None = None,
) -> pd.DataFrame:
    """Tabulates a sequence of estimates.

    Args:
        estimates: DatingEstimates, one per row.
        index: Optional row labels.

    Returns:
        A DataFrame with columns `lower`, `middle` and `upper`.
    """
    return pd.DataFrame(
        [tuple(estimate) for estimate in estimates],
        columns=list(DatingEstimate._fields),
        index=index,
        dtype=float,
    )
