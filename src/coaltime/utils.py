"""Utility functions shared by the coalescence time estimators."""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable, Sequence
from typing import Any

from coaltime.mixins import InvalidArgumentError


def _is_mutation_count(obj: Any) -> bool:
    """Whether an object exposes the fields of a MutationCount."""
    return hasattr(obj, "n_sites") and hasattr(obj, "n_mutations")


def _check_counts(n_sites: Any, n_mutations: Any) -> None:
    """Validate a (sequence length, mutation count) pair.

    Args:
        n_sites: Number of aligned sites.
        n_mutations: Number of observed mutations.

    Raises:
        InvalidArgumentError: If either count is not an integer or
            ``n_sites >= n_mutations >= 0`` does not hold.
    """
    if not isinstance(n_sites, numbers.Integral) or not isinstance(n_mutations, numbers.Integral):
        raise InvalidArgumentError(
            "Site and mutation counts must be integers, got "
            f"{type(n_sites).__name__} and {type(n_mutations).__name__}."
        )
    if not n_sites >= n_mutations >= 0:
        raise InvalidArgumentError(
            f"Condition must be satisfied: N >= K >= 0 (got N={n_sites}, K={n_mutations})."
        )


def _check_distance(distance: Any) -> None:
    """Validate a genetic distance.

    Raises:
        InvalidArgumentError: If the distance is not a real number in [0, 1].
    """
    if not isinstance(distance, numbers.Real) or not 0.0 <= distance <= 1.0:
        raise InvalidArgumentError(
            f"Genetic distance `d` must be a value between 0 and 1, got {distance}."
        )


def _check_mutation_rate(mutation_rate: Any) -> None:
    """Validate a mutation rate.

    Raises:
        InvalidArgumentError: If the rate is not a finite, positive number.
    """
    if (
        not isinstance(mutation_rate, numbers.Real)
        or not math.isfinite(mutation_rate)
        or mutation_rate <= 0
    ):
        raise InvalidArgumentError(
            f"Mutation rate must be a finite, positive number, got {mutation_rate}."
        )


def _map_nested(func: Callable[[Any], Any], items: Sequence[Any]) -> list[Any]:
    """Apply a function to every record of a (possibly nested) sequence.

    Records are recognized by their `n_sites` and `n_mutations` fields, so a
    MutationCount is never mistaken for a nested sequence.

    Args:
        func: Function applied to each record.
        items: Sequence of records or of sequences of records.

    Returns:
        Lists of the same shape and order as ``items``.

    Raises:
        TypeError: If an element is neither a record nor a sequence.
    """
    mapped = []
    for item in items:
        if _is_mutation_count(item):
            mapped.append(func(item))
        elif isinstance(item, Sequence) and not isinstance(item, str):
            mapped.append(_map_nested(func, item))
        else:
            raise TypeError(
                f"Unsupported element type {type(item)}. Expected a mutation count "
                "record or a sequence of records."
            )
    return mapped
