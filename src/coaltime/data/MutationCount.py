"""Module describing the pre-computed mutation counts between two sequences."""

from typing import NamedTuple


class MutationCount(NamedTuple):
    """Number of sites and of observed mutations between two aligned sequences.

    Counts are consumed as given; they are validated by the estimators, not on
    construction.

    Attributes:
        n_sites: Number of aligned sites compared.
        n_mutations: Number of sites at which a mutation was observed.
    """

    n_sites: int
    n_mutations: int

    @property
    def distance(self) -> float:
        """Returns the proportion of compared sites that are mutated.

        Returns:
            The p-distance, or 0.0 if no sites were compared.
        """
        if self.n_sites == 0:
            return 0.0
        return self.n_mutations / self.n_sites
