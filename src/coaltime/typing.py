from collections.abc import Sequence
from typing import Protocol, Union

import pandas as pd

from coaltime.data import DatingEstimate, PairwiseMatrix


class HasMutationCounts(Protocol):
    n_sites: int
    n_mutations: int


CountSequence = Sequence[Union[HasMutationCounts, "CountSequence"]]
EstimateLike = DatingEstimate | Sequence[DatingEstimate] | pd.Series | pd.DataFrame | PairwiseMatrix
