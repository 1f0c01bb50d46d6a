"""Top level for data."""

from .DatingEstimate import DatingEstimate
from .MutationCount import MutationCount
from .PairwiseMatrix import PairwiseMatrix
