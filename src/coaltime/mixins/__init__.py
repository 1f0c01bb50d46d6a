"""Top level for mixins."""

from coaltime.mixins.errors import (
    CoaltimeError,
    InvalidArgumentError,
    PairwiseMatrixError,
    RootNotFoundError,
    UnspecifiedConfigParameterError,
)
from coaltime.mixins.logging import logger
from coaltime.mixins.warnings import DatingEstimateWarning
