"""Stores constants for coalescence time estimation."""

import numpy as np

# Target level of the binomial CDF that each DatingEstimate field is derived
# from. The field named "lower" holds the smallest time, which comes from the
# 95% target.
CONFIDENCE_LEVELS = {
    "lower": 0.95,
    "middle": 0.5,
    "upper": 0.05,
}

# brentq refuses an rtol below four machine epsilons.
DEFAULT_ROOT_FINDING_PARAMETERS = {
    "xtol": 2e-12,
    "rtol": float(4 * np.finfo(float).eps),
    "maxiter": 100,
}

DEFAULT_PARAMETERS = {
    "dating": {
        "verbose": False,
    },
    "root_finding": DEFAULT_ROOT_FINDING_PARAMETERS,
}
