"""Inversion of the binomial CDF in its success probability."""

from scipy import optimize
from scipy.stats import binom

from coaltime.constants import DEFAULT_ROOT_FINDING_PARAMETERS
from coaltime.mixins import RootNotFoundError, logger


def binomzero(
    p0: float,
    n: int,
    b: int,
    xtol: float = DEFAULT_ROOT_FINDING_PARAMETERS["xtol"],
    rtol: float = DEFAULT_ROOT_FINDING_PARAMETERS["rtol"],
    maxiter: int = DEFAULT_ROOT_FINDING_PARAMETERS["maxiter"],
) -> float:
    """Find the success probability at which a binomial CDF reaches a level.

    Solves ``binom.cdf(b, n, p) == p0`` for ``p`` in [0, 1] using Brent's
    method. For fixed ``n`` and ``b`` the CDF decreases monotonically in ``p``
    from 1 at ``p = 0`` to 0 at ``p = 1`` (whenever ``b < n``), so a root is
    bracketed by the whole unit interval.

    Args:
        p0: Target cumulative probability, in [0, 1].
        n: Number of Bernoulli trials (sites).
        b: Number of successes (mutations), ``0 <= b < n``.
        xtol: Absolute tolerance passed to :func:`scipy.optimize.brentq`.
        rtol: Relative tolerance passed to :func:`scipy.optimize.brentq`.
        maxiter: Maximum number of iterations of Brent's method.

    Returns:
        The success probability ``p*`` in [0, 1].

    Raises:
        RootNotFoundError: If the CDF does not cross ``p0`` on [0, 1]
            (e.g. ``b >= n`` or ``b < 0``), or Brent's method fails to
            converge.
    """

    def f(p: float) -> float:
        return binom.cdf(b, n, p) - p0

    f_low, f_high = f(0.0), f(1.0)
    if not f_low * f_high <= 0:
        raise RootNotFoundError(
            f"No sign change of the binomial CDF around level {p0} on [0, 1] "
            f"for N={n}, B={b}."
        )

    root, result = optimize.brentq(
        f, 0.0, 1.0, xtol=xtol, rtol=rtol, maxiter=maxiter, full_output=True, disp=False
    )
    if not result.converged:
        raise RootNotFoundError(
            f"Brent's method did not converge for level {p0}, N={n}, B={b}: {result.flag}."
        )

    logger.debug(f"binomzero(p0={p0}, N={n}, B={b}) = {root} after {result.iterations} iterations")
    return float(root)
