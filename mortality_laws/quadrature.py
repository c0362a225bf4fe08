from __future__ import annotations

import logging
from typing import Callable

import numpy as np
from scipy import integrate as _integrate

from mortality_laws.config import QuadratureSettings, settings

logger = logging.getLogger(__name__)


class IntegrationError(RuntimeError):
    """
    Raised when the adaptive quadrature does not reach the requested tolerance.

    The partial estimate and QUADPACK's error estimate are kept on the
    exception so callers can inspect them, but they are never returned as
    if they were a valid result.
    """

    def __init__(self, message: str, estimate: float, abserr: float):
        super().__init__(message)
        self.estimate = estimate
        self.abserr = abserr


def integrate(
    func: Callable[[float], float],
    lower: float,
    upper: float,
    *,
    config: QuadratureSettings | None = None,
) -> float:
    """
    Definite integral of func over the finite interval [lower, upper].

    Uses QUADPACK's QAGS (adaptive Gauss-Kronrod with epsilon-algorithm
    extrapolation), which never evaluates func at the end points and copes
    with integrable singularities there.
    """
    lower = float(lower)
    upper = float(upper)
    if not (np.isfinite(lower) and np.isfinite(upper)):
        raise ValueError("integration bounds must be finite")
    if lower == upper:
        return 0.0

    cfg = settings.quadrature if config is None else config

    # full_output=1 makes quad return the convergence message as a 4th
    # element instead of emitting an IntegrationWarning.
    result = _integrate.quad(
        func,
        lower,
        upper,
        epsabs=cfg.epsabs,
        epsrel=cfg.epsrel,
        limit=cfg.limit,
        full_output=1,
    )
    estimate, abserr, info = result[0], result[1], result[2]

    if len(result) > 3:
        message = str(result[3]).strip()
        logger.warning(
            "Quadrature over [%s, %s] did not converge after %d evaluations: %s",
            lower, upper, info.get("neval", -1), message,
        )
        raise IntegrationError(message, float(estimate), float(abserr))

    logger.debug(
        "Quadrature over [%s, %s] = %.12g (abserr=%.3g, neval=%d)",
        lower, upper, estimate, abserr, info.get("neval", -1),
    )
    return float(estimate)
