from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class QuadratureSettings:
    """
    Tolerances handed to the adaptive integrator.

    The defaults are QUADPACK's own, with a larger subdivision limit so that
    hazards with a sharp rise near age 0 still converge.
    """
    epsabs: float = 1.49e-8
    epsrel: float = 1.49e-8
    limit: int = 200

    def __post_init__(self) -> None:
        if not np.isfinite(self.epsabs) or self.epsabs <= 0.0:
            raise ValueError("epsabs must be finite and > 0")
        if not np.isfinite(self.epsrel) or self.epsrel <= 0.0:
            raise ValueError("epsrel must be finite and > 0")
        if self.limit < 1:
            raise ValueError("limit must be >= 1")


@dataclass(frozen=True)
class Settings:
    # Numerical integration of hazards without a closed form
    quadrature: QuadratureSettings = field(default_factory=QuadratureSettings)

settings = Settings()
