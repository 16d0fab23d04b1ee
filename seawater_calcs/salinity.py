import logging
from typing import NamedTuple

import numpy as np

from .constants import (
    MIN_CONDUCTIVITY_RATIO,
    MIN_SALINITY,
    NEWTON_MAX_ITER,
    NEWTON_SALINITY_TOL,
    REFERENCE_SALINITY,
    REFERENCE_TEMPERATURE,
)

logger = logging.getLogger(__name__)


# Temperature / pressure correction factors (UNESCO 1983, SAL78)
def a_term(t):
    return -3.107e-3 * t + 0.4215

def b_term(t):
    return (4.464e-4 * t + 3.426e-2) * t + 1.0

def c_term(p):
    return ((3.989e-15 * p - 6.370e-10) * p + 2.070e-5) * p

def rt35(t):
    """Conductivity ratio rt at S=35 as a function of temperature."""
    return (((1.0031e-9 * t - 6.9698e-7) * t + 1.104259e-4) * t + 2.00564e-2) * t + 0.6766097


def sal_poly(rt, xt):
    """PSS-78 practical salinity from sqrt(Rt) and xt = T - 15."""
    return (
        ((((2.7081 * rt - 7.0261) * rt + 14.0941) * rt + 25.3851) * rt - 0.1692) * rt
        + 0.0080
        + (xt / (1.0 + 0.0162 * xt))
        * (((((-0.0144 * rt + 0.0636) * rt - 0.0375) * rt - 0.0066) * rt - 0.0056) * rt + 0.0005)
    )

def dsal_poly(rt, xt):
    """d(sal_poly)/d(rt). Must stay consistent with sal_poly."""
    return (
        ((((13.5405 * rt - 28.1044) * rt + 42.2823) * rt + 50.7702) * rt - 0.1692)
        + (xt / (1.0 + 0.0162 * xt))
        * ((((-0.0720 * rt + 0.2544) * rt - 0.1125) * rt - 0.0132) * rt - 0.0056)
    )


class ConductivityInversion(NamedTuple):
    conductivity: float
    iterations: int
    residual: float  # |sal_poly(rt) - target| after the last step


def salinity(conductivity, temperature, pressure):
    """Practical salinity (PSS-78) from conductivity ratio, T [°C] and P [dbar]."""
    if conductivity <= MIN_CONDUCTIVITY_RATIO:
        return np.float64(0.0)

    # float64 so a vanishing denominator gives inf/nan instead of raising
    conductivity = np.float64(conductivity)
    temperature = np.float64(temperature)
    xt = temperature - REFERENCE_TEMPERATURE

    # 1) remove the pressure and temperature dependence of the ratio
    rt = conductivity / (
        rt35(temperature)
        * (1.0 + c_term(pressure) / (b_term(temperature) + a_term(temperature) * conductivity))
    )
    rt = np.sqrt(abs(rt))

    # 2) salinity polynomial
    return sal_poly(rt, xt)


def invert_conductivity(salinity, temperature, pressure):
    """
    Conductivity ratio for a given salinity, T [°C] and P [dbar], with the
    Newton iteration count and final salinity residual.

    The iteration is capped at NEWTON_MAX_ITER; past the cap the last
    estimate is returned as is.
    """
    if salinity <= MIN_SALINITY:
        return ConductivityInversion(np.float64(0.0), 0, np.float64(0.0))

    temperature = np.float64(temperature)
    xt = temperature - REFERENCE_TEMPERATURE

    # Newton-Raphson on rt, starting from the S=35 scaling
    rt = np.sqrt(salinity / REFERENCE_SALINITY)
    si = sal_poly(rt, xt)
    for n in range(1, NEWTON_MAX_ITER + 1):
        rt = rt + (salinity - si) / dsal_poly(rt, xt)
        si = sal_poly(rt, xt)
        dels = abs(si - salinity)
        if dels <= NEWTON_SALINITY_TOL:
            break

    if dels > NEWTON_SALINITY_TOL:
        logger.debug(
            "conductivity: no convergence after %d iterations (S=%g, T=%g, P=%g, residual=%g)",
            n, salinity, temperature, pressure, dels,
        )

    # Solve the quadratic in R given Rt, A, B, C
    a = a_term(temperature)
    b = b_term(temperature)
    rtt = rt35(temperature) * rt * rt
    cp = rtt * (c_term(pressure) + b)
    bt = b - rtt * a
    r = np.sqrt(abs(bt * bt + 4.0 * a * cp)) - bt

    return ConductivityInversion(0.5 * r / a, n, dels)


def conductivity(salinity, temperature, pressure):
    """Conductivity ratio from practical salinity, T [°C] and P [dbar]."""
    return invert_conductivity(salinity, temperature, pressure).conductivity
