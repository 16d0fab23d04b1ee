from typing import NamedTuple

import numpy as np

from .constants import DBAR_PER_BAR, DR350, R3500, SVAN_SCALE


class SpecificVolumeAnomaly(NamedTuple):
    anomaly: float  # 1e-8 m³/kg
    sigma: float    # density anomaly, kg/m³


def specific_volume_anomaly(salinity, temperature, pressure):
    """
    Specific volume anomaly (steric anomaly) and density anomaly of seawater,
    UNESCO (1983) SVAN with the 1980 equation of state.
    Pressure in dbar; returns SpecificVolumeAnomaly(anomaly, sigma).
    """
    S, T = salinity, temperature
    P = pressure / DBAR_PER_BAR  # bars
    SR = np.sqrt(abs(S))

    # pure water density anomaly at atmospheric pressure
    R1 = ((((6.536332e-9 * T - 1.120083e-6) * T + 1.001685e-4) * T
           - 9.095290e-3) * T + 6.793952e-2) * T - 28.263737
    # seawater corrections
    R2 = (((5.3875e-9 * T - 8.2467e-7) * T + 7.6438e-5) * T - 4.0899e-3) * T + 8.24493e-1
    R3 = (-1.6546e-6 * T + 1.0227e-4) * T - 5.72466e-3
    R4 = 4.8314e-4

    # one-atmosphere density anomaly (relative to R3500)
    sig = (R4 * S + R3 * SR + R2) * S + R1

    v350p = 1.0 / R3500
    sva = -sig * v350p / (R3500 + sig)
    sigma = sig + DR350

    if P == 0.0:
        return SpecificVolumeAnomaly(sva * SVAN_SCALE, sigma)

    # secant bulk modulus K(S, T, P) terms
    E = (9.1697e-10 * T + 2.0816e-8) * T - 9.9348e-7
    BW = (5.2787e-8 * T - 6.12293e-6) * T + 3.47718e-5
    B = BW + E * S

    D = 1.91075e-4
    C = (-1.6078e-6 * T - 1.0981e-5) * T + 2.2838e-3
    AW = ((-5.77905e-7 * T + 1.16092e-4) * T + 1.43713e-3) * T - 0.1194975
    A = (D * SR + C) * S + AW

    B1 = (-5.3009e-4 * T + 1.6483e-2) * T + 7.944e-2
    A1 = ((-6.1670e-5 * T + 1.09987e-2) * T - 0.603459) * T + 54.6746
    KW = (((-5.155288e-5 * T + 1.360477e-2) * T - 2.327105) * T + 148.4206) * T - 1930.06
    K0 = (B1 * SR + A1) * S + KW

    # DK = K(S,T,P) - K(35,0,P)
    DK = (B * P + A) * P + K0
    K35 = (5.03217e-5 * P + 3.359406) * P + 21582.27
    gam = P / K35
    pk = 1.0 - gam

    sva = sva * pk + (v350p + sva) * P * DK / (K35 * (K35 + DK))
    v350p = v350p * pk

    # density anomaly: at (35, 0, 0), its pressure variation, and the part
    # carried by the specific volume anomaly
    dr35p = gam / v350p
    dvan = sva / (v350p * (v350p + sva))
    sigma = DR350 + dr35p - dvan

    return SpecificVolumeAnomaly(sva * SVAN_SCALE, sigma)


def freezing_point(salinity, pressure):
    """Freezing point of seawater (°C), Millero (1978). Pressure in dbar."""
    S = salinity
    return (-0.0575 + 1.710523e-3 * np.sqrt(abs(S)) - 2.154996e-4 * S) * S - 7.53e-4 * pressure


def specific_heat(salinity, temperature, pressure):
    """
    Specific heat of seawater at constant pressure, J/(kg·°C).
    Millero et al. (1973) at P=0 plus the UNESCO (1981) pressure terms.
    """
    S, T = salinity, temperature
    P = pressure / DBAR_PER_BAR
    SR = np.sqrt(abs(S))

    # cp at P = 0
    A = (-1.38385e-3 * T + 0.1072763) * T - 7.643575
    B = (5.148e-5 * T - 4.07718e-3) * T + 0.1770383
    C = (((2.093236e-5 * T - 2.654387e-3) * T + 0.1412855) * T - 3.720283) * T + 4217.4
    cp0 = (B * SR + A) * S + C

    # pressure and temperature terms for S = 0
    A = (((1.7168e-8 * T + 2.0357e-6) * T - 3.13885e-4) * T + 1.45747e-2) * T - 0.49592
    B = (((2.2956e-11 * T - 4.0027e-9) * T + 2.87533e-7) * T - 1.08645e-5) * T + 2.4931e-4
    C = ((6.136e-13 * T - 6.5637e-11) * T + 2.6380e-9) * T - 5.422e-8
    cp1 = ((C * P + B) * P + A) * P

    # pressure and temperature terms for S > 0
    A = (((-2.9179e-10 * T + 2.5941e-8) * T + 9.802e-7) * T - 1.28315e-4) * T + 4.9247e-3
    B = (3.122e-8 * T - 1.517e-6) * T - 1.2331e-4
    A = (A + B * SR) * S
    B = ((1.8448e-11 * T - 2.3905e-9) * T + 1.17054e-7) * T - 2.9558e-6
    B = (B + 9.971e-8 * SR) * S
    C = (3.513e-13 * T - 1.7682e-11) * T + 5.540e-10
    C = (C - 1.4300e-12 * T * SR) * S
    cp2 = ((C * P + B) * P + A) * P

    return cp0 + cp1 + cp2


# Sound speed: Chen and Millero (1977)
def sound_speed(salinity, temperature, pressure):
    """Speed of sound in seawater (m/s). Pressure in dbar."""
    S, T = salinity, temperature
    P = pressure / DBAR_PER_BAR
    SR = np.sqrt(abs(S))

    # S**2 term
    D = 1.727e-3 - 7.9836e-6 * P

    # S**3/2 term
    B1 = 7.3637e-5 + 1.7945e-7 * T
    B0 = -1.922e-2 - 4.42e-5 * T
    B = B0 + B1 * P

    # S**1 term
    A3 = (-3.389e-13 * T + 6.649e-12) * T + 1.100e-10
    A2 = ((7.988e-12 * T - 1.6002e-10) * T + 9.1041e-9) * T - 3.9064e-7
    A1 = (((-2.0122e-10 * T + 1.0507e-8) * T - 6.4885e-8) * T - 1.2580e-5) * T + 9.4742e-5
    A0 = (((-3.21e-8 * T + 2.006e-6) * T + 7.164e-5) * T - 1.262e-2) * T + 1.389
    A = ((A3 * P + A2) * P + A1) * P + A0

    # S**0 term
    C3 = (-2.3643e-12 * T + 3.8504e-10) * T - 9.7729e-9
    C2 = (((1.0405e-12 * T - 2.5335e-10) * T + 2.5974e-8) * T - 1.7107e-6) * T + 3.1260e-5
    C1 = (((-6.1185e-10 * T + 1.3621e-7) * T - 8.1788e-6) * T + 6.8982e-4) * T + 0.153563
    C0 = ((((3.1464e-9 * T - 1.47800e-6) * T + 3.3420e-4) * T - 5.80852e-2) * T + 5.03711) * T + 1402.388
    C = ((C3 * P + C2) * P + C1) * P + C0

    return C + (A + B * SR + D * S) * S
