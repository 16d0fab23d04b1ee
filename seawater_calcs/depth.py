import numpy as np


def gravity(latitude, pressure=0.0):
    """
    Normal gravity (m/s²) at latitude [deg], Anon (1970) Bulletin Geodesique,
    with the mean free-air correction for pressure [dbar].
    """
    x = np.sin(np.deg2rad(latitude)) ** 2
    return 9.780318 * (1.0 + (5.2788e-3 + 2.36e-5 * x) * x) + 1.092e-6 * pressure


def depth(pressure, latitude):
    """Depth (m) from pressure (dbar), Saunders & Fofonoff (1976)."""
    P = pressure
    # specific volume of a standard ocean (35, 0 °C) integrated over pressure
    geopotential = (((-1.82e-15 * P + 2.279e-10) * P - 2.2512e-5) * P + 9.72659) * P
    return geopotential / gravity(latitude, P)
