from .constants import RK_FINAL_DIVISOR, RK_Q2, RK_Q3, RK_STAGE2, RK_STAGE3


def adiabatic_temperature_gradient(salinity, temperature, pressure):
    """
    Adiabatic lapse rate (°C/dbar), Bryden (1973) as given in UNESCO (1983).
    Pressure in dbar.
    """
    T, P = temperature, pressure
    DS = salinity - 35.0

    return (
        (((-2.1687e-16 * T + 1.8676e-14) * T - 4.6206e-13) * P
         + ((2.7759e-12 * T - 1.1351e-10) * DS
            + ((-5.4481e-14 * T + 8.733e-12) * T - 6.7795e-10) * T + 1.8741e-8)) * P
        + (-4.2393e-8 * T + 1.8932e-6) * DS
        + ((6.6228e-10 * T - 6.836e-8) * T + 8.5258e-6) * T + 3.5803e-5
    )


def potential_temperature(salinity, temperature, pressure, reference_pressure):
    """
    Potential temperature (°C) of a parcel moved adiabatically from pressure to
    reference_pressure (both dbar).

    Integrates the adiabatic gradient over the whole interval with a single
    four-stage Runge-Kutta (Gill) step, so the gradient is evaluated exactly
    four times whatever the interval.
    """
    S, t, p = salinity, temperature, pressure
    h = reference_pressure - p

    xk = h * adiabatic_temperature_gradient(S, t, p)
    t = t + 0.5 * xk
    q = xk
    p = p + 0.5 * h

    xk = h * adiabatic_temperature_gradient(S, t, p)
    t = t + RK_STAGE2 * (xk - q)
    q = RK_Q2[0] * xk + RK_Q2[1] * q

    xk = h * adiabatic_temperature_gradient(S, t, p)
    t = t + RK_STAGE3 * (xk - q)
    q = RK_Q3[0] * xk + RK_Q3[1] * q
    p = p + 0.5 * h

    xk = h * adiabatic_temperature_gradient(S, t, p)
    return t + (xk - 2.0 * q) / RK_FINAL_DIVISOR
