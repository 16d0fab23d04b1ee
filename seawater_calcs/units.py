from .constants import C3515, DBAR_PER_BAR


def fahrenheit_to_celsius(F):
    return (F - 32.0) * (5.0 / 9.0)

def bar_to_dbar(bar):
    return bar * DBAR_PER_BAR

def psi_to_dbar(psi):
    """Convert pressure from psi to decibars (1 psi = 6894.757 Pa)."""
    return psi * 0.6894757

def atm_to_dbar(atm):
    """Convert pressure from atm to decibars (1 atm = 101 325 Pa)."""
    return atm * 10.1325

PRESSURE_TO_DBAR = {
    'dbar': lambda p: p,
    'bar':  bar_to_dbar,
    'psi':  psi_to_dbar,
    'atm':  atm_to_dbar,
}

def pressure_to_dbar(value, unit):
    """Convert a sea pressure in the given unit to decibars."""
    try:
        convert = PRESSURE_TO_DBAR[unit]
    except KeyError:
        raise ValueError(f"unknown pressure unit {unit!r}; expected one of {sorted(PRESSURE_TO_DBAR)}") from None
    return convert(value)

def conductivity_ratio(conductivity_mS_cm):
    """
    Conductivity ratio R from an in-situ conductivity in mS/cm,
    relative to standard seawater C(35, 15, 0) = 42.914 mS/cm.
    """
    return conductivity_mS_cm / C3515
