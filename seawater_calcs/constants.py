# Domain guards (inclusive): at or below these the result is clamped to 0.0
MIN_CONDUCTIVITY_RATIO = 5e-4
MIN_SALINITY = 0.02

# Newton-Raphson inversion of the PSS-78 salinity polynomial
NEWTON_MAX_ITER = 10
NEWTON_SALINITY_TOL = 1.0e-4

REFERENCE_SALINITY = 35.0   # PSS-78
REFERENCE_TEMPERATURE = 15.0  # °C, conductivity ratio reference

# Standard seawater (S=35, T=15 °C, P=0) conductivity, mS/cm
C3515 = 42.914

# One-atmosphere density of seawater at S=35, T=0 °C, and its anomaly
R3500 = 1028.1063  # kg/m³
DR350 = 28.106331  # kg/m³

# Specific volume anomaly is reported in units of 1e-8 m³/kg
SVAN_SCALE = 1.0e8

DBAR_PER_BAR = 10.0

# Runge-Kutta (Gill) stage weights for potential temperature
RK_STAGE2 = 0.29289322
RK_STAGE3 = 1.707106781
RK_Q2 = (0.58578644, 0.121320344)
RK_Q3 = (3.414213562, -4.121320344)
RK_FINAL_DIVISOR = 0.6
