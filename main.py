import logging

import streamlit as st
import numpy as np
import pandas as pd
import plotly.express as px

from seawater_calcs.salinity import salinity, invert_conductivity
from seawater_calcs.water_properties import specific_volume_anomaly, freezing_point, specific_heat, sound_speed
from seawater_calcs.adiabatic import adiabatic_temperature_gradient, potential_temperature
from seawater_calcs.depth import depth
from seawater_calcs.units import fahrenheit_to_celsius, pressure_to_dbar, conductivity_ratio, PRESSURE_TO_DBAR

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)


# ------------------------------------ Streamlit Application ------------------------------------
st.set_page_config('Seawater Properties Calculator', page_icon="🌊", layout='wide')
st.title("Seawater Properties Calculator (UNESCO 1983)")

with st.expander("Input Parameters", expanded=True):
    st.info("Default values: standard seawater at 15 °C, surface")
    col1, col2 = st.columns(2)

    # value
    with col1:
        temp_input = st.number_input("Temperature", value=15.0)
        press_input = st.number_input("Pressure", value=0.0, min_value=0.0)
        sal_mode = st.radio("Salinity from", ["Practical salinity", "Conductivity"], horizontal=True)
        if sal_mode == "Practical salinity":
            sal_input = st.number_input("Salinity (PSS-78)", value=35.0, min_value=0.0)
        else:
            cond_input = st.number_input("Conductivity (mS/cm)", value=42.914, min_value=0.0)

    # unit of measure
    with col2:
        temp_unit = st.selectbox("Temperature unit", ["°C", "°F"], index=0)
        press_unit = st.selectbox("Pressure unit", list(PRESSURE_TO_DBAR), index=0)
        latitude = st.number_input("Latitude (°)", value=30.0, min_value=-90.0, max_value=90.0)
        ref_press = st.number_input("Reference pressure (dbar)", value=0.0, min_value=0.0)

# Temp Convert
Temp_C = fahrenheit_to_celsius(temp_input) if temp_unit == "°F" else temp_input

# Pressure
Pressure_dbar = pressure_to_dbar(press_input, press_unit)

# Salinity / conductivity pair
if sal_mode == "Practical salinity":
    S = sal_input
    inversion = invert_conductivity(S, Temp_C, Pressure_dbar)
    R = inversion.conductivity
else:
    R = conductivity_ratio(cond_input)
    S = salinity(R, Temp_C, Pressure_dbar)
    inversion = None


if st.button("Calculate"):
    logger.info("Calculating properties for S=%g, T=%g °C, P=%g dbar", S, Temp_C, Pressure_dbar)

    svan     = specific_volume_anomaly(S, Temp_C, Pressure_dbar)
    z        = depth(Pressure_dbar, latitude)
    t_freeze = freezing_point(S, Pressure_dbar)
    cp       = specific_heat(S, Temp_C, Pressure_dbar)
    atg      = adiabatic_temperature_gradient(S, Temp_C, Pressure_dbar)
    theta    = potential_temperature(S, Temp_C, Pressure_dbar, ref_press)
    c_sound  = sound_speed(S, Temp_C, Pressure_dbar)

    results = [S, R, svan.anomaly, svan.sigma, z, t_freeze, cp, atg, theta, c_sound]
    if not np.all(np.isfinite(results)):
        st.error("Inputs are outside the range of the UNESCO formulas (non-finite result).")
        logger.warning("Non-finite result for S=%g, T=%g, P=%g: %s", S, Temp_C, Pressure_dbar, results)

    st.markdown(" # Results💡")

    # Two-column layout
    col1, col2 = st.columns(2)

    with col1:
        st.metric("Practical Salinity (PSS-78)",       f"{S:.6f}")
        st.metric("Conductivity Ratio",                f"{R:.6f}")
        st.metric("Specific Volume Anomaly (1e-8 m³/kg)", f"{svan.anomaly:.6f}")
        st.metric("Density Anomaly σ (kg/m³)",         f"{svan.sigma:.6f}")
        st.metric("Depth (m)",                         f"{z:.3f}")

    with col2:
        st.metric("Freezing Point (°C)",               f"{t_freeze:.6f}")
        st.metric("Specific Heat (J/kg·°C)",           f"{cp:.3f}")
        st.metric("Adiabatic Gradient (°C/dbar)",      f"{atg:.6e}")
        st.metric(f"Potential Temperature @ {ref_press:.0f} dbar (°C)", f"{theta:.6f}")
        st.metric("Sound Speed (m/s)",                 f"{c_sound:.3f}")

    if inversion is not None:
        st.caption(f"Conductivity inversion: {inversion.iterations} Newton iterations, "
                   f"salinity residual {inversion.residual:.2e}")

    # Graphs

    # ----- Profiles vs Pressure --------

    st.markdown("# Graphs 📊")

    pressures = np.linspace(0.0, max(Pressure_dbar, 1000.0), 50)
    df_P = pd.DataFrame({
        "Pressure (dbar)"           : pressures,
        "Sound Speed (m/s)"         : [sound_speed(S, Temp_C, P) for P in pressures],
        "σ (kg/m³)"                 : [specific_volume_anomaly(S, Temp_C, P).sigma for P in pressures],
        "Potential Temperature (°C)": [potential_temperature(S, Temp_C, P, ref_press) for P in pressures],
        })

    fig_c = px.line(df_P, x="Sound Speed (m/s)", y="Pressure (dbar)",
                    title=f"Sound Speed vs Pressure @ {Temp_C:.1f} °C, S = {S:.2f}",
                    markers=True)
    fig_c.update_yaxes(autorange="reversed")
    fig_c.update_traces(line_color = 'orange')
    st.plotly_chart(fig_c)

    fig_sig = px.line(df_P, x="σ (kg/m³)", y="Pressure (dbar)",
                      title=f"Density Anomaly vs Pressure @ {Temp_C:.1f} °C, S = {S:.2f}",
                      markers=True)
    fig_sig.update_yaxes(autorange="reversed")
    fig_sig.update_traces(line_color = 'lightgreen')
    st.plotly_chart(fig_sig)

    # ------- T-S Heat Map of σ -------
    temps = np.linspace(-2.0, 40.0, 22)
    salts = np.linspace(0.0, 42.0, 22)
    data = []

    for T in temps:
        for s in salts:
            data.append({
            "Temperature (°C)": T,
            "Salinity"        : s,
            "Sigma"           : specific_volume_anomaly(s, T, Pressure_dbar).sigma
            })

    df_combined = pd.DataFrame(data)

    pivot_combo = df_combined.pivot(index="Temperature (°C)", columns="Salinity", values="Sigma")

    fig_combo = px.imshow(pivot_combo, aspect='auto', origin='lower',
                          labels={
                                    "x": "Salinity (PSS-78)",
                                    "y": "Temperature (°C)",
                                    "color": "σ (kg/m³)"
                          },
                          title=f"Density Anomaly Heatmap @ {Pressure_dbar:.0f} dbar",
                          color_continuous_scale='Blues')

    st.plotly_chart(fig_combo)
