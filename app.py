import streamlit as st

from mausam.config import LANGUAGE
from mausam.messages import message
from mausam.ui.apply_styles import apply_styles
from mausam.ui.cards import advice_card, metric_card, status_line
from mausam.ui.form import run_lookup

st.set_page_config(page_title=message("title", LANGUAGE), layout="centered")
apply_styles()

st.title(message("title", LANGUAGE))

with st.form("weather-form"):
    city = st.text_input(
        message("city_label", LANGUAGE),
        placeholder=message("city_placeholder", LANGUAGE),
        key="city-input",
    )
    submitted = st.form_submit_button(message("button", LANGUAGE))

status_slot = st.empty()

if submitted:
    result = run_lookup(city, status_slot, LANGUAGE)

    with status_slot.container():
        status_line(result["status"], ok=result["ok"])

    card = result["card"]
    if result["ok"] and card:
        temp_col, hum_col, rain_col = st.columns(3)
        with temp_col:
            metric_card("🌡️", message("label_temperature", LANGUAGE), card["temperature"])
        with hum_col:
            metric_card("💧", message("label_humidity", LANGUAGE), card["humidity"])
        with rain_col:
            metric_card("☔", message("label_rain_chance", LANGUAGE), card["rain_chance"])
        advice_card(message("label_advice", LANGUAGE), card["advice"])
