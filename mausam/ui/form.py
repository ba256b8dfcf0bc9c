import streamlit as st

from mausam.lookup import handle_submit
from mausam.messages import message
from mausam.ui.cards import status_line


def run_lookup(city: str, status_slot, language: str, lookup=None) -> dict:
    """
    Run one form submission, showing the loading status in ``status_slot``
    and the loading label on a spinner while the lookup is in flight.
    """
    lookup = lookup or handle_submit
    if not (city or "").strip():
        return lookup(city, language=language)
    with status_slot.container():
        status_line(message("status_loading", language))
    with st.spinner(message("button_loading", language)):
        return lookup(city, language=language)
