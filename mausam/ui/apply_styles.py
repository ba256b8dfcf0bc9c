from pathlib import Path

import streamlit as st

from mausam.logs import log


def apply_styles():
    css_path = Path(__file__).resolve().parent / "styles.css"
    try:
        css = css_path.read_text(encoding="utf-8")
    except OSError as exc:
        log(f"styles not loaded: {exc}")
        return
    st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)
