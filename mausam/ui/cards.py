import html

import streamlit as st


def metric_card(icon: str, label: str, value: str, subvalue: str | None = None):
    sub_html = f"<div class=\"metric-sub\">{html.escape(subvalue)}</div>" if subvalue else ""
    st.markdown(
        f"""
        <div class="card metric-card">
          <div class="metric-icon">{icon}</div>
          <div class="metric-body">
            <div class="metric-label">{html.escape(label)}</div>
            <div class="metric-value">{html.escape(value)}</div>
            {sub_html}
          </div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def advice_card(title: str, text: str):
    st.markdown(
        f"""
        <div class="card advice-card">
          <div class="section-title">{html.escape(title)}</div>
          <p class="advice-text">{html.escape(text)}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def status_line(text: str, ok: bool | None = None):
    state = "ok" if ok else ("bad" if ok is False else "idle")
    st.markdown(
        f"<div class=\"status-message status-{state}\" role=\"status\">{html.escape(text)}</div>",
        unsafe_allow_html=True,
    )
