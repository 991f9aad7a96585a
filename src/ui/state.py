import streamlit as st
from di.container import Container


def ensure_state():
    """Ensure the session has its own container, so the overlay survives reruns."""
    st.session_state.setdefault("container", Container())


def get_container() -> Container:
    return st.session_state["container"]
