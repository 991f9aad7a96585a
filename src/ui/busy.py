import streamlit as st
from contextlib import contextmanager


@contextmanager
def busy(text: str):
    """Show a spinner while background work for this run settles."""
    with st.spinner(text):
        yield
