import streamlit as st
from config.config import SETTINGS
from ui.state import ensure_state, get_container
from utils.logging import setup_logging
from utils.styling import load_custom_css


def main():
    st.set_page_config(page_title="HypeMap", layout="wide")
    setup_logging(SETTINGS.log_level)
    ensure_state()
    load_custom_css()
    get_container().map_page().render()


if __name__ == "__main__":
    main()
