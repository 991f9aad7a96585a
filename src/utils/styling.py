import streamlit as st

OVERLAY_CUSTOM_CSS = """
<style>
/* Keep the users row on one line and let it scroll sideways */
div[data-testid="stHorizontalBlock"]:first-of-type {
    overflow-x: auto;
    flex-wrap: nowrap;
}

div[data-testid="stHorizontalBlock"]:first-of-type div[data-testid="stColumn"] {
    min-width: 120px;
}

div[data-testid="stHorizontalBlock"] .stButton button {
    border-radius: 999px;
    white-space: nowrap;
}

iframe[title="streamlit_folium.st_folium"] {
    border-radius: 8px;
}
</style>
"""


def load_custom_css():
    st.markdown(OVERLAY_CUSTOM_CSS, unsafe_allow_html=True)
