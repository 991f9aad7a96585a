import streamlit as st
from projectors.active_user_marker_projector import ActiveUserMarkerProjector
from utils.constants import Keys, Label


@st.dialog(Label.ADD_USER_TITLE.value)
def open_add_user_dialog(projector: ActiveUserMarkerProjector):
    """Collect a username to follow. Either button dismisses the dialog."""
    name = st.text_input(Label.ADD_USER_INPUT.value, key=Keys.ADD_USER_INPUT.value)
    close_col, ok_col = st.columns(2)
    if close_col.button(Label.CLOSE_BUTTON.value, width="stretch"):
        projector.reset_padding()
        st.rerun()
    if ok_col.button(Label.OK_BUTTON.value, type="primary", width="stretch"):
        projector.add_user(name)
        projector.reset_padding()
        st.rerun()
