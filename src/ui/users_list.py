import threading
from typing import Callable, List, Optional
import streamlit as st
from models.models import User
from utils.constants import Keys, Label


class UsersList:
    """Horizontal row of followable users."""

    def __init__(self):
        self._lock = threading.Lock()
        self._items: List[User] = []

    @property
    def items(self) -> List[User]:
        with self._lock:
            return list(self._items)

    def set_items(self, users: List[User]):
        with self._lock:
            self._items = list(users)

    def render(
        self, active_user_id: Optional[str], on_select: Callable[[str], None]
    ):
        users = self.items
        if not users:
            st.caption(Label.NO_USERS.value)
            return
        columns = st.columns(len(users))
        for column, user in zip(columns, users):
            column.button(
                user.user_name or user.id,
                key=f"{Keys.USER_BUTTON_PREFIX.value}{user.id}",
                type="primary" if user.id == active_user_id else "secondary",
                on_click=on_select,
                args=(user.id,),
                width="stretch",
            )
