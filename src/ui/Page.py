from abc import ABC, abstractmethod


class Page(ABC):
    """A Streamlit screen, redrawn on every script run."""

    title: str = ""

    @abstractmethod
    def render(self):
        pass
