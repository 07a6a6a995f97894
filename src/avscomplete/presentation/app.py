"""
Playground application: a single script line with live completions.
"""

from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Input

from avscomplete.completion.service import CompletionService
from avscomplete.logger import get_logger

from .autocomplete import ScriptAutoComplete

logger = get_logger("playground")


class PlaygroundApp(App):
    """Type a script line and watch the completion dropdown."""

    TITLE = "avscomplete playground"

    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, service: CompletionService, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = service

    def compose(self) -> ComposeResult:
        yield Header()
        script = Input(placeholder='clip = AviSource("movie.avi").', id="script")
        yield script
        yield ScriptAutoComplete(script, self._service)
        yield Footer()

    def on_mount(self) -> None:
        logger.info("Playground mounted with indices {}", self._service.indices.summary())
        self.query_one("#script", Input).focus()
