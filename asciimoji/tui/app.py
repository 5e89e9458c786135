# tui/app.py - terminal lookup surface
# -------------------------------------------------------
# Wraps the search controller in a small textual app:
#  - live results as you type (stale list stays visible while searching)
#  - enter runs the default action, ctrl+y copies, ctrl+p pastes
#  - search failures show up as error toasts
# Paste closes the app and hands the entry back to the caller, which
# writes it to stdout once the terminal is released.
# -------------------------------------------------------

from __future__ import annotations

from rich.markup import escape
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Input, OptionList, Static
from textual.widgets.option_list import Option

from asciimoji.config import LookupSettings
from asciimoji.domain.models import Entry, SearchState
from asciimoji.services.dataset import DatasetProvider
from asciimoji.services.search import SearchController
from asciimoji.services.selection import SelectionAction, SelectionService


class ToastNotifier:
    """Routes search failures to textual's toast notifications."""

    def __init__(self, app: App) -> None:
        self._app = app

    def notify_failure(self, title: str, message: str) -> None:
        self._app.notify(escape(message), title=title, severity="error")


class ResultsHeader(Static):
    """Section title with the result count and a searching marker."""

    def show(self, state: SearchState) -> None:
        label = f"[b]Results[/b]  [dim]{len(state.results)}[/dim]"
        if state.is_loading:
            label += "  [i]searching...[/i]"
        self.update(label)


class LookupApp(App[Entry | None]):
    """Search box on top, matching entries below."""

    TITLE = "asciimoji"
    ENABLE_COMMAND_PALETTE = False
    CSS = """
    #query { dock: top; }
    #results-header { height: 1; padding: 0 1; }
    #results { height: 1fr; }
    """

    BINDINGS = [
        Binding("ctrl+p", "select('paste')", "Paste", priority=True),
        Binding("ctrl+y", "select('copy')", "Copy", priority=True),
        Binding("down", "move(1)", "Next", show=False),
        Binding("up", "move(-1)", "Previous", show=False),
        Binding("escape", "quit", "Close"),
    ]

    def __init__(
        self,
        provider: DatasetProvider,
        settings: LookupSettings,
        *,
        selection: SelectionService | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings
        self.selection = selection or SelectionService(clipboard=self)
        self.controller = SearchController(
            provider,
            ToastNotifier(self),
            delay_seconds=settings.search.delay_seconds,
        )
        self._results: tuple[Entry, ...] = ()

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder=self.settings.ui.placeholder, id="query")
        yield ResultsHeader(id="results-header")
        yield OptionList(id="results")
        yield Footer()

    def on_mount(self) -> None:
        self.controller.on_state_change(self.render_state)
        self.controller.initialize()
        self.query_one("#query", Input).focus()

    def on_unmount(self) -> None:
        self.controller.teardown()

    def on_input_changed(self, event: Input.Changed) -> None:
        if not self.controller.initialized:
            return
        self.controller.submit_query(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.action_select(self.settings.ui.default_action)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.action_select(self.settings.ui.default_action)

    # Reactive state --------------------------------------------------------
    def render_state(self, state: SearchState) -> None:
        self.query_one(ResultsHeader).show(state)
        if state.results is self._results:
            return
        self._results = state.results
        options = self.query_one(OptionList)
        options.clear_options()
        options.add_options(
            [
                Option(
                    Text.assemble((entry.rendered_text, "bold"), "  ", (entry.keyword, "dim")),
                    id=entry.keyword,
                )
                for entry in state.results
            ]
        )
        if state.results:
            options.highlighted = 0

    def highlighted_entry(self) -> Entry | None:
        index = self.query_one(OptionList).highlighted
        if index is None or not 0 <= index < len(self._results):
            return None
        return self._results[index]

    # Actions ---------------------------------------------------------------
    def action_move(self, step: int) -> None:
        options = self.query_one(OptionList)
        if not self._results:
            return
        current = options.highlighted or 0
        options.highlighted = max(0, min(len(self._results) - 1, current + step))

    def action_select(self, action: SelectionAction) -> None:
        entry = self.highlighted_entry()
        if entry is None:
            self.bell()
            return
        if action == "paste":
            self.exit(entry)
            return

        self.selection.copy(entry)
        self.notify(escape(entry.rendered_text), title="Copied to clipboard")
        if self.settings.ui.close_on_select:
            self.exit(None)
        else:
            self.query_one("#query", Input).value = ""


__all__ = ["LookupApp", "ToastNotifier"]
