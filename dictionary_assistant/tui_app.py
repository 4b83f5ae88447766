# tui_app.py - Dictionary Assistant TUI Application
# -------------------------------------------------------
# Text based terminal UI over the lookup stack.
# Features:
#  - Live autocomplete as you type
#  - Enter looks up the typed word, TAB takes the top suggestion
#  - Meaning + usage panel, latency readout
# -------------------------------------------------------

from __future__ import annotations

import time
from typing import List, Optional

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from dictionary_assistant.assistant import DictionaryAssistant
from dictionary_assistant.core.errors import DictionaryError
from dictionary_assistant.core.protocols import LookupResult, is_not_found


class SuggestionPanel(Static):
    """
    Right-side suggestion panel, numbered so the top hit is obvious.
    """
    def update_suggestions(self, words: List[str], limit: int = 10):
        if not words:
            self.update("[dim]No suggestions[/dim]")
            return
        lines = [f"[b]{i}[/b] • [cyan]{escape(w)}[/cyan]" for i, w in enumerate(words[:limit], 1)]
        if len(words) > limit:
            lines.append(f"[dim]... {len(words) - limit} more[/dim]")
        self.update("\n".join(lines))


class MeaningView(Static):
    """Shows the last looked-up word's meaning and usages."""
    def show_result(self, word: str, result: LookupResult):
        if is_not_found(result):
            self.update(f"[yellow]{escape(word)}: {escape(result['error'])}[/yellow]")
            return
        lines = [f"[b]{escape(word)}[/b]", escape(result["meaning"])]
        for usage in (result["usage1"], result["usage2"]):
            if usage:
                lines.append(f"[dim]•[/dim] [i]{escape(usage)}[/i]")
        self.update("\n".join(lines))


class TypingLatency(Static):
    """
    Bottom-left readout showing how long the last query took.
    """
    def set_latency(self, seconds: float):
        self.update(f"[dim]Latency:[/dim] {seconds * 1000:.2f}ms")


# Main Application -----------------------------------------------------------------
class DictionaryTUI(App):
    """
    Textual app over a DictionaryAssistant.
    Architecture:
     - input events to the assistant
     - assistant results to reactive state
     - reactive state to widget updates
    """
    CSS = """
    #left { width: 2fr; }
    #right { width: 1fr; border-left: solid $accent; padding: 0 1; }
    #meaning { padding: 1; }
    #bottom { height: 1; }
    """

    BINDINGS = [
        Binding("tab", "accept_top", "Accept Top Suggestion", priority=True),
        Binding("ctrl+l", "clear", "Clear"),
    ]

    suggestions = reactive(list, init=False)  # most recent autocomplete results
    latency = reactive(0.0, init=False)  # last query time in seconds

    def __init__(self, assistant: DictionaryAssistant, max_suggestions: int = 10):
        super().__init__()
        self.assistant = assistant
        self.max_suggestions = max_suggestions
        self.last_result: Optional[LookupResult] = None

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Container(id="left"):
                yield Input(placeholder="Type a word…", id="word_input")
                yield MeaningView(id="meaning")
            with Container(id="right"):
                yield SuggestionPanel(id="suggestions")
        with Horizontal(id="bottom"):
            yield TypingLatency(id="latency")
            yield Static(id="status")
        yield Footer()

    def on_mount(self):
        if not self.assistant.supports_suggest:
            self.query_one("#status", Static).update("[yellow]store mode: autocomplete off[/yellow]")

    # typing: refresh suggestions on every change
    def on_input_changed(self, event: Input.Changed) -> None:
        fragment = event.value
        if not fragment.strip() or not self.assistant.supports_suggest:
            self.suggestions = []
            return
        start = time.perf_counter()
        try:
            words = self.assistant.suggest(fragment)
        except DictionaryError as e:
            self.query_one("#status", Static).update(f"[red]{escape(str(e))}[/red]")
            words = []
        self.latency = time.perf_counter() - start
        self.suggestions = words

    # enter: look the word up
    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.lookup(event.value)

    def lookup(self, word: str) -> None:
        if not word.strip():
            return
        start = time.perf_counter()
        try:
            result = self.assistant.lookup(word)
        except DictionaryError as e:
            self.query_one("#status", Static).update(f"[red]{escape(str(e))}[/red]")
            return
        self.latency = time.perf_counter() - start
        self.last_result = result
        self.query_one(MeaningView).show_result(word.strip(), result)

    # Reactive state (watcher functions) ---------------------------------------
    def watch_suggestions(self, suggestions):
        self.query_one(SuggestionPanel).update_suggestions(suggestions, self.max_suggestions)

    def watch_latency(self, latency):
        self.query_one(TypingLatency).set_latency(latency)

    # Actions ----------------------------------------------------------------------
    def action_accept_top(self):
        """TAB = fill in and look up the top suggestion."""
        if not self.suggestions:
            return
        top = self.suggestions[0]
        self.query_one(Input).value = top
        self.lookup(top)

    def action_clear(self):
        self.query_one(Input).value = ""
        self.suggestions = []
        self.query_one(MeaningView).update("")
