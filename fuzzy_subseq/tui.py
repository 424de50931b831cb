from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.events import Key, Paste, Resize
from textual.widgets import OptionList, Static

from fuzzy_subseq.models import FilterRow, ViewMode
from fuzzy_subseq.ranking import filter_candidates
from fuzzy_subseq.rendering import render_row


class FuzzyFilterTui(App[str | None]):
    CSS_PATH = "selection_list.tcss"
    ENABLE_COMMAND_PALETTE = False
    BINDINGS = [
        Binding("f", "filter_key_f", "Filter"),
        Binding("slash", "filter_key_slash", show=False),
        Binding("escape", "escape", "Back", show=False),
        Binding("q", "quit_or_type_q", "Quit"),
        Binding("ctrl+c", "quit", show=False),
    ]

    def __init__(
        self,
        *,
        candidates: Iterable[str] = (),
        initial_query: str = "",
        show_scores: bool = False,
    ) -> None:
        super().__init__()
        self.theme = "rose-pine"
        self._all_candidates: list[str] = list(candidates)
        self._visible_rows: list[FilterRow] = []
        self._search_query = initial_query
        self._mode: ViewMode = "filter" if initial_query else "browse"
        self._show_scores = show_scores

    @property
    def _filter_mode(self) -> bool:
        return self._mode == "filter"

    def compose(self) -> ComposeResult:
        with Vertical(id="sidebar"):
            yield OptionList(id="sidebar-list")
            yield Static("", id="status")

    async def on_mount(self) -> None:
        self._filter_candidates()
        self._update_filter_indicator()
        self.query_one("#sidebar-list", OptionList).focus()

    def _render_candidate_options(self, *, preserve_position: bool = False) -> None:
        candidate_list = self.query_one("#sidebar-list", OptionList)
        previous_highlight = candidate_list.highlighted
        previous_scroll_y = candidate_list.scroll_y
        candidate_list.clear_options()
        if self._visible_rows:
            candidate_list.add_options(
                [
                    render_row(row, show_score=self._show_scores)
                    for row in self._visible_rows
                ]
            )
            if preserve_position and previous_highlight is not None:
                candidate_list.highlighted = min(
                    previous_highlight, len(self._visible_rows) - 1
                )
                candidate_list.scroll_to(y=previous_scroll_y, animate=False)
            else:
                candidate_list.action_first()
            return
        candidate_list.add_option("No candidates found")

    def _update_selection_status(self) -> None:
        self.query_one("#status", Static).update(
            f"{len(self._visible_rows):,} of {len(self._all_candidates):,} "
            "candidates match."
        )

    def _filter_candidates(self) -> None:
        query = self._search_query if self._filter_mode else ""
        self._visible_rows = filter_candidates(query, self._all_candidates)
        self._render_candidate_options()
        self._update_selection_status()

    def _filter_indicator_text(self) -> Text:
        indicator = Text()
        if self._filter_mode:
            indicator.append("f", style="bold red")
            indicator.append(f" {self._search_query}_", style="bold white")
        else:
            indicator.append("filter", style="dim")
            indicator.stylize("bold red", 0, 1)
        return indicator

    def _update_filter_indicator(self) -> None:
        sidebar = self.query_one("#sidebar", Vertical)
        sidebar.styles.border_title_align = "left"
        sidebar.border_title = self._filter_indicator_text()

    def _set_filter_mode(self, enabled: bool, *, reset_query: bool) -> None:
        self._mode = "filter" if enabled else "browse"
        if reset_query:
            self._search_query = ""
        self._filter_candidates()
        self._update_filter_indicator()

    def _append_filter_char(self, char: str) -> None:
        self._search_query += char
        self._filter_candidates()
        self._update_filter_indicator()

    def action_filter_key_f(self) -> None:
        if not self._filter_mode:
            self._set_filter_mode(True, reset_query=True)
            return

        self._append_filter_char("f")

    def action_filter_key_slash(self) -> None:
        if not self._filter_mode:
            self._set_filter_mode(True, reset_query=True)
            return

        self._append_filter_char("/")

    def action_quit_or_type_q(self) -> None:
        if self._filter_mode:
            self._append_filter_char("q")
            return
        self.exit(None)

    def action_escape(self) -> None:
        if self._filter_mode:
            self._set_filter_mode(False, reset_query=True)
            return
        self.exit(None)

    def on_key(self, event: Key) -> None:
        if not self._filter_mode:
            return

        # These keys are handled by explicit bindings to avoid duplicate input.
        if event.key in {"f", "slash", "q"}:
            return

        if event.key == "backspace":
            self._search_query = self._search_query[:-1]
            self._filter_candidates()
            self._update_filter_indicator()
            event.stop()
            return

        if event.key == "space":
            self._append_filter_char(" ")
            event.stop()
            return

        if event.character and event.character.isprintable():
            self._append_filter_char(event.character)
            event.stop()
            return

    def on_paste(self, event: Paste) -> None:
        if not self._filter_mode:
            return
        sanitized = event.text.replace("\r", "").replace("\n", "")
        if not sanitized:
            return
        self._append_filter_char(sanitized)
        event.stop()

    def on_resize(self, event: Resize) -> None:
        del event
        self.call_after_refresh(self._refresh_after_resize)

    def _refresh_after_resize(self) -> None:
        self._update_filter_indicator()
        self._render_candidate_options(preserve_position=True)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_list.id != "sidebar-list":
            return
        if not 0 <= event.option_index < len(self._visible_rows):
            return
        self.exit(self._visible_rows[event.option_index].candidate)
