"""Textual front end for the interaction machine."""

import logging
from functools import partial
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from .api_client import UTRClient
from .formatting import Theme
from .machine import InteractionMachine
from .models import KeyPress, MachineEvent, Query, QuitRequested, Resize
from .schemas import AppConfig
from .view import render_view

logger = logging.getLogger('utr.app')


class UTRApp(App):
    """
    Terminal client for searching UTR players and browsing their results.

    Keys and resizes become machine events. Each query the machine asks for
    runs in a thread worker and its completion is fed back on the app's
    event loop, so the machine only ever runs on one thread.
    """

    TITLE = 'UTR Player Search'

    CSS = """
    #body {
        padding: 0 1;
    }
    """

    # Columns taken by the #body padding
    BODY_PADDING_WIDTH = 2

    BINDINGS = [
        Binding('ctrl+c', 'request_quit', 'Quit', show=False, priority=True),
    ]

    def __init__(
        self,
        client: UTRClient,
        config: Optional[AppConfig] = None,
        initial_query: Optional[str] = None,
        row_theme: Optional[Theme] = None,
    ):
        super().__init__()
        config = config or AppConfig()
        self.client = client
        self.row_theme = row_theme or Theme.from_config(config)
        self.machine = InteractionMachine(
            width=config.list_width,
            height=config.list_height,
            char_limit=config.char_limit,
            theme=self.row_theme,
        )
        self.initial_query = initial_query

    def compose(self) -> ComposeResult:
        yield Static(id='body')

    def on_mount(self) -> None:
        self.machine.handle(self._body_resize(self.size.width, self.size.height))
        self._issue(self.machine.start(self.initial_query))
        self._refresh_body()

    def on_resize(self, event: events.Resize) -> None:
        self.feed(self._body_resize(event.size.width, event.size.height))

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self.feed(KeyPress(key=event.key, character=event.character))

    def action_request_quit(self) -> None:
        self.feed(QuitRequested())

    def feed(self, event: MachineEvent) -> None:
        """Apply an event to the machine, then start its queries and redraw."""
        queries = self.machine.handle(event)
        if self.machine.finished:
            self.exit()
            return
        self._issue(queries)
        self._refresh_body()

    def _body_resize(self, width: int, height: int) -> Resize:
        return Resize(width=max(1, width - self.BODY_PADDING_WIDTH), height=height)

    def _issue(self, queries: list[Query]) -> None:
        for query in queries:
            logger.debug(f'Issuing {query}')
            self.run_worker(
                partial(self._run_query, query),
                name=type(query).__name__,
                group='queries',
                thread=True,
                exit_on_error=False,
            )

    def _run_query(self, query: Query) -> None:
        completion = self.client.execute(query)
        self.call_from_thread(self.feed, completion)

    def _refresh_body(self) -> None:
        # Resize can arrive before compose
        for body in self.query('#body').results(Static):
            body.update(render_view(self.machine, self.row_theme))
