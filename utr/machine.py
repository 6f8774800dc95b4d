"""Interaction state machine for the player search client.

The machine owns the current state, the search field and the two list
widgets. It consumes key, resize and query-completion events and returns
the queries that should be issued next. It never performs I/O itself.
"""

import logging
from typing import Optional

from .constants import (
    DEFAULT_CHAR_LIMIT,
    DEFAULT_LIST_HEIGHT,
    DEFAULT_LIST_WIDTH,
    EVENT_ROW_SPACING,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_QUIT,
    LIST_CHROME_LINES,
    NO_PLAYER_FOUND,
    SEARCH_PLACEHOLDER,
)
from .formatting import ListRow, Theme, row_height
from .models import (
    AwaitingProfile,
    AwaitingResults,
    AwaitingSearchResults,
    FetchProfile,
    FetchResults,
    KeyPress,
    MachineEvent,
    ProfileCompleted,
    Query,
    QueryFailed,
    QuitRequested,
    Resize,
    ResultsCompleted,
    SearchCompleted,
    Searching,
    SearchPlayers,
    SelectingPlayer,
    State,
    Terminated,
    ViewingResults,
)
from .schemas import Player
from .widgets import ListModel, TextField

logger = logging.getLogger('utr.machine')

COMPLETIONS = (SearchCompleted, ProfileCompleted, ResultsCompleted, QueryFailed)


class InteractionMachine:
    """
    Drives search -> disambiguation -> profile -> results browsing.

    Every state change takes a new step id. Queries carry the step of the
    state that issued them, and a completion is only applied while the
    machine is still on that step; anything else is a stale answer from an
    abandoned step and is dropped.
    """

    def __init__(
        self,
        width: int = DEFAULT_LIST_WIDTH,
        height: int = DEFAULT_LIST_HEIGHT,
        char_limit: int = DEFAULT_CHAR_LIMIT,
        theme: Optional[Theme] = None,
    ):
        self.theme = theme or Theme()
        self.search_field = TextField(placeholder=SEARCH_PLACEHOLDER, char_limit=char_limit)
        self.player_list = ListModel(width=width, height=height, measure=self._measure_row)
        self.event_list = ListModel(
            width=width,
            height=height,
            spacing=EVENT_ROW_SPACING,
            measure=self._measure_row,
        )
        self._step = 0
        self.state: State = Searching(step=self._step)

    @property
    def finished(self) -> bool:
        return isinstance(self.state, Terminated)

    @property
    def tracked_player_name(self) -> str:
        """Full name of the player whose history is loaded or loading."""
        state = self.state
        if isinstance(state, (AwaitingResults, ViewingResults)):
            return state.profile.full_name or state.player.display_name
        if isinstance(state, AwaitingProfile):
            return state.player.display_name
        return ''

    def _measure_row(self, row: ListRow, index: int, focused: bool, width: int) -> int:
        return row_height(row, index, focused, width, self.theme, self.tracked_player_name)

    def _next_step(self) -> int:
        self._step += 1
        return self._step

    # -------------------------------------------------------------------------
    # Entry points
    # -------------------------------------------------------------------------

    def start(self, initial_query: Optional[str] = None) -> list[Query]:
        """Pre-fill the search field and, if it is not blank, search right away."""
        if initial_query:
            self.search_field.set_value(initial_query)
            return self._submit_search()
        return []

    def handle(self, event: MachineEvent) -> list[Query]:
        """Apply one event and return the queries to issue."""
        if self.finished:
            return []

        if isinstance(event, QuitRequested):
            self._terminate()
            return []

        if isinstance(event, Resize):
            self._resize(event.width, event.height)
            return []

        if isinstance(event, KeyPress):
            return self._handle_key(event)

        if isinstance(event, COMPLETIONS):
            if event.step != self.state.step:
                logger.debug(
                    f'Discarding stale {type(event).__name__} for step {event.step} '
                    f'(current step {self.state.step})'
                )
                return []
            return self._handle_completion(event)

        logger.warning(f'Ignoring unknown event: {event!r}')
        return []

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def _resize(self, width: int, height: int) -> None:
        list_height = max(1, height - LIST_CHROME_LINES)
        self.player_list.set_size(width, list_height)
        self.event_list.set_size(width, list_height)

    def _handle_key(self, event: KeyPress) -> list[Query]:
        key = event.key
        state = self.state

        if key == KEY_QUIT:
            self._terminate()
            return []

        if isinstance(state, Searching):
            if key == KEY_ENTER:
                return self._submit_search()
            if key == KEY_ESCAPE:
                self._terminate()
                return []
            self.search_field.handle_key(key, event.character)
            return []

        if isinstance(state, SelectingPlayer):
            if key == KEY_ENTER:
                player = self.player_list.selected()
                if player is None:
                    return []
                return self._request_profile(player, state.players)
            if key == KEY_ESCAPE:
                self._back_to_search()
                return []
            self.player_list.handle_key(key)
            return []

        if isinstance(state, ViewingResults):
            if key == KEY_ESCAPE:
                self._back_to_candidates(state.players)
                return []
            self.event_list.handle_key(key)
            return []

        # Awaiting a response: only backing out does anything
        if key == KEY_ESCAPE:
            self._back_out_of_wait()
        return []

    # -------------------------------------------------------------------------
    # Completions
    # -------------------------------------------------------------------------

    def _handle_completion(self, event) -> list[Query]:
        state = self.state

        if isinstance(event, QueryFailed):
            logger.warning(f'{type(event.query).__name__} failed: {event.error}')
            self._back_out_of_wait(message=f'Request failed: {event.error}')
            return []

        if isinstance(event, SearchCompleted) and isinstance(state, AwaitingSearchResults):
            return self._apply_search_result(event)

        if isinstance(event, ProfileCompleted) and isinstance(state, AwaitingProfile):
            step = self._next_step()
            self.state = AwaitingResults(
                step=step,
                player=state.player,
                profile=event.profile,
                players=state.players,
            )
            return [FetchResults(step=step, player_id=state.player.id)]

        if isinstance(event, ResultsCompleted) and isinstance(state, AwaitingResults):
            self.event_list.set_items(event.results.events)
            self.state = ViewingResults(
                step=self._next_step(),
                player=state.player,
                profile=state.profile,
                results=event.results,
                players=state.players,
            )
            logger.info(
                f'Loaded {len(event.results.events)} events for {self.tracked_player_name}'
            )
            return []

        logger.warning(f'{type(event).__name__} does not apply to {type(state).__name__}')
        return []

    def _apply_search_result(self, event: SearchCompleted) -> list[Query]:
        result = event.result
        players = tuple(result.players)
        logger.info(f'Search returned {result.total} players ({len(players)} hits)')

        if result.total == 0 or not players:
            self.state = Searching(step=self._next_step(), message=NO_PLAYER_FOUND)
            return []

        if result.total == 1:
            return self._request_profile(players[0], players[:1])

        self.player_list.set_items(players)
        self.state = SelectingPlayer(step=self._next_step(), players=players)
        return []

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def _submit_search(self) -> list[Query]:
        query = self.search_field.value.strip()
        if not query:
            return []
        self.player_list.clear()
        self.event_list.clear()
        step = self._next_step()
        self.state = AwaitingSearchResults(step=step, query=query)
        return [SearchPlayers(step=step, name=query)]

    def _request_profile(self, player: Player, players: tuple[Player, ...]) -> list[Query]:
        self.event_list.clear()
        step = self._next_step()
        self.state = AwaitingProfile(step=step, player=player, players=players)
        return [FetchProfile(step=step, player_id=player.id)]

    def _back_to_search(self, message: str = '') -> None:
        self.player_list.clear()
        self.event_list.clear()
        self.state = Searching(step=self._next_step(), message=message)

    def _back_to_candidates(self, players: tuple[Player, ...], message: str = '') -> None:
        """Return to player selection when there was a choice, else to the search prompt."""
        self.event_list.clear()
        if len(players) > 1:
            if self.player_list.items != list(players):
                self.player_list.set_items(players)
            self.state = SelectingPlayer(step=self._next_step(), players=players, message=message)
        else:
            self._back_to_search(message)

    def _back_out_of_wait(self, message: str = '') -> None:
        state = self.state
        if isinstance(state, AwaitingSearchResults):
            self._back_to_search(message)
        elif isinstance(state, (AwaitingProfile, AwaitingResults)):
            self._back_to_candidates(state.players, message)

    def _terminate(self) -> None:
        logger.info('Quitting')
        self.state = Terminated(step=self._next_step())
