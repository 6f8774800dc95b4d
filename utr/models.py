"""Data models for the interaction state machine.

States, outgoing queries and incoming events are all small frozen
dataclasses. Each state only carries the fields that are valid in it.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .errors import UTRAPIError
from .schemas import MatchResults, Player, PlayerSearchResult, Profile


# -----------------------------------------------------------------------------
# States
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Searching:
    """Text entry is active."""
    step: int
    message: str = ''


@dataclass(frozen=True)
class AwaitingSearchResults:
    step: int
    query: str


@dataclass(frozen=True)
class SelectingPlayer:
    """Several hits came back; the player list is active."""
    step: int
    players: tuple[Player, ...]
    message: str = ''


@dataclass(frozen=True)
class AwaitingProfile:
    step: int
    player: Player
    players: tuple[Player, ...]  # candidates to go back to


@dataclass(frozen=True)
class AwaitingResults:
    step: int
    player: Player
    profile: Profile
    players: tuple[Player, ...]


@dataclass(frozen=True)
class ViewingResults:
    """Match history is loaded; the event list is active."""
    step: int
    player: Player
    profile: Profile
    results: MatchResults
    players: tuple[Player, ...]


@dataclass(frozen=True)
class Terminated:
    step: int


State = Union[
    Searching,
    AwaitingSearchResults,
    SelectingPlayer,
    AwaitingProfile,
    AwaitingResults,
    ViewingResults,
    Terminated,
]


# -----------------------------------------------------------------------------
# Queries
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SearchPlayers:
    step: int
    name: str


@dataclass(frozen=True)
class FetchProfile:
    step: int
    player_id: int


@dataclass(frozen=True)
class FetchResults:
    step: int
    player_id: int


Query = Union[SearchPlayers, FetchProfile, FetchResults]


# -----------------------------------------------------------------------------
# Events
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class KeyPress:
    key: str
    character: Optional[str] = None


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class QuitRequested:
    pass


@dataclass(frozen=True)
class SearchCompleted:
    step: int
    result: PlayerSearchResult


@dataclass(frozen=True)
class ProfileCompleted:
    step: int
    profile: Profile


@dataclass(frozen=True)
class ResultsCompleted:
    step: int
    results: MatchResults


@dataclass(frozen=True)
class QueryFailed:
    step: int
    query: Query
    error: UTRAPIError


Completion = Union[SearchCompleted, ProfileCompleted, ResultsCompleted, QueryFailed]
MachineEvent = Union[KeyPress, Resize, QuitRequested, SearchCompleted, ProfileCompleted, ResultsCompleted, QueryFailed]
