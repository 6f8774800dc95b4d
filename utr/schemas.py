"""Pydantic schemas for UTR API responses and the app config file."""

from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from .constants import (
    DEFAULT_CHAR_LIMIT,
    DEFAULT_LIST_HEIGHT,
    DEFAULT_LIST_WIDTH,
    FAILURE_COLOR,
    SELECTED_COLOR,
    SUCCESS_COLOR,
    TITLE_BG_COLOR,
    TITLE_FG_COLOR,
    UTR_BASE_URL,
)
from .utils import format_date


def _drop_nulls(data: Any) -> Any:
    """Let field defaults apply where the API sends explicit nulls."""
    if isinstance(data, dict):
        return {k: v for k, v in data.items() if v is not None}
    return data


class UTRRecord(BaseModel):
    """Base for records decoded from the UTR API."""

    @model_validator(mode='before')
    @classmethod
    def drop_nulls(cls, data):
        return _drop_nulls(data)

    class Config:
        extra = 'ignore'
        frozen = True
        populate_by_name = True


class Player(UTRRecord):
    """A player hit from a name search."""

    id: int
    display_name: str = Field(default='', alias='displayName')
    gender: str = ''
    age_range: str = Field(default='', alias='ageRange')
    location: str = ''

    @model_validator(mode='before')
    @classmethod
    def drop_nulls(cls, data):
        """Unwrap the search hit's `source` object and its location display."""
        data = _drop_nulls(data)
        if isinstance(data, dict) and isinstance(data.get('source'), dict):
            data = _drop_nulls(data['source'])
        if isinstance(data, dict) and isinstance(data.get('location'), dict):
            data = {**data, 'location': data['location'].get('display') or ''}
        return data


class PlayerSearchResult(UTRRecord):
    """Response to a name search. Upstream returns at most a handful of hits."""

    players: list[Player] = Field(default_factory=list, alias='hits')
    total: int = Field(default=0, ge=0)


class Profile(UTRRecord):
    """Player profile, fetched once a single player is chosen."""

    first_name: str = Field(default='', alias='firstName')
    last_name: str = Field(default='', alias='lastName')
    gender: str = ''
    city: str = ''
    state: str = ''
    nationality: str = ''
    singles_utr: float = Field(default=0.0, alias='singlesUtr')
    doubles_utr: float = Field(default=0.0, alias='doublesUtr')

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'.strip()


class Participant(UTRRecord):
    """One side of a match. Only the name is used."""

    first_name: str = Field(default='', alias='firstName')
    last_name: str = Field(default='', alias='lastName')

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'.strip()


class MatchParticipants(UTRRecord):
    """Winner and loser sides; the second slot on each side is empty for singles."""

    winner1: Optional[Participant] = None
    winner2: Optional[Participant] = None
    loser1: Optional[Participant] = None
    loser2: Optional[Participant] = None

    @staticmethod
    def _names(first: Optional[Participant], second: Optional[Participant]) -> list[str]:
        names = [first.full_name if first else '']
        if second and second.first_name:
            names.append(second.full_name)
        return names

    def winner_full_names(self) -> list[str]:
        return [n for n in self._names(self.winner1, self.winner2) if n]

    def winner_names(self) -> str:
        """Winner side for display, doubles partners joined with ' / '."""
        return ' / '.join(self._names(self.winner1, self.winner2))

    def loser_names(self) -> str:
        return ' / '.join(self._names(self.loser1, self.loser2))


class SetScore(UTRRecord):
    """Games in one set. A winner score of zero means the set was not played."""

    winner: int = 0
    loser: int = 0
    winner_tiebreak: int = Field(default=0, alias='winnerTiebreak')
    loser_tiebreak: int = Field(default=0, alias='tiebreak')

    @property
    def played(self) -> bool:
        return self.winner != 0


class Score(UTRRecord):
    """Up to three sets, keyed "1".."3" upstream."""

    first_set: SetScore = Field(default_factory=SetScore, alias='1')
    second_set: SetScore = Field(default_factory=SetScore, alias='2')
    third_set: SetScore = Field(default_factory=SetScore, alias='3')


class Match(UTRRecord):
    """A single match within a draw."""

    id: int = 0
    date: str = ''
    players: MatchParticipants = Field(default_factory=MatchParticipants)
    # Relative to the originally searched player; win/loss display ignores it
    is_winner: bool = Field(default=False, alias='isWinner')
    score: Score = Field(default_factory=Score)


class Draw(UTRRecord):
    """A bracket or division within an event."""

    id: int = 0
    name: str = ''
    team_type: str = Field(default='', alias='teamType')
    gender: str = ''
    matches: list[Match] = Field(default_factory=list, alias='results')

    @property
    def label(self) -> str:
        return self.name or self.team_type


class Event(UTRRecord):
    """A tournament or competition the player took part in."""

    id: int = 0
    name: str = ''
    start_date: str = Field(default='', alias='startDate')
    end_date: str = Field(default='', alias='endDate')
    draws: list[Draw] = Field(default_factory=list)

    @property
    def title(self) -> str:
        return f'{self.name} ({format_date(self.start_date)} - {format_date(self.end_date)})'


class MatchResults(UTRRecord):
    """Root of a player's match history."""

    wins: int = 0
    losses: int = 0
    events: list[Event] = Field(default_factory=list)
    win_loss_string: str = Field(default='', alias='winLossString')


class ColorConfig(BaseModel):
    """Colors used by the list formatter."""

    selected: str = SELECTED_COLOR
    success: str = SUCCESS_COLOR
    failure: str = FAILURE_COLOR
    title_fg: str = TITLE_FG_COLOR
    title_bg: str = TITLE_BG_COLOR

    class Config:
        extra = 'forbid'


class AppConfig(BaseModel):
    """Client configuration settings."""

    base_url: str = Field(default=UTR_BASE_URL, min_length=1)
    timeout: Optional[float] = Field(default=None, gt=0)
    char_limit: int = Field(default=DEFAULT_CHAR_LIMIT, ge=1, le=1000)
    list_width: int = Field(default=DEFAULT_LIST_WIDTH, ge=10)
    list_height: int = Field(default=DEFAULT_LIST_HEIGHT, ge=4)
    log_dir: str = 'logs'
    log_level: str = Field(default='INFO', pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$')
    colors: ColorConfig = Field(default_factory=ColorConfig)

    class Config:
        extra = 'forbid'
