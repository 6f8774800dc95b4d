from .schemas import (
    AppConfig,
    Draw,
    Event,
    Match,
    MatchResults,
    Player,
    PlayerSearchResult,
    Profile,
    Score,
    SetScore,
)
from .errors import (
    BadStatusError,
    DecodeError,
    ErrorKind,
    TransportError,
    UTRAPIError,
)
from .api_client import UTRClient
from .formatting import (
    Theme,
    format_draw_win_loss,
    format_event_row,
    format_match_score,
    format_player_row,
    render_row,
)
from .machine import InteractionMachine
from .config import get_config, clear_config_cache

__all__ = [
    # Records
    'AppConfig',
    'Draw',
    'Event',
    'Match',
    'MatchResults',
    'Player',
    'PlayerSearchResult',
    'Profile',
    'Score',
    'SetScore',
    # Errors
    'BadStatusError',
    'DecodeError',
    'ErrorKind',
    'TransportError',
    'UTRAPIError',
    # Query client
    'UTRClient',
    # Formatting
    'Theme',
    'format_draw_win_loss',
    'format_event_row',
    'format_match_score',
    'format_player_row',
    'render_row',
    # State machine
    'InteractionMachine',
    # Config
    'get_config',
    'clear_config_cache',
]
