"""Turns players and events into styled list rows."""

from dataclasses import dataclass
from typing import Union

from rich.console import Console
from rich.text import Text

from .constants import (
    FAILURE_COLOR,
    SELECTED_COLOR,
    SUCCESS_COLOR,
    TITLE_BG_COLOR,
    TITLE_FG_COLOR,
)
from .schemas import AppConfig, Draw, Event, Match, Player
from .utils import format_date

ListRow = Union[Player, Event]

_wrap_console = Console()

__all__ = [
    'ListRow',
    'Theme',
    'format_date',
    'format_draw_win_loss',
    'format_event_row',
    'format_match_line',
    'format_match_score',
    'format_player_row',
    'render_row',
    'row_height',
    'wrap_lines',
]


@dataclass(frozen=True)
class Theme:
    """Padding, glyphs and rich style strings used when rendering rows."""

    item_padding: int = 2
    focus_glyph: str = '→'
    bullet: str = '•'
    win_mark: str = '✅'
    loss_mark: str = '❌'
    item_style: str = ''
    selected_style: str = f'bold {SELECTED_COLOR}'
    success_style: str = SUCCESS_COLOR
    failure_style: str = FAILURE_COLOR
    title_style: str = f'bold {TITLE_FG_COLOR} on {TITLE_BG_COLOR}'
    status_style: str = 'dim'
    error_style: str = f'bold {FAILURE_COLOR}'
    help_style: str = '#626262'
    placeholder_style: str = 'dim'
    cursor_style: str = 'reverse'

    @classmethod
    def from_config(cls, config: AppConfig) -> 'Theme':
        colors = config.colors
        return cls(
            selected_style=f'bold {colors.selected}',
            success_style=colors.success,
            failure_style=colors.failure,
            title_style=f'bold {colors.title_fg} on {colors.title_bg}',
            error_style=f'bold {colors.failure}',
        )


# -----------------------------------------------------------------------------
# Match helpers
# -----------------------------------------------------------------------------

def _won_by(player_name: str, winners: str) -> bool:
    """
    Whether the tracked player appears in a winner string, ignoring case.

    An empty name never wins, so with no tracked player every match line
    is styled as a loss, matching the "(0 - N)" tally of its draw.
    """
    return bool(player_name) and player_name.lower() in winners.lower()


def format_draw_win_loss(draw: Draw, player_name: str) -> str:
    """
    Format the tracked player's win-loss record within a draw.

    A match counts as a win when one of the winner names equals the
    tracked player's full name, ignoring case. Everything else is a loss.

    Returns:
        String like "(2 - 1)"
    """
    wins = 0
    losses = 0
    tracked = player_name.lower()
    for match in draw.matches:
        winners = [name.lower() for name in match.players.winner_full_names()]
        if tracked and tracked in winners:
            wins += 1
        else:
            losses += 1
    return f'({wins} - {losses})'


def format_match_score(match: Match) -> str:
    """
    Format one match as "{winners} def. {losers} ({sets})".

    A first set with no winner games is a forfeit and renders as "(ff".
    Second and third sets only appear when played. A third set recorded
    as 1-0 is a match tiebreak, so its tiebreak points are shown instead.
    """
    players = match.players
    first, second, third = match.score.first_set, match.score.second_set, match.score.third_set

    score = f'{players.winner_names()} def. {players.loser_names()}'
    if first.played:
        score += f' ({first.winner}-{first.loser}'
    else:
        score += ' (ff'

    if second.played:
        score += f', {second.winner}-{second.loser}'
    if third.played:
        if third.winner == 1:
            score += f', {third.winner_tiebreak}-{third.loser_tiebreak}'
        else:
            score += f', {third.winner}-{third.loser}'
    return score + ')'


def format_match_line(match: Match, player_name: str, theme: Theme) -> Text:
    """Score line for a focused event row, colored by whether the tracked player won."""
    score = format_match_score(match)
    indent = ' ' * (theme.item_padding + 4)
    if _won_by(player_name, match.players.winner_names()):
        return Text(f'{indent}{theme.win_mark} {score}', style=theme.success_style)
    return Text(f'{indent}{theme.loss_mark} {score}', style=theme.failure_style)


# -----------------------------------------------------------------------------
# Rows
# -----------------------------------------------------------------------------

def format_player_row(player: Player, index: int, focused: bool, theme: Theme) -> Text:
    line = f'{index + 1}. {player.display_name} ({player.location})'
    if focused:
        return Text(f'{" " * theme.item_padding}{theme.focus_glyph} {line}', style=theme.selected_style)
    return Text(f'{" " * (theme.item_padding + 2)}{line}', style=theme.item_style)


def format_event_row(
    event: Event,
    index: int,
    focused: bool,
    theme: Theme,
    player_name: str,
) -> Text:
    """
    Render an event as a numbered title line followed by one line per draw.

    Focused rows also list every match in each draw with its score.

    Args:
        event: Event to render
        index: Position of the event in its list (0-based)
        focused: Whether the cursor is on this event
        theme: Styles and glyphs
        player_name: Full name of the player whose history is shown
    """
    pad = ' ' * theme.item_padding
    title = f'{index + 1}. {event.title}'

    text = Text()
    if focused:
        text.append(f'{pad}{theme.focus_glyph} {title}', style=theme.selected_style)
    else:
        text.append(f'{pad}{title}', style=theme.item_style)

    for draw in event.draws:
        line = f'{pad}   {theme.bullet} {draw.label} {format_draw_win_loss(draw, player_name)}'
        text.append('\n')
        text.append(line, style=theme.item_style)
        if focused:
            for match in draw.matches:
                text.append('\n')
                text.append_text(format_match_line(match, player_name, theme))
    return text


def render_row(
    row: ListRow,
    index: int,
    focused: bool,
    theme: Theme,
    player_name: str = '',
) -> Text:
    """Render any list row; the row type picks the formatter."""
    if isinstance(row, Player):
        return format_player_row(row, index, focused, theme)
    if isinstance(row, Event):
        return format_event_row(row, index, focused, theme, player_name)
    raise TypeError(f'Cannot render list row of type {type(row).__name__}')


def wrap_lines(text: Text, width: int) -> list[Text]:
    """Break styled text into the screen lines it fills at `width` cells."""
    return list(text.wrap(_wrap_console, max(1, width)))


def row_height(
    row: ListRow,
    index: int,
    focused: bool,
    width: int,
    theme: Theme,
    player_name: str = '',
) -> int:
    """Number of screen lines a rendered row takes at `width` cells."""
    return len(wrap_lines(render_row(row, index, focused, theme, player_name), width))
