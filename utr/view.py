"""Composes the full screen from the state machine."""

from rich.text import Text

from .constants import (
    LIST_HELP,
    RESULTS_HELP,
    RESULTS_TITLE_SUFFIX,
    SEARCH_HEADING,
    SEARCH_HELP,
    SELECT_TITLE,
)
from .formatting import Theme, render_row, wrap_lines
from .machine import InteractionMachine
from .models import (
    AwaitingProfile,
    AwaitingResults,
    AwaitingSearchResults,
    Searching,
    SelectingPlayer,
    ViewingResults,
)
from .widgets import ListModel, TextField


def render_text_field(field: TextField, theme: Theme) -> Text:
    """Prompt, value and a block cursor; the placeholder shows when empty."""
    text = Text('> ')
    if not field.value:
        if field.placeholder:
            text.append(field.placeholder[0], style=theme.cursor_style)
            text.append(field.placeholder[1:], style=theme.placeholder_style)
        else:
            text.append(' ', style=theme.cursor_style)
        return text

    text.append(field.value[:field.cursor])
    text.append(field.value[field.cursor:field.cursor + 1] or ' ', style=theme.cursor_style)
    text.append(field.value[field.cursor + 1:])
    return text


def render_pagination(rows: ListModel) -> str:
    """One dot per page, or "page/total" when the dots would not fit on a line."""
    total = rows.total_pages
    if total <= 1:
        return ''
    page = rows.page
    if total + 2 > rows.width:
        return f'{page + 1}/{total}'
    return '○' * page + '•' + '○' * (total - page - 1)


def render_list(rows: ListModel, theme: Theme, player_name: str = '') -> Text:
    """
    The current page, wrapped to the list width.

    A focused row taller than the whole list is cut off at the list height,
    so the list never takes more than `rows.height` lines.
    """
    text = Text()
    for position, (index, row) in enumerate(rows.visible()):
        if position:
            text.append('\n' * (1 + rows.spacing))
        text.append_text(render_row(row, index, index == rows.index, theme, player_name))
    lines = wrap_lines(text, rows.width)[:rows.height]
    return Text('\n').join(lines)


def _line(content: str, style: str, width: int) -> Text:
    """A single chrome line, cut short with an ellipsis rather than wrapped."""
    line = Text(content, style=style)
    line.truncate(max(1, width), overflow='ellipsis')
    return line


def _title_bar(title: str, theme: Theme, width: int) -> Text:
    text = Text()
    text.append_text(_line(f' {title} ', theme.title_style, width))
    return text


def _with_footer(body: Text, rows: ListModel, help_text: str, theme: Theme) -> Text:
    pagination = render_pagination(rows)
    if pagination:
        body.append('\n\n')
        body.append_text(_line(f'  {pagination}', theme.status_style, rows.width))
    body.append('\n\n')
    body.append_text(_line(f'  {help_text}', theme.help_style, rows.width))
    return body


def render_view(machine: InteractionMachine, theme: Theme) -> Text:
    """Render whatever the current state should show."""
    state = machine.state

    if isinstance(state, Searching):
        text = Text(f'{SEARCH_HEADING}\n\n')
        text.append_text(render_text_field(machine.search_field, theme))
        text.append('\n\n')
        if state.message:
            text.append(state.message, style=theme.error_style)
            text.append('\n\n')
        text.append(SEARCH_HELP, style=theme.help_style)
        return text

    if isinstance(state, AwaitingSearchResults):
        return Text(f'Searching for "{state.query}"...', style=theme.status_style)

    if isinstance(state, AwaitingProfile):
        return Text(f'Loading profile for {state.player.display_name}...', style=theme.status_style)

    if isinstance(state, AwaitingResults):
        return Text(f'Loading match results for {machine.tracked_player_name}...', style=theme.status_style)

    if isinstance(state, SelectingPlayer):
        width = machine.player_list.width
        text = _title_bar(SELECT_TITLE, theme, width)
        text.append('\n')
        if state.message:
            text.append_text(_line(state.message, theme.error_style, width))
        text.append('\n')
        text.append_text(render_list(machine.player_list, theme))
        return _with_footer(text, machine.player_list, LIST_HELP, theme)

    if isinstance(state, ViewingResults):
        name = machine.tracked_player_name
        profile = state.profile
        results = state.results

        width = machine.event_list.width
        text = _title_bar(f'{name}{RESULTS_TITLE_SUFFIX}', theme, width)
        status = (
            f'{state.player.location}  Singles UTR: {profile.singles_utr:.2f}  '
            f'Doubles UTR: {profile.doubles_utr:.2f}  '
            f'W-L: {results.win_loss_string or f"{results.wins}-{results.losses}"}'
        )
        text.append('\n')
        text.append_text(_line(status, theme.status_style, width))
        text.append('\n\n')
        if machine.event_list.items:
            text.append_text(render_list(machine.event_list, theme, player_name=name))
        else:
            text.append('  No events found.', style=theme.status_style)
        return _with_footer(text, machine.event_list, RESULTS_HELP, theme)

    return Text()
