"""Tests for the interaction state machine."""

import pytest

from utr.errors import BadStatusError, TransportError
from utr.formatting import Theme
from utr.machine import InteractionMachine
from utr.models import (
    AwaitingProfile,
    AwaitingResults,
    AwaitingSearchResults,
    FetchProfile,
    FetchResults,
    KeyPress,
    ProfileCompleted,
    QueryFailed,
    QuitRequested,
    Resize,
    ResultsCompleted,
    SearchCompleted,
    Searching,
    SearchPlayers,
    SelectingPlayer,
    Terminated,
    ViewingResults,
)
from utr.schemas import PlayerSearchResult
from utr.view import render_view


def press(machine, key, character=None):
    return machine.handle(KeyPress(key=key, character=character))


def type_text(machine, text):
    for ch in text:
        press(machine, ch, ch)


def search(machine, name='Jane Doe'):
    type_text(machine, name)
    return press(machine, 'enter')


@pytest.fixture
def machine():
    return InteractionMachine(width=80, height=30)


@pytest.fixture
def selecting(machine, many_result):
    """Machine sitting in player selection with three candidates."""
    [query] = search(machine)
    machine.handle(SearchCompleted(step=query.step, result=many_result))
    return machine


@pytest.fixture
def viewing(selecting, profile, match_results):
    """Machine showing results for the second candidate."""
    press(selecting, 'down')
    [profile_query] = press(selecting, 'enter')
    [results_query] = selecting.handle(ProfileCompleted(step=profile_query.step, profile=profile))
    selecting.handle(ResultsCompleted(step=results_query.step, results=match_results))
    return selecting


class TestSearching:
    """Tests for the search prompt."""

    def test_starts_searching(self, machine):
        assert isinstance(machine.state, Searching)
        assert not machine.finished

    def test_typing_goes_to_field(self, machine):
        """Test keystrokes edit the search field without changing mode."""
        type_text(machine, 'jk')
        assert machine.search_field.value == 'jk'
        assert isinstance(machine.state, Searching)

    def test_enter_issues_search(self, machine):
        """Test submitting a name issues one search query."""
        queries = search(machine, '  Roger Federer ')

        assert queries == [SearchPlayers(step=machine.state.step, name='Roger Federer')]
        assert isinstance(machine.state, AwaitingSearchResults)
        assert machine.state.query == 'Roger Federer'

    def test_blank_enter_does_nothing(self, machine):
        """Test an empty query is not submitted."""
        type_text(machine, '   ')
        assert press(machine, 'enter') == []
        assert isinstance(machine.state, Searching)

    def test_escape_quits(self, machine):
        press(machine, 'escape')
        assert machine.finished

    def test_start_with_initial_query(self, machine):
        """Test a pre-filled name searches immediately."""
        queries = machine.start('Roger Federer')

        assert [type(q) for q in queries] == [SearchPlayers]
        assert queries[0].name == 'Roger Federer'
        assert machine.search_field.value == 'Roger Federer'

    def test_start_without_query(self, machine):
        assert machine.start(None) == []
        assert machine.start('') == []
        assert isinstance(machine.state, Searching)

    def test_no_second_search_while_waiting(self, machine):
        """Test enter while a search is in flight issues nothing."""
        search(machine)
        assert press(machine, 'enter') == []


class TestSearchResults:
    """Tests for the three search outcomes."""

    def test_no_players_found(self, machine):
        """Test total == 0 returns to the prompt and never selects."""
        [query] = search(machine)
        queries = machine.handle(
            SearchCompleted(step=query.step, result=PlayerSearchResult(hits=[], total=0))
        )

        assert queries == []
        assert isinstance(machine.state, Searching)
        assert machine.state.message == 'No player found.'
        assert machine.search_field.value == 'Jane Doe'
        assert machine.player_list.items == []

    def test_single_player_auto_selected(self, machine, single_result):
        """Test total == 1 goes straight to the profile fetch."""
        [query] = search(machine, 'Roger Federer')
        queries = machine.handle(SearchCompleted(step=query.step, result=single_result))

        assert isinstance(machine.state, AwaitingProfile)
        assert queries == [FetchProfile(step=machine.state.step, player_id=1001)]
        assert machine.player_list.items == []

    def test_many_players_listed_in_order(self, selecting, many_result):
        """Test every hit appears once, in order, as a selectable row."""
        assert isinstance(selecting.state, SelectingPlayer)
        assert selecting.player_list.items == many_result.players
        assert [p.id for p in selecting.state.players] == [2001, 2002, 2003]
        assert selecting.player_list.index == 0


class TestSelectingPlayer:
    """Tests for choosing among several hits."""

    def test_navigation_stays_in_mode(self, selecting):
        press(selecting, 'down')
        press(selecting, 'j')
        press(selecting, 'k')

        assert isinstance(selecting.state, SelectingPlayer)
        assert selecting.player_list.index == 1

    def test_enter_fetches_highlighted_profile(self, selecting):
        """Test submitting picks the highlighted player."""
        press(selecting, 'down')
        press(selecting, 'down')
        queries = press(selecting, 'enter')

        assert isinstance(selecting.state, AwaitingProfile)
        assert selecting.state.player.id == 2003
        assert queries == [FetchProfile(step=selecting.state.step, player_id=2003)]

    def test_escape_returns_to_search(self, selecting):
        """Test backing out clears the candidate list and keeps the text."""
        press(selecting, 'escape')

        assert isinstance(selecting.state, Searching)
        assert selecting.player_list.items == []
        assert selecting.search_field.value == 'Jane Doe'


class TestLoadingResults:
    """Tests for the profile and results fetches."""

    def test_profile_then_results(self, selecting, profile, match_results):
        """Test the profile arrival issues the results fetch."""
        [profile_query] = press(selecting, 'enter')
        queries = selecting.handle(ProfileCompleted(step=profile_query.step, profile=profile))

        assert isinstance(selecting.state, AwaitingResults)
        assert selecting.state.profile == profile
        assert queries == [FetchResults(step=selecting.state.step, player_id=2001)]

        selecting.handle(ResultsCompleted(step=queries[0].step, results=match_results))

        assert isinstance(selecting.state, ViewingResults)
        assert selecting.event_list.items == match_results.events

    def test_tracked_name_prefers_profile(self, viewing):
        assert viewing.tracked_player_name == 'Roger Federer'

    def test_event_navigation(self, viewing):
        press(viewing, 'down')
        press(viewing, 'down')
        press(viewing, 'down')

        assert isinstance(viewing.state, ViewingResults)
        assert viewing.event_list.index == 2


class TestFullScenario:
    """End-to-end walk through the happy path."""

    def test_roger_federer(self, machine, single_result, profile, match_results):
        """Test name -> single hit -> profile -> results -> events in order."""
        [search_query] = search(machine, 'Roger Federer')
        [profile_query] = machine.handle(SearchCompleted(step=search_query.step, result=single_result))
        assert profile_query.player_id == 1001

        [results_query] = machine.handle(ProfileCompleted(step=profile_query.step, profile=profile))
        assert isinstance(results_query, FetchResults)
        assert results_query.player_id == 1001

        assert machine.handle(ResultsCompleted(step=results_query.step, results=match_results)) == []
        assert isinstance(machine.state, ViewingResults)
        assert [e.id for e in machine.event_list.items] == [11, 12, 13]


class TestBackingOut:
    """Tests for cancelling out of results and waits."""

    def test_results_back_to_selection(self, viewing, many_result):
        """Test esc from results shows the kept candidates without event rows."""
        press(viewing, 'escape')

        assert isinstance(viewing.state, SelectingPlayer)
        assert viewing.player_list.items == many_result.players
        assert viewing.player_list.index == 1
        assert viewing.event_list.items == []

        plain = render_view(viewing, Theme()).plain
        assert plain.startswith(' Select a player ')
        assert '2. Jane Doe (Boston, MA)' in plain
        assert 'Match Results' not in plain
        assert 'Swiss Indoors' not in plain
        assert 'Singles UTR' not in plain

    def test_results_back_to_search_after_auto_select(self, machine, single_result, profile, match_results):
        """Test esc from results returns to the prompt when there was no choice."""
        [q1] = search(machine, 'Roger Federer')
        [q2] = machine.handle(SearchCompleted(step=q1.step, result=single_result))
        [q3] = machine.handle(ProfileCompleted(step=q2.step, profile=profile))
        machine.handle(ResultsCompleted(step=q3.step, results=match_results))

        press(machine, 'escape')

        assert isinstance(machine.state, Searching)
        assert machine.event_list.items == []

    def test_escape_while_searching_for_results(self, machine):
        search(machine)
        press(machine, 'escape')
        assert isinstance(machine.state, Searching)

    def test_escape_while_loading_profile(self, selecting):
        press(selecting, 'enter')
        press(selecting, 'escape')
        assert isinstance(selecting.state, SelectingPlayer)


class TestStaleResponses:
    """Tests for discarding answers that belong to abandoned steps."""

    def test_stale_search_result_ignored(self, machine, many_result):
        """Test a search answer arriving after backing out is dropped."""
        [query] = search(machine)
        press(machine, 'escape')

        queries = machine.handle(SearchCompleted(step=query.step, result=many_result))

        assert queries == []
        assert isinstance(machine.state, Searching)
        assert machine.player_list.items == []

    def test_stale_results_do_not_replace_view(self, selecting, profile, match_results):
        """Test an old results answer can't populate a newer selection."""
        [profile_query] = press(selecting, 'enter')
        [results_query] = selecting.handle(ProfileCompleted(step=profile_query.step, profile=profile))
        press(selecting, 'escape')

        selecting.handle(ResultsCompleted(step=results_query.step, results=match_results))

        assert isinstance(selecting.state, SelectingPlayer)
        assert selecting.event_list.items == []

    def test_old_search_after_new_search(self, machine, single_result, many_result):
        """Test only the latest search is applied."""
        [first] = search(machine, 'Jane')
        press(machine, 'escape')
        [second] = press(machine, 'enter')

        machine.handle(SearchCompleted(step=first.step, result=single_result))
        assert isinstance(machine.state, AwaitingSearchResults)

        machine.handle(SearchCompleted(step=second.step, result=many_result))
        assert isinstance(machine.state, SelectingPlayer)

    def test_steps_increase(self, machine, many_result):
        steps = [machine.state.step]
        [query] = search(machine)
        steps.append(machine.state.step)
        machine.handle(SearchCompleted(step=query.step, result=many_result))
        steps.append(machine.state.step)
        press(machine, 'enter')
        steps.append(machine.state.step)

        assert steps == sorted(set(steps))


class TestFailures:
    """Tests for failed queries."""

    def test_search_failure_returns_to_prompt(self, machine):
        [query] = search(machine)
        machine.handle(QueryFailed(step=query.step, query=query, error=TransportError('timed out')))

        assert isinstance(machine.state, Searching)
        assert machine.state.message == 'Request failed: timed out'

    def test_profile_failure_returns_to_selection(self, selecting):
        [query] = press(selecting, 'enter')
        selecting.handle(QueryFailed(step=query.step, query=query, error=BadStatusError(500)))

        assert isinstance(selecting.state, SelectingPlayer)
        assert selecting.state.message == 'Request failed: HTTP 500'

    def test_stale_failure_ignored(self, machine):
        [query] = search(machine)
        press(machine, 'escape')
        type_text(machine, 'x')
        machine.handle(QueryFailed(step=query.step, query=query, error=TransportError('late')))

        assert isinstance(machine.state, Searching)
        assert machine.state.message == ''


class TestQuitAndResize:
    """Tests for events handled in every state."""

    @pytest.mark.parametrize('event', [KeyPress(key='ctrl+c'), QuitRequested()])
    def test_quit_from_results(self, viewing, event):
        viewing.handle(event)

        assert isinstance(viewing.state, Terminated)
        assert viewing.finished
        assert viewing.handle(KeyPress(key='enter')) == []

    def test_resize_updates_both_lists(self, selecting):
        selecting.handle(Resize(width=120, height=20))

        assert selecting.player_list.width == 120
        assert selecting.event_list.width == 120
        assert selecting.player_list.height == 13
        assert selecting.event_list.height == 13
        assert isinstance(selecting.state, SelectingPlayer)
