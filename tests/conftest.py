"""Shared fixtures: sample UTR payloads and decoded records."""

import pytest

from utr.formatting import Theme
from utr.schemas import MatchResults, PlayerSearchResult, Profile


def _make_hit(player_id, name, location='Basel, Switzerland'):
    return {
        'source': {
            'id': player_id,
            'displayName': name,
            'gender': 'M',
            'ageRange': '40-44',
            'location': {'display': location},
        }
    }


def _make_match(winner, loser, sets=((6, 4),), winner2=None, loser2=None, match_id=1):
    def person(full_name):
        if full_name is None:
            return None
        first, _, last = full_name.partition(' ')
        return {'firstName': first, 'lastName': last}

    score = {}
    for number, (won, lost) in enumerate(sets, start=1):
        score[str(number)] = {'winner': won, 'loser': lost, 'tiebreak': None, 'winnerTiebreak': None}
    return {
        'id': match_id,
        'date': '2023-06-10T00:00:00',
        'players': {
            'winner1': person(winner),
            'winner2': person(winner2),
            'loser1': person(loser),
            'loser2': person(loser2),
        },
        'isWinner': False,
        'score': score,
    }


@pytest.fixture
def make_match():
    """Builder for raw match payloads: make_match(winner, loser, sets, ...)."""
    return _make_match


@pytest.fixture
def search_payload_single():
    return {'hits': [_make_hit(1001, 'Roger Federer')], 'total': 1}


@pytest.fixture
def search_payload_many():
    return {
        'hits': [
            _make_hit(2001, 'Jane Doe', 'Austin, TX'),
            _make_hit(2002, 'Jane Doe', 'Boston, MA'),
            _make_hit(2003, 'Janet Doe', 'Denver, CO'),
        ],
        'total': 3,
    }


@pytest.fixture
def profile_payload():
    return {
        'firstName': 'Roger',
        'lastName': 'Federer',
        'gender': 'M',
        'city': 'Basel',
        'state': None,
        'nationality': 'SUI',
        'singlesUtr': 16.25,
        'doublesUtr': None,
    }


@pytest.fixture
def results_payload():
    return {
        'wins': 3,
        'losses': 1,
        'winLossString': '3-1',
        'events': [
            {
                'id': 11,
                'name': 'Swiss Indoors',
                'startDate': '2023-06-10T00:00:00',
                'endDate': '2023-06-12T00:00:00',
                'draws': [
                    {
                        'id': 111,
                        'name': "Men's Singles",
                        'teamType': 'Singles',
                        'gender': 'M',
                        'results': [
                            _make_match('Roger Federer', 'Rafael Nadal', ((6, 4), (7, 5)), match_id=1),
                            _make_match('Novak Djokovic', 'Roger Federer', ((6, 3),), match_id=2),
                        ],
                    },
                ],
            },
            {
                'id': 12,
                'name': 'Club Doubles',
                'startDate': '2023-07-01T00:00:00',
                'endDate': '2023-07-02T00:00:00',
                'draws': [
                    {
                        'id': 121,
                        'name': '',
                        'teamType': 'Doubles',
                        'gender': 'M',
                        'results': [
                            _make_match(
                                'Roger Federer', 'Andy Murray', ((6, 2), (6, 2)),
                                winner2='Stan Wawrinka', loser2='Jamie Murray', match_id=3,
                            ),
                        ],
                    },
                ],
            },
            {
                'id': 13,
                'name': 'Summer Open',
                'startDate': '2023-08-01T00:00:00',
                'endDate': '2023-08-03T00:00:00',
                'draws': [],
            },
        ],
    }


@pytest.fixture
def single_result(search_payload_single):
    return PlayerSearchResult.model_validate(search_payload_single)


@pytest.fixture
def many_result(search_payload_many):
    return PlayerSearchResult.model_validate(search_payload_many)


@pytest.fixture
def profile(profile_payload):
    return Profile.model_validate(profile_payload)


@pytest.fixture
def match_results(results_payload):
    return MatchResults.model_validate(results_payload)


@pytest.fixture
def theme():
    return Theme()
