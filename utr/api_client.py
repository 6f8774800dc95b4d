"""UTR API access using requests."""

import logging
from typing import Optional

import requests
from pydantic import BaseModel, ValidationError

from .constants import (
    PLAYER_PROFILE_PATH,
    PLAYER_RESULTS_PATH,
    SEARCH_PLAYERS_PATH,
    UTR_BASE_URL,
)
from .errors import BadStatusError, DecodeError, TransportError, UTRAPIError
from .models import (
    Completion,
    FetchProfile,
    FetchResults,
    ProfileCompleted,
    Query,
    QueryFailed,
    ResultsCompleted,
    SearchCompleted,
    SearchPlayers,
)
from .schemas import MatchResults, PlayerSearchResult, Profile
from .utils import quote_query

logger = logging.getLogger('utr.api_client')


class UTRClient:
    """Issues the three read-only UTR queries and decodes their responses."""

    def __init__(
        self,
        base_url: str = UTR_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def _get(self, path: str, schema: type[BaseModel]):
        """
        GET a path under the base URL and validate the body against a schema.

        Raises:
            TransportError: If no response was received
            BadStatusError: If the status is not 2xx
            DecodeError: If the body is not JSON or fails validation
        """
        url = f'{self.base_url}{path}'
        logger.debug(f'GET {url}')

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f'Request to {url} failed: {e}')
            raise TransportError(str(e), url=url) from e

        if not 200 <= response.status_code < 300:
            logger.error(f'Request to {url} returned HTTP {response.status_code}')
            raise BadStatusError(response.status_code, url=url)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f'Invalid JSON from {url}: {e}')
            raise DecodeError(f'Invalid JSON: {e}', url=url) from e

        try:
            return schema.model_validate(data)
        except ValidationError as e:
            logger.error(f'Unexpected response shape from {url}: {e}')
            raise DecodeError(f'Unexpected response from {url}', url=url) from e

    def search_players(self, name: str) -> PlayerSearchResult:
        """
        Search for players by name.

        Args:
            name: Free-text player name; escaped before sending

        Returns:
            PlayerSearchResult with the hits in upstream order
        """
        return self._get(SEARCH_PLAYERS_PATH.format(query=quote_query(name)), PlayerSearchResult)

    def player_profile(self, player_id: int) -> Profile:
        """Get a player's profile by id."""
        return self._get(PLAYER_PROFILE_PATH.format(player_id=player_id), Profile)

    def player_results(self, player_id: int) -> MatchResults:
        """Get a player's match results by id."""
        return self._get(PLAYER_RESULTS_PATH.format(player_id=player_id), MatchResults)

    def execute(self, query: Query) -> Completion:
        """
        Run a query and turn its outcome into exactly one completion event.

        Failures never propagate; they come back as QueryFailed tagged with
        the query's step so the state machine can decide what to do.
        """
        try:
            if isinstance(query, SearchPlayers):
                return SearchCompleted(step=query.step, result=self.search_players(query.name))
            if isinstance(query, FetchProfile):
                return ProfileCompleted(step=query.step, profile=self.player_profile(query.player_id))
            if isinstance(query, FetchResults):
                return ResultsCompleted(step=query.step, results=self.player_results(query.player_id))
        except UTRAPIError as e:
            logger.warning(f'{type(query).__name__} failed ({e.kind.value}): {e}')
            return QueryFailed(step=query.step, query=query, error=e)

        raise TypeError(f'Unknown query: {query!r}')
