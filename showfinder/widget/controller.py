import asyncio
import aiohttp
import logging

from showfinder.services.tvmaze import get_shows_by_term, get_episodes_of_show
from showfinder.widget.regions import WidgetContext
from showfinder.widget.renderers import hide_episodes, populate_shows, populate_episodes

logger = logging.getLogger(__name__)

SEARCH_ERROR_MESSAGE = "Searching TVmaze failed. Try again later."
EPISODES_ERROR_MESSAGE = "Loading episodes from TVmaze failed. Try again later."

# transport failures; aiohttp times out with a plain asyncio.TimeoutError
FETCH_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, ValueError)


# every pipeline numbers its requests, only the newest one may touch the page
class WidgetController:

    def __init__(self, context=None, show_fetcher=get_shows_by_term, episode_fetcher=get_episodes_of_show):
        self.context = context if context is not None else WidgetContext()
        self.show_fetcher = show_fetcher
        self.episode_fetcher = episode_fetcher
        self._search_seq = 0
        self._episodes_seq = 0

    async def on_search_submit(self, term) -> bool:
        self._search_seq += 1
        seq = self._search_seq
        try:
            shows = await self.show_fetcher(term)
        except FETCH_ERRORS as err:
            if seq != self._search_seq:
                logger.debug(f"dropping failed search #{seq} for '{term}', newer search pending")
                return False
            logger.error(f"search for '{term}' failed: {err}")
            self.context.message = SEARCH_ERROR_MESSAGE
            return False
        if seq != self._search_seq:
            logger.debug(f"dropping stale search #{seq} for '{term}'")
            return False
        # episode requests still in flight belong to the old show list
        self._episodes_seq += 1
        self.context.message = None
        hide_episodes(self.context)
        populate_shows(self.context, shows)
        return True

    async def on_episodes_requested(self, show_id) -> bool:
        self._episodes_seq += 1
        seq = self._episodes_seq
        try:
            episodes = await self.episode_fetcher(show_id)
        except FETCH_ERRORS as err:
            if seq != self._episodes_seq:
                logger.debug(f"dropping failed episode request #{seq} for show {show_id}")
                return False
            # previous episode list stays as it was
            logger.error(f"episodes for show {show_id} failed: {err}")
            self.context.message = EPISODES_ERROR_MESSAGE
            return False
        if seq != self._episodes_seq:
            logger.debug(f"dropping stale episode request #{seq} for show {show_id}")
            return False
        self.context.message = None
        populate_episodes(self.context, episodes)
        return True
