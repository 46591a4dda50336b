import aiohttp
import logging
from urllib.parse import urljoin

from showfinder.config import TVMAZE_API_URL, DEFAULT_IMAGE_URL
from showfinder.models import Show, Episode

logger = logging.getLogger(__name__)

# single GET against the TVmaze api. errors are left to the caller
async def fetch_data(path, params=None):
    url = urljoin(TVMAZE_API_URL, path)
    async with aiohttp.ClientSession(raise_for_status=True) as aiosession:
        async with aiosession.get(url, params=params) as aioresponse:
            logger.debug(f"GET {aioresponse.url} -> {aioresponse.status}")
            return await aioresponse.json()

def show_image(show_data: dict) -> str:
    image = show_data.get("image") or {}
    return image.get("medium") or DEFAULT_IMAGE_URL

# search shows by title, e.g. https://api.tvmaze.com/search/shows?q=batman
async def get_shows_by_term(term):
    data = await fetch_data("search/shows", params={"q": term})
    shows = []
    for result in data:
        show = result["show"]
        shows.append(Show(
            id=show["id"],
            name=show["name"],
            summary=show.get("summary"),
            image=show_image(show),
        ))
    logger.info(f"search '{term}' returned {len(shows)} shows")
    return shows

# all episodes of one show, in TVmaze order
async def get_episodes_of_show(show_id):
    data = await fetch_data(f"shows/{show_id}/episodes")
    episodes = [
        Episode(
            id=episode["id"],
            name=episode["name"],
            season=episode["season"],
            number=episode["number"],
        )
        for episode in data
    ]
    logger.info(f"show {show_id} has {len(episodes)} episodes")
    return episodes
