import logging

from showfinder.widget.regions import ShowCard, WidgetContext

logger = logging.getLogger(__name__)

def episode_line(episode) -> str:
    return f"{episode.name} (season {episode.season}, episode {episode.number})"

# a new search makes any open episode list stale
def hide_episodes(context: WidgetContext):
    context.episodes.hide()

def populate_shows(context: WidgetContext, shows):
    context.shows.clear()
    for show in shows:
        context.shows.append(ShowCard(
            show_id=show.id,
            name=show.name,
            summary=show.summary,
            image=show.image,
        ))
    hide_episodes(context)
    logger.debug(f"rendered {len(context.shows.entries)} shows")

# keeps the order episodes came in, the region is shown even when empty
def populate_episodes(context: WidgetContext, episodes):
    context.episodes.clear()
    for episode in episodes:
        context.episodes.append(episode_line(episode))
    context.episodes.show()
    logger.debug(f"rendered {len(context.episodes.entries)} episodes")
