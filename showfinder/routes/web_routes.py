from starlette.requests import Request
import logging

from showfinder.services.templates import templates

logger = logging.getLogger(__name__)

def render_page(request: Request):
    controller = request.app.state.controller
    return templates.TemplateResponse(request, "index.html", {"context": controller.context})

# route for home page
async def homepage(request: Request):
    return render_page(request)

# route for search and search results. the term goes to TVmaze as typed
async def search(request: Request):
    if request.method == "POST":
        form = await request.form()
        term = form.get("term", "")
    else:
        term = request.query_params.get("term", "")
    await request.app.state.controller.on_search_submit(term)
    return render_page(request)

# route for the Episodes button of a show card, e.g. /shows/1/episodes
async def episodes(request: Request):
    show_id = request.path_params["show_id"]
    await request.app.state.controller.on_episodes_requested(show_id)
    return render_page(request)
