import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from services.errors import ItineraryNotFound, MalformedItinerary, RenderFailure
from services.loader import ContentLoader
from services.renderer import PageRenderer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])


def get_renderer(request: Request) -> PageRenderer:
    return request.app.state.renderer


def get_loader(request: Request) -> ContentLoader:
    return request.app.state.loader


def _render(renderer: PageRenderer, name: str, data=None) -> HTMLResponse:
    try:
        html = renderer.render(name, data)
    except RenderFailure as exc:
        logger.exception("Render failed: %s", exc)
        raise HTTPException(status_code=500, detail="Internal Server Error") from exc
    return HTMLResponse(html)


@router.get("/", response_class=HTMLResponse)
def home(renderer: PageRenderer = Depends(get_renderer)):
    """Landing page; takes no itinerary data."""
    return _render(renderer, "home")


@router.get("/itineraries/{slug}", response_class=HTMLResponse)
def itinerary_detail(
    slug: str,
    loader: ContentLoader = Depends(get_loader),
    renderer: PageRenderer = Depends(get_renderer),
):
    """
    Detail page for one itinerary.
    404 when there is no file for the slug (or the slug is not valid),
    500 when the file is malformed or the template fails.
    """
    try:
        record = loader.load(slug)
    except ItineraryNotFound as exc:
        raise HTTPException(status_code=404, detail="Itinerary not found") from exc
    except MalformedItinerary as exc:
        logger.exception("Bad itinerary data: %s", exc)
        raise HTTPException(status_code=500, detail="Internal Server Error") from exc
    return _render(renderer, "detail", record)


@router.get("/healthz", response_class=PlainTextResponse)
def healthz():
    return "ok"
