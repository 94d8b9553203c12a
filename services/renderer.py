# Page Renderer — Jinja2 templates parsed once at startup
# Two named templates: `home` (no data) and `detail` (one ItineraryRecord).
# The parsed set is read-only after construction, so request handlers
# share one renderer without locking.

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Optional, Union
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    select_autoescape,
)
from markupsafe import Markup
from models.schemas import ItineraryRecord
from services.errors import RenderFailure, TemplateLoadError

logger = logging.getLogger(__name__)

TEMPLATE_FILES = {
    "home":   "home.html",
    "detail": "detail.html",
}

STATIC_PREFIX = "/static/"


# ── Template helpers ────────────────────────────────────────────────────────────

def contains(haystack: str, needle: str) -> bool:
    return needle in haystack


def has_suffix(s: str, suffix: str) -> bool:
    return s.endswith(suffix)


def replace(s: str, old: str, new: str, count: int) -> str:
    """Replace the first `count` occurrences of `old`; negative means all."""
    return s.replace(old, new, count if count >= 0 else -1)


def asset(path: str) -> Markup:
    """URL of a bundled static file. Only for paths written in templates."""
    return Markup(STATIC_PREFIX + path.lstrip("/"))


TEMPLATE_GLOBALS = {
    "contains":  contains,
    "hasSuffix": has_suffix,
    "replace":   replace,
    "asset":     asset,
}


def build_environment(template_dir: Union[str, Path]) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "htm", "xml"], default=True),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.globals.update(TEMPLATE_GLOBALS)
    return env


# ── Renderer ────────────────────────────────────────────────────────────────────

class PageRenderer:
    """
    Holds the parsed template set.
    Construction fails with TemplateLoadError if any template is missing
    or does not parse; a renderer that exists can render every page.
    """

    def __init__(self, template_dir: Union[str, Path]):
        self.template_dir = Path(template_dir)
        env = build_environment(self.template_dir)

        parsed = {}
        for name, filename in TEMPLATE_FILES.items():
            try:
                parsed[name] = env.get_template(filename)
            except TemplateError as exc:
                raise TemplateLoadError(
                    f"cannot load template {name!r} from {self.template_dir / filename}: {exc}"
                ) from exc
        self.templates = MappingProxyType(parsed)
        logger.info("Loaded %d templates from %s", len(parsed), self.template_dir)

    def render(self, name: str, data: Optional[ItineraryRecord] = None) -> str:
        template = self.templates.get(name)
        if template is None:
            raise RenderFailure(name, "unknown template")

        context: Dict[str, Any] = {}
        if data is not None:
            context["itinerary"] = data

        try:
            return template.render(context)
        except Exception as exc:
            raise RenderFailure(name, f"{type(exc).__name__}: {exc}") from exc
