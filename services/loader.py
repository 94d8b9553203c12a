# Content Loader — one JSON file per itinerary
# Resolves a URL slug to <content_dir>/<slug>.json, reads it and decodes
# it into an ItineraryRecord. Nothing is cached: every call re-reads.
#
# Slugs are checked before touching the disk:
#   1. Must be a single URL-safe segment (letters, digits, '-', '_')
#   2. The resolved path must stay inside the content directory

import logging
import re
from pathlib import Path
from typing import List, Union
from pydantic import ValidationError
from models.schemas import ItineraryRecord
from services.errors import InvalidSlug, ItineraryNotFound, MalformedItinerary

logger = logging.getLogger(__name__)

SLUG_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_-]*")
CONTENT_SUFFIX = ".json"


class ContentLoader:
    def __init__(self, content_dir: Union[str, Path]):
        self.content_dir = Path(content_dir).resolve()

    def path_for(self, slug: str) -> Path:
        """Return the backing file for `slug`, or raise InvalidSlug."""
        if not isinstance(slug, str) or not SLUG_PATTERN.fullmatch(slug):
            raise InvalidSlug(str(slug))

        path = (self.content_dir / f"{slug}{CONTENT_SUFFIX}").resolve()
        # symlinks pointing out of the content dir count as traversal too
        if not path.is_relative_to(self.content_dir):
            raise InvalidSlug(slug)
        return path

    def load(self, slug: str) -> ItineraryRecord:
        path = self.path_for(slug)

        try:
            raw = path.read_bytes()
        except OSError as exc:
            logger.info("itinerary %r unavailable: %s", slug, exc)
            raise ItineraryNotFound(slug) from exc

        try:
            record = ItineraryRecord.model_validate_json(raw)
        except ValidationError as exc:
            raise MalformedItinerary(slug, _summarize(exc)) from exc

        if record.slug is None:
            return record.model_copy(update={"slug": slug})
        if record.slug != slug:
            raise MalformedItinerary(
                slug, f"file declares slug {record.slug!r}"
            )
        return record

    def slugs(self) -> List[str]:
        """Slugs of every content file, sorted."""
        if not self.content_dir.is_dir():
            return []
        return sorted(
            p.stem for p in self.content_dir.glob(f"*{CONTENT_SUFFIX}")
            if p.is_file() and SLUG_PATTERN.fullmatch(p.stem)
        )


def _summarize(exc: ValidationError) -> str:
    """First validation problem as 'loc: message', plus a count of the rest."""
    errors = exc.errors()
    first  = errors[0]
    loc    = ".".join(str(p) for p in first.get("loc", ())) or "<root>"
    text   = f"{loc}: {first.get('msg', 'invalid')}"
    if len(errors) > 1:
        text += f" (+{len(errors) - 1} more)"
    return text
