# Site check — pre-deploy validation
# Parses the template set, then loads and renders every content file.
# Returns a process exit code: 0 when every page renders, 1 otherwise.

import logging
from config import SiteConfig
from services.errors import SiteError
from services.loader import ContentLoader
from services.renderer import PageRenderer

logger = logging.getLogger(__name__)


def check_site(config: SiteConfig) -> int:
    try:
        renderer = PageRenderer(config.template_dir)
        renderer.render("home")
    except SiteError as exc:
        logger.error("Templates unusable: %s", exc)
        return 1

    loader   = ContentLoader(config.content_dir)
    slugs    = loader.slugs()
    failures = 0

    for slug in slugs:
        try:
            renderer.render("detail", loader.load(slug))
        except SiteError as exc:
            failures += 1
            logger.error("%s: %s", slug, exc)

    logger.info("Checked %d itineraries, %d failed", len(slugs), failures)
    return 1 if failures else 0
