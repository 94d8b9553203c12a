# Errors raised by the content loader and page renderer.
# Routers map them to HTTP statuses:
#   ItineraryNotFound / InvalidSlug → 404
#   MalformedItinerary / RenderFailure → 500
# TemplateLoadError only happens at startup and stops the app from starting.


class SiteError(Exception):
    """Base class for itinerary site errors."""


class ItineraryNotFound(SiteError):
    def __init__(self, slug: str):
        super().__init__(f"no itinerary for slug {slug!r}")
        self.slug = slug


class InvalidSlug(ItineraryNotFound):
    def __init__(self, slug: str):
        SiteError.__init__(self, f"invalid itinerary slug {slug!r}")
        self.slug = slug


class MalformedItinerary(SiteError):
    def __init__(self, slug: str, reason: str):
        super().__init__(f"itinerary {slug!r} is malformed: {reason}")
        self.slug   = slug
        self.reason = reason


class RenderFailure(SiteError):
    def __init__(self, template: str, reason: str):
        super().__init__(f"failed to render {template!r}: {reason}")
        self.template = template
        self.reason   = reason


class TemplateLoadError(SiteError):
    pass
