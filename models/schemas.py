from pydantic import AliasChoices, BaseModel, ConfigDict, Field, NonNegativeInt, field_validator
from typing import Literal, Optional, Tuple


class _Content(BaseModel):
    # JSON files use camelCase keys; attributes stay snake_case.
    # Sequences are tuples so a loaded record cannot be changed in place.
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Hero(_Content):
    video:  Optional[str] = None
    poster: Optional[str] = None


class Highlight(_Content):
    title:       Optional[str] = None
    description: Optional[str] = None
    image:       Optional[str] = None
    icon:        Optional[str] = None


class Place(_Content):
    name: Optional[str] = None
    icon: Optional[str] = None


class VideoRef(_Content):
    url:     Optional[str] = None
    poster:  Optional[str] = None
    caption: Optional[str] = None
    credit:  Optional[str] = None


class DayEntry(_Content):
    """
    One day of the programme.
    A text day has no `video`; a video day carries a VideoRef alongside
    the usual number, title and description.
    """
    day:         Optional[NonNegativeInt] = Field(default=None, validation_alias=AliasChoices("day", "number"))
    title:       Optional[str]            = None
    description: Optional[str]            = None
    video:       Optional[VideoRef]       = None

    @property
    def kind(self) -> Literal["text", "video"]:
        return "video" if self.video is not None else "text"

    @property
    def has_video(self) -> bool:
        return self.video is not None


class Specialist(_Content):
    name:    Optional[str] = None
    role:    Optional[str] = None
    photo:   Optional[str] = None
    contact: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("contact", "contactHandle", "contact-handle"),
    )


class TourCard(_Content):
    title: Optional[str] = None
    image: Optional[str] = None
    link:  Optional[str] = Field(default=None, validation_alias=AliasChoices("link", "target"))


class Seo(_Content):
    meta_title:       Optional[str] = Field(default=None, alias="metaTitle")
    meta_description: Optional[str] = Field(default=None, alias="metaDescription")


class ItineraryRecord(_Content):
    title:          Optional[str]            = None
    slug:           Optional[str]            = None
    duration_days:  Optional[NonNegativeInt] = Field(default=None, alias="durationDays")
    hero:           Optional[Hero]           = None
    highlights:     Tuple[Highlight, ...]    = ()
    places_visited: Tuple[Place, ...]        = Field(default=(), alias="placesVisited")
    day_by_day:     Tuple[DayEntry, ...]     = Field(default=(), alias="dayByDay")
    inclusions:     Tuple[str, ...]          = ()
    exclusions:     Tuple[str, ...]          = ()
    specialist:     Optional[Specialist]     = None
    other_tours:    Tuple[TourCard, ...]     = Field(default=(), alias="otherTours")
    seo:            Optional[Seo]            = None

    @field_validator(
        "highlights", "places_visited", "day_by_day",
        "inclusions", "exclusions", "other_tours",
        mode="before",
    )
    @classmethod
    def null_as_empty(cls, value):
        """Treat an explicit JSON null the same as a missing list."""
        return () if value is None else value

    @field_validator("inclusions", "exclusions")
    @classmethod
    def dedupe_in_order(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        """Order-preserving set: keep the first occurrence of each item."""
        return tuple(dict.fromkeys(value))
