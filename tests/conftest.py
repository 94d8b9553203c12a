from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Ensure project root is on the import path so we can import `services`, `models`, ...
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from config import SiteConfig  # noqa: E402

TEMPLATE_DIR = ROOT_DIR / "templates"
STATIC_DIR = ROOT_DIR / "static"

SAMPLE = {
    "title": "Rajasthan Forts",
    "slug": "rajasthan-forts",
    "durationDays": 3,
    "hero": {"video": "https://cdn.example.com/hero.mp4", "poster": "https://cdn.example.com/hero.jpg"},
    "highlights": [
        {"title": "Amber Fort", "description": "Elephant gate", "image": "a.jpg", "icon": "🏰"},
        {"title": "Hawa Mahal", "description": "Palace of winds", "image": "b.jpg", "icon": "🌬️"},
    ],
    "placesVisited": [{"name": "Jaipur", "icon": "🏙️"}],
    "dayByDay": [
        {"day": 1, "title": "Jaipur", "description": "City palace"},
        {
            "day": 2,
            "title": "Amer",
            "description": "Fort walk",
            "video": {
                "url": "https://www.youtube.com/watch?v=abc123",
                "poster": "p.jpg",
                "caption": "Amer at dawn",
                "credit": "Jane Doe",
            },
        },
    ],
    "inclusions": ["Hotel", "Breakfast", "Hotel"],
    "exclusions": ["Flights"],
    "specialist": {"name": "Ravi", "role": "Guide", "photo": "r.jpg", "contact": "ravi@example.com"},
    "otherTours": [{"title": "Kerala", "image": "k.jpg", "link": "/itineraries/kerala"}],
    "seo": {"metaTitle": "Rajasthan in 3 days", "metaDescription": "Forts and palaces"},
}


def write_itinerary(content_dir: Path, slug: str, data) -> Path:
    path = content_dir / f"{slug}.json"
    text = data if isinstance(data, str) else json.dumps(data)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def sample() -> dict:
    return json.loads(json.dumps(SAMPLE))


@pytest.fixture
def content_dir(tmp_path: Path, sample: dict) -> Path:
    root = tmp_path / "content"
    root.mkdir()
    write_itinerary(root, sample["slug"], sample)
    return root


@pytest.fixture
def site_config(content_dir: Path) -> SiteConfig:
    return SiteConfig(
        content_dir=content_dir,
        template_dir=TEMPLATE_DIR,
        static_dir=STATIC_DIR,
        log_level="DEBUG",
    )


@pytest.fixture
def write():
    return write_itinerary
