## Shared Jinja2 environment for the HTML pages
from datetime import datetime
from pathlib import Path
from urllib.parse import quote

from fastapi.templating import Jinja2Templates

from studypath.roadmaps.slug import encode_slug

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def roadmap_url(title: str) -> str:
    slug = quote(encode_slug(title), safe="")
    if slug and set(slug) == {"."}:
        # "." and ".." would be collapsed as dot-segments by clients
        slug = slug.replace(".", "%2E")
    return "/roadmap/" + slug


def long_date(value: datetime) -> str:
    # e.g. "October 7, 2026"
    return f"{value:%B} {value.day}, {value.year}"


templates.env.globals["roadmap_url"] = roadmap_url
templates.env.filters["long_date"] = long_date
