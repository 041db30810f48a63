## Slugs for roadmap URLs
import re

_WHITESPACE_RUN = re.compile(r"\s+")


def encode_slug(title: str) -> str:
    """Lowercase the title and collapse each whitespace run into one hyphen.

    Punctuation is kept as-is and nothing is percent-encoded; quoting for a
    URL happens where the link is built.
    """
    return _WHITESPACE_RUN.sub("-", title.lower())
