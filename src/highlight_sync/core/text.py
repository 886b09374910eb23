"""String helpers for display titles and document paths."""

import re
import unicodedata

ELLIPSIS = "…"


def truncate(text: str, length: int, *, ellipsis: str | None = ELLIPSIS) -> str:
    """Cut ``text`` to ``length`` characters, appending ``ellipsis`` if anything was cut."""
    if len(text) <= length:
        return text
    return text[:length] + (ellipsis or "")


def slugify(text: str, *, lower: bool = False) -> str:
    """Reduce ``text`` to ASCII letters, digits and single dashes."""
    ascii_text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^A-Za-z0-9]+", "-", ascii_text).strip("-")
    return slug.lower() if lower else slug
