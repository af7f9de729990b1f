import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """
    Turns human text into a URL-safe identifier.

    "Organic Cotton T-Shirt" -> "organic-cotton-t-shirt". Any input gives a
    string back, possibly empty.
    """
    if not value:
        return ""
    return _NON_ALNUM.sub("-", str(value).lower()).strip("-")
