from __future__ import annotations

from urllib.parse import parse_qs, urlsplit, urlunsplit

# Query parameters WordPress uses for plain permalinks.
_ID_QUERY_KEYS = ("p", "page_id")


def strip_base(url: str, base_url: str) -> str | None:
    """Return the part of ``url`` after ``base_url``, or None if it is external.

    The prefix match is case-insensitive; leading slashes of the remainder are
    dropped, so the site root yields an empty string.
    """
    if not url.lower().startswith(base_url.lower()):
        return None
    return url[len(base_url):].lstrip("/")


def normalize_url(url: str) -> str:
    parts = urlsplit(url.strip())
    path = parts.path.rstrip("/")
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), path, "", ""))


def query_content_id(url: str) -> int | None:
    query = parse_qs(urlsplit(url.strip()).query)
    for key in _ID_QUERY_KEYS:
        for value in query.get(key, []):
            if value.isdigit() and int(value) > 0:
                return int(value)
    return None
