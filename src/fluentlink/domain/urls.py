"""URL joining rules shared by link resolution.

Pure functions, no infrastructure dependencies.
"""

from __future__ import annotations

from urllib.parse import parse_qsl, urlencode


def join_links(*parts: str | None) -> str:
    """Join URL fragments with exactly one ``/`` between them.

    Query strings found in any part are merged (later keys win) and moved
    to the end. The last ``#fragment`` seen is kept. Empty parts are skipped::

        join_links("german", "about-us", "/")      # "german/about-us/"
        join_links("http://a.com/", "/es_ES/")     # "http://a.com/es_ES/"
        join_links("about-us", "?l=de_DE", "/")    # "about-us/?l=de_DE"
    """
    result = ""
    query: dict[str, str] = {}
    fragment: str | None = None

    for part in parts:
        if not part:
            continue
        if "#" in part:
            part, fragment = part.split("#", 1)
        if "?" in part:
            part, suffix = part.split("?", 1)
            query.update(parse_qsl(suffix, keep_blank_values=True))
        if not part:
            continue
        if result and not result.endswith("/") and not part.startswith("/"):
            result += "/" + part
        elif result.endswith("/") and part.startswith("/"):
            result += part.lstrip("/")
        else:
            result += part

    if query:
        result += "?" + urlencode(query)
    if fragment:
        result += "#" + fragment
    return result
