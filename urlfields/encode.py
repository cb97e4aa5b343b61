"""
Encode a (possibly nested) parameters map as a URL query string.
"""

import logging
import re
import urllib.parse
from typing import Any, Optional

from .errors import DataNotEncodableError
from .escape import escape
from .objects import (
    ParametersMap,
    QueryItems,
    format_scalar,
    is_array,
    is_map,
)

# Characters that make a string unusable as a URL without prior escaping.
INVALID_URL_CHARS = re.compile(r'[\s\x00-\x1f\x7f"<>\\^`{|}]')

logger = logging.getLogger("QueryEncoder")


def url_encoded_string(
    parameters: ParametersMap, base: Optional[str] = ""
) -> str:
    """
    Encode parameters as a query string, or append them to a base URL.

    Without a base, keys are sorted and nested maps and arrays are expanded
    into bracketed keys (``a[b]=1``, ``a[]=1&a[]=2``). The result has no
    leading "?".

    With a base, the top-level values are stringified as they are (no
    expansion) and appended to the URL's existing query.

    Keys whose value is None are left out.

    :raises DataNotEncodableError: if the base cannot be parsed as a URL
    """
    if len(parameters) == 0:
        return base or ""

    if not base:
        components: QueryItems = []
        for key in sorted(parameters.keys()):
            value = parameters[key]
            if value is None:
                logger.debug("Skipping %s: no value", key)
                continue
            components += query_components(key, value)
        return "&".join(f"{name}={value}" for name, value in components)

    return _compose_url(parameters, base)


def add_url_encoded_fields(url: str, fields: Optional[ParametersMap]) -> str:
    """
    Append fields to the query of url. With no fields, url is returned as is.
    """
    if fields is None:
        return url
    return url_encoded_string(fields, base=url)


def query_components(key: str, value: Any) -> QueryItems:
    """
    Flatten one value into escaped (name, value) pairs.

    Map entries recurse as ``key[name]`` in the map's order, array elements
    as ``key[]`` in array order. The brackets added here are left as they
    are; the key text around them is escaped. None values nested inside maps
    and arrays are skipped, the same as at the top level.
    """
    return _components(escape(key), value)


def _components(name: str, value: Any) -> QueryItems:
    if value is None:
        return []
    if is_map(value):
        components: QueryItems = []
        for nested_key, nested_value in value.items():
            components += _components(
                f"{name}[{escape(str(nested_key))}]", nested_value
            )
        return components
    if is_array(value):
        components = []
        for nested_value in value:
            components += _components(f"{name}[]", nested_value)
        return components
    return [(name, escape(format_scalar(value)))]


def _compose_url(parameters: ParametersMap, base: str) -> str:
    if INVALID_URL_CHARS.search(base):
        raise DataNotEncodableError(parameters, f"invalid base URL {base!r}")

    try:
        parts = urllib.parse.urlsplit(base)
        # Accessing port validates it.
        parts.port
    except ValueError as exc:
        raise DataNotEncodableError(parameters, str(exc)) from exc

    items = [
        (escape(key), escape(format_scalar(value)))
        for key, value in parameters.items()
        if value is not None
    ]
    appended = "&".join(f"{name}={value}" for name, value in items)
    query = "&".join(q for q in (parts.query, appended) if q)

    try:
        url = urllib.parse.urlunsplit(parts._replace(query=query))
    except (TypeError, ValueError) as exc:
        raise DataNotEncodableError(parameters, str(exc)) from exc

    logger.debug("Composed %s", url)
    return url
