"""
Percent-escaping for names and values placed in a URL query.
"""

import logging
import urllib.parse

# Query delimiters that must be escaped inside a name or value. "?" and "/"
# are allowed to stay as they are (RFC 3986, section 3.4).
GENERAL_DELIMITERS_TO_ENCODE = ":#[]@"
SUB_DELIMITERS_TO_ENCODE = "!$&'()*+,;="

# What remains of the RFC 3986 query character set once the delimiters above
# are removed: the unreserved characters (always safe for quote()) plus these.
SAFE = "/?"

logger = logging.getLogger("PercentEscaper")


def escape(string: str) -> str:
    """
    Percent-encode a string for use as a query name or value.

    If the string cannot be encoded (for example it holds a lone surrogate),
    it is returned unchanged. Callers cannot tell the two cases apart, so the
    fallback is logged.
    """
    try:
        return urllib.parse.quote(string, safe=SAFE, encoding="utf-8")
    except UnicodeEncodeError as exc:
        logger.warning(
            "Unable to escape %r, leaving it as is: %s", string, exc
        )
        return string
