from .encode import (
    add_url_encoded_fields,
    query_components,
    url_encoded_string,
)
from .errors import DataNotEncodableError, EncodeError
from .escape import escape
from .template import fill
from .version import __version__

__all__ = [
    "DataNotEncodableError",
    "EncodeError",
    "__version__",
    "add_url_encoded_fields",
    "escape",
    "fill",
    "query_components",
    "url_encoded_string",
]
