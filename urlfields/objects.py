"""
Value types accepted by the encoder and the template filler.
"""

import collections.abc
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

# None is an explicit "no value" (Absent), distinct from "".
ParameterValue = Union[
    str,
    int,
    float,
    bool,
    Mapping[str, Any],
    Sequence[Any],
    None,
]

ParametersMap = Mapping[str, ParameterValue]

# (escaped name, escaped value)
QueryItem = Tuple[str, str]
QueryItems = List[QueryItem]

TemplateValues = Optional[Mapping[str, Any]]


def is_map(value: Any) -> bool:
    return isinstance(value, collections.abc.Mapping)


def is_array(value: Any) -> bool:
    """
    Lists and tuples are arrays. Strings and bytes are scalars.
    """
    return isinstance(value, (list, tuple))


def format_scalar(value: Any) -> str:
    """
    Return the query representation of a single value.

    Booleans become "1" or "0". This must be checked before anything numeric,
    since bool is a subclass of int.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)
