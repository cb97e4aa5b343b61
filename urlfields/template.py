"""
Placeholder substitution for path templates such as "/users/{id}".
"""

import logging

from .objects import TemplateValues

logger = logging.getLogger("TemplateFiller")


def fill(template: str, values: TemplateValues) -> str:
    """
    Replace each "{key}" in template with the matching value.

    Keys are substituted one after another in the order of values, so text
    inserted for one key is itself searched for the placeholders of the
    keys that follow. Keys with a None value are skipped and their
    placeholders are left in place. Values are not escaped.
    """
    if values is None:
        return template

    result = template
    for key, value in values.items():
        if value is None:
            logger.debug("Not filling {%s}: no value", key)
            continue
        result = result.replace(f"{{{key}}}", str(value))
    return result
