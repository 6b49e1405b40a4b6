"""Helpers for values that are supplied once per language."""
from __future__ import annotations

import logging
from typing import Dict
from typing import Mapping

from django.conf import settings

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE_KEY = ""


def installed_language_codes():
    return [code for code, _ in settings.LANGUAGES]


def get_i18n_values(
    values: Mapping[str, str],
    skip_default: bool = False,
) -> Dict[str, str]:
    """
    Spread a mapping of language code to text over every installed language.

    Languages missing from ``values`` fall back to the value for
    ``settings.LANGUAGE_CODE``, or to the first value given when that is also
    missing. A value keyed with the empty string is treated as the value for
    the default language unless that language has its own value.

    Unless ``skip_default`` is set the result also carries the fallback value
    under the empty string key, for consumers that have no language context.

    :param values: Mapping of language code to text
    :param skip_default: Leave the language-neutral entry out of the result
    :rtype: dict
    """
    if not values:
        return {}

    values = dict(values)
    neutral = values.pop(DEFAULT_LANGUAGE_KEY, None)
    if neutral is not None:
        values.setdefault(settings.LANGUAGE_CODE, neutral)

    fallback = values.get(settings.LANGUAGE_CODE)
    if fallback is None:
        fallback = next(iter(values.values()))

    result = {}
    for code in installed_language_codes():
        if code not in values:
            logger.debug("No value for language '%s', using fallback", code)
        result[code] = values.get(code, fallback)

    if not skip_default:
        result[DEFAULT_LANGUAGE_KEY] = fallback

    return result
