"""Locale normalization and translation merging for definition records."""

from __future__ import annotations

import logging

from ryandata_address_formats.models.definition import RawDefinition

logger = logging.getLogger(__name__)


def normalize_locale(locale: str) -> str:
    """Normalize a locale tag so that ``en_US`` and ``en-US`` are equivalent.

    Args:
        locale: Locale tag in either underscore or hyphen form.

    Returns:
        Locale tag in hyphen form.
    """
    return locale.replace("_", "-")


def apply_translation(definition: RawDefinition, locale: str | None = None) -> RawDefinition:
    """Translate a definition to the given locale.

    The translation for the exact normalized locale is merged over the
    base definition, translated fields winning. There is no fallback to
    a broader locale (``fr-CA`` never falls back to ``fr``): when the
    definition has no translation for the locale it is returned as is.

    Args:
        definition: Base definition record.
        locale: Requested locale, or None for no translation.

    Returns:
        The translated definition, or the original one unchanged.
    """
    if locale is None:
        return definition

    normalized = normalize_locale(locale)
    translation = (definition.translations or {}).get(normalized)
    if translation is None:
        return definition

    logger.debug("Applying %s translation to %s definition", normalized, definition.country_code)
    return definition.model_copy(update={**translation.overrides(), "locale": normalized})
