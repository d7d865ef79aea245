"""Placeholder substitution for file templates.

Templates use ``{{key}}`` markers. The key is everything between the
braces (non-greedy, no surrounding whitespace is stripped).
"""

import logging
import re
from collections.abc import Mapping

from layoutkit.core.events import Monitor, Observer

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{\{(.*?)\}\}")


def format_value(value: object) -> str:
    """Render a data value as text.

    Booleans are lowercase and integral floats drop the fraction, so
    TOML values print as written (``true``, ``1``).
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def populate_template(
    template: str,
    data: Mapping[str, object],
    observer: Observer | None = None,
) -> str:
    """Render a template by substituting ``{{key}}`` placeholders.

    Keys present in ``data`` are replaced with their text form (see
    format_value). Unknown keys are left verbatim and reported with
    one ``warn`` event each.

    Args:
        template: Template text containing placeholders.
        data: Mapping of placeholder names to values.
        observer: Optional monitoring callback.

    Returns:
        The rendered text.
    """
    monitor = Monitor(observer, log=logger)

    def _substitute(match: re.Match[str]) -> str:
        key = match.group(1)
        if key in data:
            return format_value(data[key])
        monitor.warn(f"Missing data for placeholder: {key}", {"key": key})
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_substitute, template)

