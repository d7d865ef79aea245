"""Shallow merging of template data sets."""

from collections.abc import Mapping
from typing import Any


def merge_data(
    implicit: Mapping[str, Any],
    explicit: Mapping[str, Any],
    given: Mapping[str, Any],
) -> dict[str, Any]:
    """Merge three data sets, later sets taking precedence.

    Precedence is ``given > explicit > implicit``. The merge is shallow:
    nested mappings are replaced, not combined.

    Returns:
        A new dictionary; the inputs are not modified.
    """
    return {**implicit, **explicit, **given}
