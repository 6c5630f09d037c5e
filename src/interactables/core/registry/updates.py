from __future__ import annotations

from collections.abc import Mapping

from ..props import PropValue, Props


def shallow_merge(base: Mapping[str, PropValue], partial: Mapping[str, PropValue]) -> Props:
    """Right-biased key union of ``base`` and ``partial``.

    Each key in ``partial`` replaces the whole value stored under that key in
    ``base``; nested mappings are not combined. Neither input is modified.
    """

    merged: Props = dict(base)
    for key, value in partial.items():
        merged[key] = value
    return merged
