"""Where: src/cuemeta/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple type checks for speed.
"""

from __future__ import annotations

from cuemeta.config.config import (
    ITEM_SEPARATOR_DEFAULT,
    config as app_config,
)

# Cue sheet materialization ---------------------------------------------------

# Separator used when splitting album performer and genre strings into lists.
# An empty string disables splitting.
_item_separator = getattr(app_config, "item_separator", ITEM_SEPARATOR_DEFAULT)
ITEM_SEPARATOR: str = _item_separator if isinstance(_item_separator, str) else ITEM_SEPARATOR_DEFAULT


# Path resolution -------------------------------------------------------------

# Whether FILE references may be matched against directory entries ignoring
# case when the verbatim path does not exist.
RESOLVE_CASE_INSENSITIVE: bool = bool(getattr(app_config, "resolve_case_insensitive", True))


__all__ = [
    "ITEM_SEPARATOR",
    "RESOLVE_CASE_INSENSITIVE",
]
