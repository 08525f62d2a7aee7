# Where: cuemeta.shared.__init__
# What: Provide a concise import surface for shared dataclasses.
# Why: Encourage consistent reuse of shared types across features.

"""Shared cross-cutting dataclasses exposed at the package level."""

from .external_tag import EmbeddedArt, ExternalTag

__all__ = ["EmbeddedArt", "ExternalTag"]
