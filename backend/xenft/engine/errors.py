"""Error taxonomy for the decode → classify → compose path.

Strict entry points raise these. The public entry points catch them and
substitute a safe default, so callers rendering a batch never see them.
"""

from __future__ import annotations


class XenftError(Exception):
    """Base class for all XENFT rendering errors."""


class DecodeError(XenftError):
    """Packed mint info could not be read as a non-negative integer."""


class ClassificationError(XenftError):
    """Class flags are missing or malformed."""


class CompositionError(XenftError):
    """Asset is missing fields required to compose an image."""


class ChainSessionError(XenftError):
    """Chain session used outside its connect → disconnect lifecycle."""
