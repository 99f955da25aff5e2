"""XENFT decode / derive / compose engine."""

from xenft.engine.color_cycle import current_scheme
from xenft.engine.composer import compose
from xenft.engine.decoder import decode_mint_info, decode_or_default
from xenft.engine.error_image import compose_error
from xenft.engine.errors import ClassificationError, CompositionError, DecodeError
from xenft.engine.pipeline import RenderResult, render_gallery, render_token
from xenft.engine.rarity import classify

__all__ = [
    "decode_mint_info",
    "decode_or_default",
    "current_scheme",
    "classify",
    "compose",
    "compose_error",
    "render_token",
    "render_gallery",
    "RenderResult",
    "DecodeError",
    "ClassificationError",
    "CompositionError",
]
