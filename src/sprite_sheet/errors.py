"""Exceptions raised while building a spritesheet."""

from __future__ import annotations


class SpriteSheetError(Exception):
    """Base class for all spritesheet build failures."""


class PackingExhausted(SpriteSheetError):
    """No bin within the growth bound could hold every sprite."""


class RasterAllocationFailed(SpriteSheetError):
    """A bitmap of the requested dimensions could not be allocated."""


class InvalidMetadataGeometry(SpriteSheetError):
    """A metadata node exists but its bounding box is empty or malformed.

    Never fatal: the metadata extractor catches it and omits the field.
    """


class EncodingFailure(SpriteSheetError):
    """The PNG codec failed to produce output bytes."""


class EmptySpritesheet(SpriteSheetError):
    """A spritesheet was requested for zero sprites."""


class SvgLoadError(SpriteSheetError):
    """An SVG file could not be read, parsed or rasterized."""


class SpriteNameError(SpriteSheetError):
    """A sprite path cannot be turned into a name relative to its base directory."""
