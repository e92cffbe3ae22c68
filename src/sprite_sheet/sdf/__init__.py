"""Signed distance field generation for SDF icons."""

from sprite_sheet.sdf.generator import (
    SDF_BUFFER,
    SDF_CUTOFF,
    SDF_RADIUS,
    render_sdf,
    sdf_pixels,
)

__all__ = ["SDF_BUFFER", "SDF_CUTOFF", "SDF_RADIUS", "render_sdf", "sdf_pixels"]
