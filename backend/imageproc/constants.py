"""Shared constants for imageproc."""

from __future__ import annotations

# Pillow modes that carry an alpha channel
ALPHA_MODES = frozenset({"RGBA", "RGBa", "LA", "La", "PA"})

# Modes that Lanczos resampling and every encoder handle as they are
OPAQUE_MODES = frozenset({"L", "RGB"})

# Single band integer modes, read as 16 bit samples
HIGH_DEPTH_MODES = frozenset({"I", "I;16", "I;16L", "I;16B", "I;16N"})

# Single band float modes, read as samples from 0.0 to 1.0
FLOAT_MODES = frozenset({"F"})

# Encoders that accept an explicit ``quality`` save argument
QUALITY_FORMATS = frozenset({"JPEG", "WEBP", "AVIF"})

# JPEG 2000 quality is a compression ratio, 1:1 at full quality up to this
JPEG2000_MAX_COMPRESSION = 100
