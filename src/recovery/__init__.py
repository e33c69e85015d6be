"""
Secret recovery: point selection, share file loading and reconstruction.

Thin collaborators around the exact Newton interpolation core.
"""

from src.recovery.loader import decode_points, load_share_set, parse_share_set
from src.recovery.reconstructor import (
    ReconstructionConfig,
    SecretReconstructor,
    as_share_points,
    reconstruct,
    to_standard,
)
from src.recovery.selection import SelectionPolicy, select_points, validate_threshold

__all__ = [
    # Selection
    "SelectionPolicy",
    "select_points",
    "validate_threshold",
    # Reconstruction
    "ReconstructionConfig",
    "SecretReconstructor",
    "as_share_points",
    "reconstruct",
    "to_standard",
    # Loading
    "decode_points",
    "load_share_set",
    "parse_share_set",
]
