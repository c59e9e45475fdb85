"""Core scene logic, independent of the web layer."""

from .scenes import assemble_scenes, derive_image_query, mechanical_split, split_scenes
from .types import FailureReason, Scene, UpstreamResult

__all__ = [
    "assemble_scenes",
    "derive_image_query",
    "mechanical_split",
    "split_scenes",
    "FailureReason",
    "Scene",
    "UpstreamResult",
]
