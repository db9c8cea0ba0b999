"""Bar segmentation and layout engine."""

from drumjot.engine.cache import LayoutCache
from drumjot.engine.layout import layout_loop, loop_offsets
from drumjot.engine.orchestrator import LayoutEngine
from drumjot.engine.segmentation import segment_track

__all__ = ["LayoutCache", "LayoutEngine", "layout_loop", "loop_offsets", "segment_track"]
