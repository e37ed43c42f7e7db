"""Building frame sequences from per-frame draw functions.

A draw function takes a fresh flat buffer and a frame index and fills the
buffer in place. Frames share no state, so they can be built lazily, in
order, or on a thread pool.
"""

from collections.abc import Callable, Iterator, MutableSequence
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Optional

from glyphbeat.matrix import FlatBuffer, create_empty_flat

# (buffer, frame_index) -> None
FrameDrawer = Callable[[MutableSequence[int], int], None]


def _build_frame(draw: FrameDrawer, frame_index: int) -> FlatBuffer:
    buf = create_empty_flat()
    draw(buf, frame_index)
    return buf


def iter_frames(frame_count: int, draw: FrameDrawer) -> Iterator[FlatBuffer]:
    """Lazily yield frames 0..frame_count-1, each on a fresh buffer."""
    for frame_index in range(frame_count):
        yield _build_frame(draw, frame_index)


def build_frames(frame_count: int, draw: FrameDrawer, max_workers: Optional[int] = None) -> list[FlatBuffer]:
    """
    Build a whole frame sequence.

    Args:
        frame_count: Number of frames (0 or less gives an empty list)
        draw: Per-frame draw function
        max_workers: Build frames on a thread pool of this size; None builds
            them sequentially. Order is preserved either way.

    Returns:
        List of frame_count flat buffers
    """
    if frame_count <= 0:
        return []

    if max_workers is None:
        return list(iter_frames(frame_count, draw))

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(partial(_build_frame, draw), range(frame_count)))
