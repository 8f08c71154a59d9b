"""Key-frame animation of point, shape and transformation values."""

from __future__ import annotations

from kinemodel.frames import Frame, FrameFunction, InterpolationType, ReceiverKind
from kinemodel.names import Selector
from kinemodel.points import Point
from kinemodel.transformations import Transformation

_POSITION_SELECTORS = frozenset({Selector.X, Selector.Y, Selector.Z})


def _receiver_kind(receiver, selector: Selector) -> ReceiverKind:
    if isinstance(receiver, Point):
        return ReceiverKind.POINT_VALUE
    if isinstance(receiver, Transformation):
        return ReceiverKind.TRANSFORMATION_VALUE
    if selector in _POSITION_SELECTORS:
        return ReceiverKind.SHAPE_POSITION
    return ReceiverKind.SHAPE_SIZE


class Animation:
    """An ordered cycle of key frames that drives values over time."""

    CLASS_NAME = "Animation"

    def __init__(self):
        self.frames: list[Frame] = []
        self._initialized = False
        self._frame_index = 0
        self._current: Frame | None = None
        self._next: Frame | None = None

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def add_frame(self, frame_or_time) -> Frame:
        """Append a frame, or a new frame at the given time; return it."""
        frame = frame_or_time if isinstance(frame_or_time, Frame) else Frame(frame_or_time)
        self.frames.append(frame)
        return frame

    def apply_to_last_frame(self, function, argument: float) -> None:
        """Apply a named setting to the most recently added frame."""
        if not self.frames:
            raise ValueError("the animation has no frames")
        self.frames[-1].apply(function, argument)

    def add_frame_function(self, kind, receiver, selector, value: float) -> FrameFunction:
        """Make the last frame drive ``selector`` of ``receiver`` towards ``value``."""
        if not self.frames:
            raise ValueError("the animation has no frames")
        kind = InterpolationType(kind)
        selector = Selector(selector)
        target = receiver.animation_target(selector)
        if target is None:
            raise ValueError(f"{type(receiver).__name__} has no animated value {selector.name}")
        function = FrameFunction(kind, target, value, _receiver_kind(receiver, selector))
        self.frames[-1].add_frame_function(function)
        return function

    def reset(self) -> None:
        """Return a built animation to its first frame."""
        if not self._initialized:
            return
        self._current = self.frames[0]
        self._next = self.frames[1]
        self._frame_index = 2 % len(self.frames)
        self._current.finalize()

    def build(self) -> None:
        """Prepare the frames for playing; times must strictly increase."""
        if len(self.frames) < 2:
            raise ValueError("an animation needs at least two frames")
        for previous, frame in zip(self.frames, self.frames[1:]):
            if previous.time >= frame.time:
                raise ValueError(
                    f"frame times must increase: {previous.time:g} is not before {frame.time:g}"
                )
        count = len(self.frames)
        for index, frame in enumerate(self.frames):
            frame.build_interpolation_functions(self.frames[index - 1])
            frame.build_final_functions(self.frames[(index + 1) % count])
        self._initialized = True
        self.reset()

    def delete_all_frames(self) -> None:
        self._initialized = False
        self._current = None
        self._next = None
        self.frames.clear()

    def tick(self, time: float) -> bool:
        """Advance to ``time``; False when the cycle has ended and restarted."""
        if not self._initialized:
            raise RuntimeError("the animation has not been built")
        following = self._next
        if not following.tick(time, following.percentage_from(time, self._current)):
            following.finalize()
            self._current = following
            self._next = self.frames[self._frame_index]
            self._frame_index = (self._frame_index + 1) % len(self.frames)
            if self._frame_index == 1:
                self.reset()
                return False
        return True