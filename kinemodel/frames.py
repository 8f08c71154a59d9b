"""Animation key frames and the functions that drive values between them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from kinemodel.names import AnimationTarget, FunctionName, Selector

UNPRINTABLE = ".class"


class InterpolationType(IntEnum):
    """How a value reaches the one given for a frame."""

    SET_TO = 0
    LINEAR_TO = 1


class ReceiverKind(IntEnum):
    """What kind of object a frame function drives."""

    NONE = 0
    POINT_VALUE = 1
    SHAPE_POSITION = 2
    SHAPE_SIZE = 3
    TRANSFORMATION_VALUE = 4


def workspace_type_string(kind) -> str:
    """The name of an interpolation type as written in workspace files."""
    return {InterpolationType.SET_TO: "setTo", InterpolationType.LINEAR_TO: "linearTo"}[
        InterpolationType(kind)
    ]


def type_string(kind) -> str:
    """The name of an interpolation type as written in compiled output."""
    return f"FrameFunction::{InterpolationType(kind).name}"


@dataclass
class FrameFunction:
    """A value that a target should reach at a frame."""

    kind: InterpolationType
    target: AnimationTarget
    value: float
    receiver_kind: ReceiverKind = ReceiverKind.NONE

    def __post_init__(self):
        self.kind = InterpolationType(self.kind)
        self.receiver_kind = ReceiverKind(self.receiver_kind)

    @property
    def receiver(self):
        return self.target.receiver

    @property
    def selector(self) -> Selector:
        return self.target.selector

    def identifier(self) -> str:
        """The identifier of the driven object, or a placeholder if there is none."""
        if self.receiver_kind is ReceiverKind.NONE:
            return UNPRINTABLE
        return self.receiver.identifier

    def target_key(self) -> AnimationTarget:
        """The driven value; equal keys address the same value."""
        return self.target


@dataclass(frozen=True)
class FrameEnd:
    """Sets a target to its exact value when a frame is reached."""

    target: AnimationTarget
    value: float

    def finish_frame(self) -> None:
        self.target.set(self.value)


@dataclass(frozen=True)
class InterpolatedFrameFunction:
    """Moves a target from ``start`` towards ``end`` as a frame progresses."""

    kind: InterpolationType
    target: AnimationTarget
    start: float
    end: float

    def tick(self, percentage: float) -> None:
        if InterpolationType(self.kind) is InterpolationType.LINEAR_TO:
            self.target.set(self.start + percentage * (self.end - self.start))


def _add_if_absent(collection: list, item) -> None:
    if not any(existing is item for existing in collection):
        collection.append(item)


@dataclass
class Frame:
    """A key frame at a point in time with the values to reach there."""

    time: float
    functions: list[FrameFunction] = field(default_factory=list)
    interpolation_functions: list[InterpolatedFrameFunction] = field(default_factory=list)
    interpolated_shapes: list = field(default_factory=list)
    interpolated_transformations: list = field(default_factory=list)
    final_functions: list[FrameEnd] = field(default_factory=list)
    final_shapes: list = field(default_factory=list)
    final_transformations: list = field(default_factory=list)

    def add_frame_function(self, frame_function: FrameFunction) -> None:
        self.functions.append(frame_function)

    def _register(self, function: FrameFunction, shapes: list, transformations: list) -> None:
        if function.receiver_kind is ReceiverKind.SHAPE_SIZE:
            _add_if_absent(shapes, function.receiver)
        elif function.receiver_kind is ReceiverKind.TRANSFORMATION_VALUE:
            _add_if_absent(transformations, function.receiver)

    def build_interpolation_functions(self, previous: Frame) -> None:
        """Interpolate each non-immediate value from its value in ``previous``."""
        self.interpolation_functions.clear()
        self.interpolated_shapes.clear()
        self.interpolated_transformations.clear()
        for function in self.functions:
            if function.kind is InterpolationType.SET_TO:
                continue
            key = function.target_key()
            start = next((p for p in previous.functions if p.target_key() == key), None)
            if start is None:
                continue
            self.interpolation_functions.append(
                InterpolatedFrameFunction(function.kind, function.target, start.value, function.value)
            )
            self._register(function, self.interpolated_shapes, self.interpolated_transformations)

    def build_final_functions(self, next_frame: Frame) -> None:
        """Fix the values that ``next_frame`` will not interpolate from this frame."""
        self.final_functions.clear()
        self.final_shapes.clear()
        self.final_transformations.clear()
        for function in self.functions:
            if function.kind is not InterpolationType.SET_TO:
                key = function.target_key()
                following = next((f for f in next_frame.functions if f.target_key() == key), None)
                if following is not None and following.kind is not InterpolationType.SET_TO:
                    continue
            self.final_functions.append(FrameEnd(function.target, function.value))
            self._register(function, self.final_shapes, self.final_transformations)

    def percentage_from(self, time: float, previous: Frame) -> float:
        """How far ``time`` lies between ``previous`` and this frame."""
        return (time - previous.time) / (self.time - previous.time)

    def tick(self, time: float, percentage: float) -> bool:
        """Advance towards this frame; False once ``time`` has reached it."""
        if time >= self.time:
            return False
        for function in self.interpolation_functions:
            function.tick(percentage)
        for shape in self.interpolated_shapes:
            shape.initialize_vertex_buffers()
        for transformation in self.interpolated_transformations:
            transformation.update_matrix()
        return True

    def finalize(self) -> None:
        """Set every fixed value of this frame exactly."""
        for function in self.final_functions:
            function.finish_frame()
        for shape in self.final_shapes:
            shape.initialize_vertex_buffers()
        for transformation in self.final_transformations:
            transformation.update_matrix()

    def apply(self, function, argument: float) -> None:
        """Apply a named setting; only a non-negative time is accepted."""
        if function != FunctionName.TIME:
            raise ValueError(f"a frame has no setting {function!r}")
        if argument < 0:
            raise ValueError("frame time must not be negative")
        self.time = argument