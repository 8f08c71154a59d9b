"""Printing workspace objects as source statements that rebuild them."""

from __future__ import annotations

from collections.abc import Sequence

from kinemodel.animation import Animation
from kinemodel.frames import Frame, FrameFunction, type_string
from kinemodel.names import selector_string
from kinemodel.points import PlanePoints, Point
from kinemodel.round_shapes import Cone, Cylinder
from kinemodel.shapes import Box, Compound, Loft, Shape
from kinemodel.stream import IndentedStream
from kinemodel.transformations import Rotate, Scale, Transformation, Translate
from kinemodel.vectors import Vec3


class CompilePrinter:
    """Writes objects as constructor calls followed by the calls that link them."""

    def __init__(self, stream: IndentedStream | None = None):
        self.stream = stream if stream is not None else IndentedStream()

    def print_class(self, name: str, identifier: str) -> None:
        self.stream.write(name).write(" ").write(identifier).write("(")

    def end_constructor(self) -> None:
        self.stream.write(");").endl()

    def print_labelled_vec3(self, vector: Vec3, x: str, y: str, z: str) -> None:
        (
            self.stream.write("/* ").write(x).write(" */ ").write(vector.x)
            .write(", /* ").write(y).write(" */ ").write(vector.y)
            .write(", /* ").write(z).write(" */ ").write(vector.z)
        )

    def print_labelled_float(self, value: float, label: str) -> None:
        self.stream.write("/* ").write(label).write(" */ ").write(value)

    def print_all_identifiers_in(self, items: Sequence, label: str) -> None:
        """One ``label(&identifier);`` call per item, each on its own line."""
        for position, item in enumerate(items):
            if position:
                self.stream.endl()
            self.stream.write(label).write("(&").write(item.identifier).write(");")

    def print_call_if(self, predicate: bool, identifier: str, method: str) -> None:
        if predicate:
            self.stream.indent_once().write(identifier).write(method).write("();").endl()

    def print_calls(self, items: Sequence, identifier: str, method: str) -> None:
        if not items:
            return
        self.stream.increase_indent().indent_once()
        self.print_all_identifiers_in(items, identifier + method)
        self.stream.decrease_indent().endl()

    def print_point(self, point: Point) -> None:
        self.print_class(point.CLASS_NAME, point.identifier)
        if isinstance(point, PlanePoints):
            self.print_labelled_float(float(int(point.type)), "type")
            self.stream.write(", ")
            self.print_labelled_vec3(point.position, "x", "y", "z")
            self.end_constructor()
            self.print_calls(point.children, point.identifier, ".addChild")
            return
        self.print_labelled_vec3(point.position, "x", "y", "z")
        self.end_constructor()

    def print_shape(self, shape: Shape) -> None:
        if not isinstance(shape, (Box, Cone, Cylinder, Compound, Loft)):
            raise TypeError(f"cannot print a {type(shape).__name__}")
        self.print_class(shape.CLASS_NAME, shape.identifier)
        self.print_labelled_vec3(shape.position, "x", "y", "z")
        if isinstance(shape, Box):
            self.stream.write(", ")
            self.print_labelled_vec3(shape.size, "length", "width", "height")
        elif isinstance(shape, (Cone, Cylinder)):
            self.stream.write(", ")
            self.print_labelled_float(shape.height, "height")
            self.stream.write(", ")
            self.print_labelled_float(shape.radius, "radius")
        self.end_constructor()
        self.print_call_if(not shape.is_visible, shape.identifier, ".hide")
        self.print_calls(shape.transformations, shape.identifier, ".addTransformation")
        if isinstance(shape, (Compound, Loft)):
            self.print_calls(shape.children, shape.identifier, ".addChild")

    def print_transformation(self, transformation: Transformation) -> None:
        if not isinstance(transformation, (Translate, Rotate, Scale)):
            raise TypeError(f"cannot print a {type(transformation).__name__}")
        self.print_class(transformation.CLASS_NAME, transformation.identifier)
        if isinstance(transformation, Rotate):
            self.print_labelled_float(transformation.angle, "angle")
            self.stream.write(", ")
        self.print_labelled_vec3(transformation.components, "x", "y", "z")
        self.end_constructor()

    def print_animation(self, animation: Animation) -> None:
        self.stream.write("Animation animation;").endl()
        self.print_frames(animation.frames)

    def print_frames(self, frames: Sequence[Frame]) -> None:
        if not frames:
            return
        self.stream.increase_indent().indent_once()
        for frame in frames:
            self.stream.write("animation.addFrame(").write(frame.time).write(");")
            self.print_frame_functions(frame.functions)
        self.stream.decrease_indent().endl()

    def print_frame_functions(self, functions: Sequence[FrameFunction]) -> None:
        if not functions:
            self.stream.endl()
            return
        self.stream.increase_indent()
        for function in functions:
            (
                self.stream.endl()
                .write("animation.addFrameFunction(")
                .write(type_string(function.kind)).write(", &")
                .write(function.identifier()).write(", ")
                .write(selector_string(function.selector)).write(", ")
                .write(function.value).write(");")
            )
        self.stream.decrease_indent().endl()