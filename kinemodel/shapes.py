"""Solid shapes and groups of shapes placed in the workspace."""

from __future__ import annotations

from kinemodel.names import AnimationTarget, FunctionName, Selector
from kinemodel.points import PlanePoints
from kinemodel.transformations import Transformation
from kinemodel.vectors import Vec3

Vertex = tuple[float, float, float]

_POSITION_ATTRIBUTES = {
    FunctionName.X: "x",
    FunctionName.Y: "y",
    FunctionName.Z: "z",
}
_LIST_FUNCTIONS = frozenset(
    {FunctionName.POINTS, FunctionName.TRANSFORMATIONS, FunctionName.SHAPES}
)
_POSITION_SELECTORS = {Selector.X: "x", Selector.Y: "y", Selector.Z: "z"}


class Shape:
    """A visible object at a position, with transformations applied in order."""

    CLASS_NAME = "Shape"

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._position = Vec3(x, y, z)
        self.identifier = ""
        self.is_visible = True
        self.transformations: list[Transformation] = []
        self.reference_count = 0
        self.workspace_index: int | None = None
        self.vertices: list[Vertex] = []
        self.normals: list[float] = []
        self.indices: list[int] = []

    @property
    def position(self) -> Vec3:
        return self._position

    @position.setter
    def position(self, value: Vec3) -> None:
        # Updated in place so animation targets stay attached.
        self._position.assign(value)

    def add_position(self, other: Vec3) -> None:
        self.position = self._position + other

    def add_size(self, other: Vec3) -> None:
        """Grow the shape; shapes without a size of their own ignore this."""

    def show(self) -> None:
        self.is_visible = True

    def hide(self) -> None:
        self.is_visible = False

    def add_transformation(self, transformation: Transformation) -> None:
        if not isinstance(transformation, Transformation):
            raise TypeError("a transformation is required")
        transformation.reference_count += 1
        self.transformations.append(transformation)

    def initialize_vertex_buffers(self) -> None:
        """Recompute the geometry; shapes without geometry of their own keep none."""

    def set_sequence_identifier(self, sequence_number: int) -> None:
        self.identifier = f"{self.CLASS_NAME.lower()}{sequence_number}"

    def apply(self, function, argument) -> None:
        """Apply a named setting, or add a list element for list settings."""
        function = FunctionName(function)
        if function in _LIST_FUNCTIONS:
            self._apply_list(function, argument)
        elif function in _POSITION_ATTRIBUTES:
            setattr(self._position, _POSITION_ATTRIBUTES[function], float(argument))
        elif function is FunctionName.VISIBLE:
            self.is_visible = bool(argument)
        else:
            raise ValueError(f"{type(self).__name__} has no setting {function.name}")

    def _apply_list(self, function: FunctionName, element) -> None:
        if function is FunctionName.TRANSFORMATIONS:
            self.add_transformation(element)
        else:
            raise ValueError(f"{type(self).__name__} has no list {function.name}")

    def animation_target(self, selector) -> AnimationTarget | None:
        """The value driven by ``selector``, or None if there is no such value."""
        attribute = _POSITION_SELECTORS.get(Selector(selector))
        if attribute is None:
            return None
        return AnimationTarget(self._position, attribute, self, selector)

    def __repr__(self):
        return f"{type(self).__name__}({self.identifier!r}, {self._position})"


class Box(Shape):
    """A box of a given length, width and height centred on its position."""

    CLASS_NAME = "Box"
    NUMBER_OF_VERTICES = 8
    NUMBER_OF_TRIANGLES = 12
    NORMALS = (
        1.0, 1.0, 1.0, 1.0, 1.0, -1.0, 1.0, -1.0, 1.0, 1.0, -1.0, -1.0,
        -1.0, 1.0, 1.0, -1.0, 1.0, -1.0, -1.0, -1.0, 1.0, -1.0, -1.0, -1.0,
    )
    INDICES = (
        6, 2, 0, 6, 4, 0, 6, 7, 5, 6, 4, 5, 7, 3, 1, 7, 5, 1,
        2, 3, 1, 2, 0, 1, 6, 7, 3, 6, 2, 3, 4, 5, 1, 4, 0, 1,
    )

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        length: float = 1.0,
        width: float = 1.0,
        height: float = 1.0,
    ):
        super().__init__(x, y, z)
        self._size = Vec3(length, width, height)
        self.normals = list(self.NORMALS)
        self.indices = list(self.INDICES)
        self.initialize_vertex_buffers()

    @property
    def size(self) -> Vec3:
        """Length, width and height as x, y and z."""
        return self._size

    @size.setter
    def size(self, value: Vec3) -> None:
        self._size.assign(value)
        self.initialize_vertex_buffers()

    def add_size(self, other: Vec3) -> None:
        """Grow by a screen-space amount mapped onto length, width and height."""
        self.size = self._size + Vec3(-other.z, other.x, other.y)

    def set_sequence_identifier(self, sequence_number: int) -> None:
        self.identifier = f"box{sequence_number}"

    def initialize_vertex_buffers(self) -> None:
        """Recompute the eight corners of the box."""
        l = self._size.x / 2.0
        w = self._size.y / 2.0
        h = self._size.z / 2.0
        self.vertices = [
            (-w if i & 4 else w, -h if i & 2 else h, -l if i & 1 else l)
            for i in range(self.NUMBER_OF_VERTICES)
        ]

    def apply(self, function, argument) -> None:
        function = FunctionName(function)
        attribute = {
            FunctionName.LENGTH: "x",
            FunctionName.WIDTH: "y",
            FunctionName.HEIGHT: "z",
        }.get(function)
        if attribute is None:
            super().apply(function, argument)
            return
        setattr(self._size, attribute, float(argument))
        self.initialize_vertex_buffers()

    def animation_target(self, selector) -> AnimationTarget | None:
        attribute = {
            Selector.LENGTH: "x",
            Selector.WIDTH: "y",
            Selector.HEIGHT: "z",
        }.get(Selector(selector))
        if attribute is None:
            return super().animation_target(selector)
        return AnimationTarget(self._size, attribute, self, selector)


def _contains(container: Shape, shape: Shape) -> bool:
    if container is shape:
        return True
    return isinstance(container, Compound) and any(
        _contains(child, shape) for child in container.children
    )


class Compound(Shape):
    """A group of shapes moved and transformed together."""

    CLASS_NAME = "Compound"

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        super().__init__(x, y, z)
        self.children: list[Shape] = []

    def set_sequence_identifier(self, sequence_number: int) -> None:
        self.identifier = f"compound{sequence_number}"

    def add_child(self, shape: Shape) -> None:
        """Add a shape; it must come earlier in the workspace and not contain this group."""
        if not isinstance(shape, Shape):
            raise TypeError("a child shape is required")
        if (
            shape.workspace_index is not None
            and self.workspace_index is not None
            and shape.workspace_index >= self.workspace_index
        ):
            raise ValueError("a child must come before its compound in the workspace")
        if _contains(shape, self):
            raise ValueError("a compound cannot contain itself")
        shape.reference_count += 1
        self.children.append(shape)

    def __len__(self) -> int:
        return len(self.children)

    def _apply_list(self, function: FunctionName, element) -> None:
        if function is FunctionName.SHAPES:
            self.add_child(element)
        else:
            super()._apply_list(function, element)


class Loft(Shape):
    """A surface lofted through an ordered series of plane point groups."""

    CLASS_NAME = "Loft"

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        super().__init__(x, y, z)
        self.children: list[PlanePoints] = []

    def set_sequence_identifier(self, sequence_number: int) -> None:
        self.identifier = f"loft{sequence_number}"

    def add_child(self, plane_points: PlanePoints) -> None:
        if not isinstance(plane_points, PlanePoints):
            raise TypeError("a group of plane points is required")
        plane_points.reference_count += 1
        self.children.append(plane_points)

    def __len__(self) -> int:
        return len(self.children)

    def _apply_list(self, function: FunctionName, element) -> None:
        if function is FunctionName.POINTS:
            if not isinstance(element, PlanePoints) or len(element) == 0:
                raise ValueError("a loft section needs a non-empty group of plane points")
            self.add_child(element)
        else:
            super()._apply_list(function, element)