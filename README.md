# kinemodel

A small scene model for building articulated 3D figures out of primitive
shapes, placing them with transformations, animating their values with
keyframes, and writing the scene out as constructor statements.

## Modules

- `kinemodel.units`: `from_mm`, `to_mm`, `degrees_to_radians`,
  `radians_to_degrees`. Lengths are counted in tenths of a millimetre.
- `kinemodel.vectors.Vec3`: a mutable three-component vector with `+`,
  negation, `scaled`, `cross`, `length`, `normalized` (which raises
  `ValueError` for a zero vector) and iteration over `x`, `y`, `z`.
- `kinemodel.stream.IndentedStream`: wraps a text stream (standard output by
  default) and writes strings and numbers (numbers in `%g` form), with
  `increase_indent`, `decrease_indent`, `indent`, `indent_once` and `endl`,
  which ends the line and indents the next one with tabs.
- `kinemodel.names`: the `FunctionName` and `Selector` enums,
  `selector_from_workspace_string` (unknown names give `Selector.NONE`),
  `workspace_selector_string` and `selector_string`.
- `kinemodel.points`: `Point` and `PlanePoints`, a point holding an ordered
  list of child points in the `PlaneType.XY`, `XZ` or `YZ` plane.
- `kinemodel.transformations`: `Translate`, `Rotate` (angle in degrees about
  an axis) and `Scale`. Each keeps a row-major 4×4 `matrix` that
  `update_matrix()` recomputes from its values.
- `kinemodel.shapes`: `Box`, `Compound` (a group of shapes; a child must come
  earlier in the workspace order and a compound cannot contain itself) and
  `Loft` (an ordered series of `PlanePoints`).
  `kinemodel.round_shapes`: `Cone` and `Cylinder`.
  `Box`, `Cone` and `Cylinder` compute their vertices, normals and triangle
  indices; `initialize_vertex_buffers()` recomputes them after a size change.
  Shapes accept named settings through `apply(function, argument)` and raise
  `ValueError` for settings they do not have.
- `kinemodel.grid`: `Grid` produces the end points of its lines on any
  `GridPlane` with `line_vertices(plane)`; the spacing is clamped between
  1 and 100 units (0.1 mm to 10 mm), and `increase()` / `decrease()` change
  it tenfold.
- `kinemodel.frames`: `Frame`, `FrameFunction`, `FrameEnd` and
  `InterpolatedFrameFunction`. A frame function either sets a value when its
  frame is reached (`InterpolationType.SET_TO`) or moves it linearly from its
  value in the previous frame (`InterpolationType.LINEAR_TO`).
- `kinemodel.animation.Animation`: a cycle of frames. `build()` needs at
  least two frames with strictly increasing times (otherwise `ValueError`);
  `tick(time)` advances the driven values and returns `False` when the cycle
  ends and starts again.
- `kinemodel.printing.CompilePrinter`: writes points, shapes,
  transformations and an animation as constructor and method-call statements
  through an `IndentedStream`.

## Example

```python
import io

from kinemodel.animation import Animation
from kinemodel.frames import InterpolationType
from kinemodel.names import Selector
from kinemodel.printing import CompilePrinter
from kinemodel.round_shapes import Cylinder
from kinemodel.stream import IndentedStream
from kinemodel.transformations import Rotate

rotate = Rotate(0.0, 0.0, 0.0, 1.0)
rotate.identifier = "legRotate"
leg = Cylinder(0.0, 0.0, 0.0, 10.0, 5.0)
leg.identifier = "leg"
leg.add_transformation(rotate)

animation = Animation()
animation.add_frame(0.0)
animation.add_frame_function(InterpolationType.SET_TO, rotate, Selector.ANGLE, 0.0)
animation.add_frame(1.0)
animation.add_frame_function(InterpolationType.LINEAR_TO, rotate, Selector.ANGLE, 45.0)
animation.build()
animation.tick(0.5)
print(rotate.angle)  # 22.5

out = io.StringIO()
printer = CompilePrinter(IndentedStream(out))
printer.print_transformation(rotate)
printer.print_shape(leg)
printer.print_animation(animation)
print(out.getvalue())
```

## What it does not do

The package is a model only. It opens no window and draws nothing: shapes and
the grid compute their geometry as plain lists but nothing renders them, and a
`Loft` computes no surface of its own. There is no workspace that reads or
saves scene files, no interactive editor and no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```