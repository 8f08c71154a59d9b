import io

import pytest

from kinemodel.animation import Animation
from kinemodel.frames import InterpolationType
from kinemodel.names import Selector
from kinemodel.points import PlanePoints, Point
from kinemodel.printing import CompilePrinter
from kinemodel.round_shapes import Cone, Cylinder
from kinemodel.shapes import Box, Compound, Loft, Shape
from kinemodel.stream import IndentedStream
from kinemodel.transformations import Rotate, Scale, Translate


def _printer():
    buffer = io.StringIO()
    return CompilePrinter(IndentedStream(buffer)), buffer


def _named(obj, identifier):
    obj.identifier = identifier
    return obj


def test_scale_matches_compiled_output():
    printer, buffer = _printer()
    printer.print_transformation(_named(Scale(6.57143, 2.5974, 20.974), "bodySphereScale"))
    assert buffer.getvalue() == (
        "Scale bodySphereScale(/* x */ 6.57143, /* y */ 2.5974, /* z */ 20.974);\n"
    )


def test_translate_matches_compiled_output():
    printer, buffer = _printer()
    printer.print_transformation(_named(Translate(0, -5, 0), "legModelTranslate"))
    assert buffer.getvalue() == "Translate legModelTranslate(/* x */ 0, /* y */ -5, /* z */ 0);\n"


def test_rotate_matches_compiled_output():
    printer, buffer = _printer()
    rotate = _named(Rotate(68.1135, -0.820087, 0, 0.434167), "leftProthoracicFemurModelRotate")
    printer.print_transformation(rotate)
    assert buffer.getvalue() == (
        "Rotate leftProthoracicFemurModelRotate(/* angle */ 68.1135, "
        "/* x */ -0.820087, /* y */ 0, /* z */ 0.434167);\n"
    )


def test_hidden_cylinder_with_transformations_matches_compiled_output():
    printer, buffer = _printer()
    cylinder = _named(Cylinder(0, 0, 0, 10, 5), "leftProthoracicFemur")
    cylinder.hide()
    for name in ("leftProthoracicFemurModelRotate", "prothoracicFemurModelScale"):
        cylinder.add_transformation(_named(Scale(1, 1, 1), name))
    cylinder.add_transformation(_named(Translate(0, -5, 0), "legModelTranslate"))
    printer.print_shape(cylinder)
    assert buffer.getvalue() == (
        "Cylinder leftProthoracicFemur(/* x */ 0, /* y */ 0, /* z */ 0, /* height */ 10, /* radius */ 5);\n"
        "\tleftProthoracicFemur.hide();\n"
        "\tleftProthoracicFemur.addTransformation(&leftProthoracicFemurModelRotate);\n"
        "\tleftProthoracicFemur.addTransformation(&prothoracicFemurModelScale);\n"
        "\tleftProthoracicFemur.addTransformation(&legModelTranslate);\n"
    )


def test_compound_matches_compiled_output():
    printer, buffer = _printer()
    compound = _named(Compound(20, -32.4675, 12.857), "leftProthoracicTarsusCompound")
    compound.hide()
    compound.add_transformation(_named(Rotate(0, 0, 0, 0), "leftProthoracicTarsusWorldRotate"))
    compound.add_child(_named(Cylinder(0, 0, 0, 10, 5), "leftProthoracicTarsus"))
    printer.print_shape(compound)
    assert buffer.getvalue() == (
        "Compound leftProthoracicTarsusCompound(/* x */ 20, /* y */ -32.4675, /* z */ 12.857);\n"
        "\tleftProthoracicTarsusCompound.hide();\n"
        "\tleftProthoracicTarsusCompound.addTransformation(&leftProthoracicTarsusWorldRotate);\n"
        "\tleftProthoracicTarsusCompound.addChild(&leftProthoracicTarsus);\n"
    )


def test_visible_shape_without_links_is_one_line():
    printer, buffer = _printer()
    printer.print_shape(_named(Cone(1, 2, 3, 4, 5), "cone1"))
    text = buffer.getvalue()
    assert text.startswith("Cone cone1(")
    assert text.count("\n") == 1
    assert "/* height */ 4, /* radius */ 5);" in text
    assert ".hide" not in text


def test_box_prints_size_labels():
    printer, buffer = _printer()
    printer.print_shape(_named(Box(0, 0, 0, 2, 3, 4), "box1"))
    assert "/* length */ 2, /* width */ 3, /* height */ 4);" in buffer.getvalue()


def test_loft_lists_children():
    printer, buffer = _printer()
    loft = _named(Loft(), "loft1")
    section = _named(PlanePoints(), "section")
    section.add_child(Point())
    loft.add_child(section)
    printer.print_shape(loft)
    assert buffer.getvalue().endswith("\tloft1.addChild(&section);\n")


def test_point_and_plane_points():
    printer, buffer = _printer()
    printer.print_point(_named(Point(1, 2, 3), "p"))
    plane = _named(PlanePoints(1, 0, 0, 0), "plane")
    plane.add_child(_named(Point(), "a"))
    plane.add_child(_named(Point(), "b"))
    printer.print_point(plane)
    lines = buffer.getvalue().split("\n")
    assert lines[0] == "Point p(/* x */ 1, /* y */ 2, /* z */ 3);"
    assert lines[1].startswith("PlanePoints plane(/* type */ 1, /* x */ 0")
    assert lines[2:] == ["\tplane.addChild(&a);", "\tplane.addChild(&b);", ""]


def test_print_calls_with_empty_list_writes_nothing():
    printer, buffer = _printer()
    printer.print_calls([], "x", ".addChild")
    printer.print_call_if(False, "x", ".hide")
    assert buffer.getvalue() == ""


def test_animation_with_functions():
    printer, buffer = _printer()
    point = _named(Point(), "p")
    animation = Animation()
    animation.add_frame(0)
    animation.add_frame_function(InterpolationType.SET_TO, point, Selector.X, 1)
    animation.add_frame(1)
    printer.print_animation(animation)
    assert buffer.getvalue() == (
        "Animation animation;\n"
        "\tanimation.addFrame(0);\n"
        "\t\tanimation.addFrameFunction(FrameFunction::SET_TO, &p, Animation::X, 1);\n"
        "\tanimation.addFrame(1);\n"
        "\t\n"
    )
    assert printer.stream.indentation == 0


def test_empty_animation():
    printer, buffer = _printer()
    printer.print_animation(Animation())
    assert buffer.getvalue() == "Animation animation;\n"


def test_unprintable_shape_raises():
    printer, _ = _printer()
    with pytest.raises(TypeError):
        printer.print_shape(Shape())