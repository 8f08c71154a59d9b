"""Function names used in workspace files and animation selectors."""

from __future__ import annotations

from enum import IntEnum


class FunctionName(IntEnum):
    """Named settings that can be applied to workspace objects."""

    X = 0
    Y = 1
    Z = 2
    LENGTH = 3
    WIDTH = 4
    HEIGHT = 5
    RADIUS = 6
    ANGLE = 7
    TIME = 8
    TYPE = 9
    VISIBLE = 10
    IS_NUMERIC = 11
    POINTS = 12
    TRANSFORMATIONS = 13
    SHAPES = 14
    IS_LIST = 15
    SET_TO = 16
    LINEAR_TO = 17
    IS_INTERPOLATION = 18


class Selector(IntEnum):
    """Which value of an object an animation frame function drives."""

    NONE = 0
    X = 1
    Y = 2
    Z = 3
    LENGTH = 4
    WIDTH = 5
    HEIGHT = 6
    RADIUS = 7
    ANGLE = 8


class AnimationTarget:
    """A single float attribute that an animation can read and write.

    Two targets are equal when they address the same attribute of the very
    same holder object.
    """

    __slots__ = ("holder", "attribute", "receiver", "selector")

    def __init__(self, holder, attribute: str, receiver, selector: Selector):
        self.holder = holder
        self.attribute = attribute
        self.receiver = receiver
        self.selector = Selector(selector)

    def get(self) -> float:
        return getattr(self.holder, self.attribute)

    def set(self, value: float) -> None:
        setattr(self.holder, self.attribute, value)

    def __eq__(self, other):
        if not isinstance(other, AnimationTarget):
            return NotImplemented
        return self.holder is other.holder and self.attribute == other.attribute

    def __hash__(self):
        return hash((id(self.holder), self.attribute))

    def __repr__(self):
        return f"AnimationTarget({type(self.holder).__name__}.{self.attribute})"


def selector_from_workspace_string(text: str) -> Selector:
    """Parse a selector name as written in workspace files; unknown names give NONE."""
    try:
        selector = Selector[text.upper()]
    except KeyError:
        return Selector.NONE
    return selector if selector.name.lower() == text else Selector.NONE


def workspace_selector_string(selector) -> str:
    """The name of a selector as written in workspace files."""
    return Selector(selector).name.lower()


def selector_string(selector) -> str:
    """The name of a selector as written in compiled output."""
    return f"Animation::{Selector(selector).name}"