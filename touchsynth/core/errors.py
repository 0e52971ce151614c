from __future__ import annotations


class GestureError(Exception):
    """Base class for everything a gesture call can fail with."""


class MissingBoundsError(GestureError, AssertionError):
    """
    The target has no bounds to resolve coordinates against.

    Subclasses AssertionError so a test framework reports it as a
    failed assertion rather than an error in the test itself.
    """


class PreconditionError(GestureError, ValueError):
    """A gesture argument is out of range (velocity, duration, period)."""


class VelocityRangeError(GestureError, ValueError):
    """
    No curve goes from start to end in the right direction while also
    reaching the requested velocity at the end. Not transient.
    """
