"""Exceptions raised by phongtrace."""


class PhongtraceError(Exception):
    """Base class for all phongtrace errors."""


class DegenerateVectorError(PhongtraceError, ValueError):
    """A zero-length vector was normalized."""


class InvalidSceneError(PhongtraceError, ValueError):
    """A scene description or scene object is malformed."""


class SceneFrozenError(PhongtraceError, RuntimeError):
    """The scene was modified after it was frozen for rendering."""


class OutputError(PhongtraceError, OSError):
    """The output image could not be written."""
