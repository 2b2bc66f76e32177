"""
Helpers for building stdlib log records on behalf of a facade caller.
"""
import sys
from types import TracebackType
from typing import Optional, Tuple, Type

from ...core.interfaces.logger_interface import ExcInfo

UNKNOWN_CALLER = ("(unknown file)", 0, "(unknown function)")

ExcTuple = Tuple[Type[BaseException], BaseException, Optional[TracebackType]]


def _in_boundary(module: str, caller_boundary: str) -> bool:
    return bool(module) and (caller_boundary == module or caller_boundary.startswith(module + "."))


def find_caller(caller_boundary: str) -> Tuple[str, int, str]:
    """Locate the first frame outside ``caller_boundary``.

    The boundary is a dotted name such as ``package.module.Class``; a
    frame belongs to it when its module is that name or a prefix of it.
    The stack is walked outward past every boundary frame, and the
    location of the next frame is returned.
    """
    frame = sys._getframe(1)
    seen_boundary = False
    while frame is not None:
        module = frame.f_globals.get("__name__", "")
        if _in_boundary(module, caller_boundary):
            seen_boundary = True
        elif seen_boundary:
            code = frame.f_code
            return code.co_filename, frame.f_lineno, code.co_name
        frame = frame.f_back
    return UNKNOWN_CALLER


def exc_tuple(exc_info: ExcInfo) -> Optional[ExcTuple]:
    """Normalize an exception argument into a ``sys.exc_info()`` style tuple"""
    if exc_info is None or exc_info is False:
        return None
    if isinstance(exc_info, BaseException):
        return type(exc_info), exc_info, exc_info.__traceback__
    current = sys.exc_info()
    return current if current[0] is not None else None
