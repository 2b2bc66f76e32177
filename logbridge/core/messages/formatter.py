"""
Placeholder substitution for parameterized log messages.

Placeholders are ``{}`` and are replaced left to right. Substitution stops
as soon as either the placeholders or the arguments run out; leftovers of
either kind are left untouched. ``\\{}`` yields a literal ``{}`` without
consuming an argument, while ``\\\\{}`` yields a single backslash followed
by the substituted argument.
"""
import logging
from typing import Any, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

DELIM_STR = "{}"
ESCAPE_CHAR = "\\"


def _safe_str(obj: Any) -> str:
    try:
        return str(obj)
    except Exception:
        logger.warning("Failed str() invocation on an object of type [%s]",
                       type(obj).__name__, exc_info=True)
        return "[FAILED toString()]"


def substitute(template: str, args: Sequence[Any]) -> Tuple[str, int]:
    """Substitute ``args`` into ``template``.

    Returns:
        The resulting text and the number of arguments consumed.
    """
    parts = []
    start = 0
    consumed = 0
    while consumed < len(args):
        index = template.find(DELIM_STR, start)
        if index == -1:
            break
        if index > 0 and template[index - 1] == ESCAPE_CHAR:
            if index > 1 and template[index - 2] == ESCAPE_CHAR:
                parts.append(template[start:index - 1])
                parts.append(_safe_str(args[consumed]))
                consumed += 1
            else:
                parts.append(template[start:index - 1])
                parts.append(DELIM_STR)
        else:
            parts.append(template[start:index])
            parts.append(_safe_str(args[consumed]))
            consumed += 1
        start = index + len(DELIM_STR)
    parts.append(template[start:])
    return "".join(parts), consumed


def format_message(template: Optional[str], args: Optional[Sequence[Any]] = None) -> Optional[str]:
    """Format ``template`` with positional ``args``"""
    if template is None or not args:
        return template
    text, _ = substitute(template, args)
    return text


def throwable_candidate(args: Optional[Sequence[Any]]) -> Optional[BaseException]:
    """Return the last argument if it is an exception"""
    if args and isinstance(args[-1], BaseException):
        return args[-1]
    return None
