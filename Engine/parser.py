import enum
import logging
from dataclasses import dataclass

from config import BACKGROUND_TOKEN, PIPE_TOKEN, REDIRECT_TOKEN

log = logging.getLogger("minishell.parser")


class ShapeKind(enum.Enum):
    FOREGROUND = "foreground"
    BACKGROUND = "background"
    PIPELINE = "pipeline"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class LineShape:
    """How one line runs; position is the operator's index, if any"""
    kind: ShapeKind
    position: int | None = None


class LineSyntaxError(ValueError):
    pass


def strip_background(arglist):
    """
    Remove a trailing "&" from arglist in place.
    Returns: True if it was there
    """
    if arglist and arglist[-1] == BACKGROUND_TOKEN:
        del arglist[-1]
        return True
    return False


def classify(arglist):
    """
    Work out the shape of a line. A trailing "&" is stripped first, then
    the first "|" wins, then the first ">".
    Returns: LineShape
    Raises LineSyntaxError for lines that cannot run as one of the shapes.
    """
    background = strip_background(arglist)
    if not arglist:
        raise LineSyntaxError("empty command")

    pipe_at = arglist.index(PIPE_TOKEN) if PIPE_TOKEN in arglist else None
    redirect_at = arglist.index(REDIRECT_TOKEN) if REDIRECT_TOKEN in arglist else None

    if background:
        if pipe_at is not None or redirect_at is not None:
            raise LineSyntaxError("'&' cannot be combined with '|' or '>'")
        if BACKGROUND_TOKEN in arglist:
            raise LineSyntaxError("'&' is only allowed at the end of a line")
        shape = LineShape(ShapeKind.BACKGROUND)
    elif pipe_at is not None:
        left, right = arglist[:pipe_at], arglist[pipe_at + 1:]
        if not left or not right:
            raise LineSyntaxError("missing command around '|'")
        if PIPE_TOKEN in right:
            raise LineSyntaxError("only one '|' is supported")
        if REDIRECT_TOKEN in arglist or BACKGROUND_TOKEN in arglist:
            raise LineSyntaxError("'|' cannot be combined with '>' or '&'")
        shape = LineShape(ShapeKind.PIPELINE, pipe_at)
    elif redirect_at is not None:
        if redirect_at == 0:
            raise LineSyntaxError("missing command before '>'")
        if len(arglist) != redirect_at + 2:
            raise LineSyntaxError("'>' expects exactly one file name")
        if arglist[redirect_at + 1] in (REDIRECT_TOKEN, BACKGROUND_TOKEN):
            raise LineSyntaxError(f"unexpected '{arglist[redirect_at + 1]}' after '>'")
        if BACKGROUND_TOKEN in arglist:
            raise LineSyntaxError("'&' is only allowed at the end of a line")
        shape = LineShape(ShapeKind.REDIRECT, redirect_at)
    else:
        if BACKGROUND_TOKEN in arglist:
            raise LineSyntaxError("'&' is only allowed at the end of a line")
        shape = LineShape(ShapeKind.FOREGROUND)

    log.debug("classified %s as %s", arglist, shape)
    return shape
