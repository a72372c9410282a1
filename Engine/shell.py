import logging
import sys

from Engine.executor import Outcome, run_background, run_foreground, run_pipeline, run_redirect
from Engine.parser import LineSyntaxError, ShapeKind, classify
from Engine.signals import init_signal_handlers

log = logging.getLogger("minishell.shell")


def initialize():
    """
    Set up the shell before the first line.
    Returns: 0 on success, 1 if startup should be aborted
    """
    return 0 if init_signal_handlers() else 1


def finalize():
    """Tear down after the last line. Nothing to undo yet."""
    return 0


def dispatch(count, arglist):
    """
    Execute one tokenized line.
    count: number of meaningful tokens in arglist
    A trailing "&" (the last of the count tokens) is removed from arglist
    in place.
    Returns: Outcome (the caller keeps reading lines in both cases)
    """
    argv = arglist if count >= len(arglist) else arglist[:count]
    if not argv:
        return Outcome.SUCCESS

    try:
        shape = classify(argv)
    except LineSyntaxError as e:
        print(f"minishell: syntax error: {e}", file=sys.stderr)
        return Outcome.FAILURE
    if shape.kind is ShapeKind.BACKGROUND and argv is not arglist:
        del arglist[count - 1]

    log.debug("dispatching %s line", shape.kind.value)
    if shape.kind is ShapeKind.BACKGROUND:
        return run_background(argv[:])
    if shape.kind is ShapeKind.PIPELINE:
        return run_pipeline(argv[:shape.position], argv[shape.position + 1:])
    if shape.kind is ShapeKind.REDIRECT:
        return run_redirect(argv[:shape.position], argv[shape.position + 1])
    return run_foreground(argv[:])
