import enum
import logging
import os
import sys

from config import REDIRECT_FILE_MODE
from Engine.jobs import add_background_job
from Engine.launcher import collect, launch
from Engine.plumbing import STDIN, STDOUT, Bind, Release, make_channel, release, release_channel

log = logging.getLogger("minishell.executor")


class Outcome(enum.IntEnum):
    """Result handed back to the read loop; it keeps reading either way"""
    FAILURE = 0
    SUCCESS = 1


def run_foreground(argv):
    """
    Run argv and block until it exits. The child's exit status is not
    propagated, only whether spawning and collecting worked.
    """
    pid = launch(argv)
    if pid is None:
        return Outcome.FAILURE
    return Outcome.SUCCESS if collect(pid) else Outcome.FAILURE


def run_background(argv):
    """Run argv without waiting; SIGCHLD disposition takes care of reaping"""
    pid = launch(argv)
    if pid is None:
        return Outcome.FAILURE
    add_background_job(pid, argv)
    return Outcome.SUCCESS


def run_pipeline(left, right):
    """
    Run "left | right". Both sides are started before either is waited on.
    Returns: Outcome
    """
    try:
        channel = make_channel()
    except OSError as e:
        print(f"minishell: failed to create a pipe: {e}", file=sys.stderr)
        return Outcome.FAILURE

    writer = launch(left, redirections=[
        Release(channel.read_end),
        Bind(channel.write_end, STDOUT),
    ])
    reader = None
    if writer is not None:
        reader = launch(right, redirections=[
            Release(channel.write_end),
            Bind(channel.read_end, STDIN),
        ])

    # The reader only sees EOF once every copy of the write end is closed
    release_channel(channel)
    log.debug("pipeline %s | %s: writer=%s reader=%s", left, right, writer, reader)

    ok = writer is not None and reader is not None
    for pid in (writer, reader):
        if pid is not None and not collect(pid):
            ok = False
    return Outcome.SUCCESS if ok else Outcome.FAILURE


def run_redirect(argv, filename):
    """
    Run "argv > filename": create or truncate filename and make it the
    child's stdout, then wait for the child.
    """
    try:
        fd = os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, REDIRECT_FILE_MODE)
    except OSError as e:
        print(f"minishell: {filename}: {e.strerror or e}", file=sys.stderr)
        return Outcome.FAILURE

    try:
        pid = launch(argv, redirections=[Bind(fd, STDOUT)])
    finally:
        release(fd)

    if pid is None:
        return Outcome.FAILURE
    return Outcome.SUCCESS if collect(pid) else Outcome.FAILURE
