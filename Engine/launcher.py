import logging
import os
import sys

from config import EXIT_CHILD_FAILURE, EXIT_EXEC_FAILURE
from Engine.signals import CHILD, apply_dispositions, restore_runtime_signals

log = logging.getLogger("minishell.launcher")


def _child_report(message):
    # Python-level stream buffers are not trusted after fork
    try:
        os.write(2, f"minishell: {message}\n".encode(errors="replace"))
    except OSError:
        pass


def _child_main(argv, dispositions, redirections):
    """
    Body of the forked child. Never returns: ends in exec or os._exit.
    """
    try:
        try:
            apply_dispositions(dispositions)
            restore_runtime_signals()
        except (OSError, ValueError) as e:
            _child_report(f"failed to change signal handling: {e}")
            os._exit(EXIT_CHILD_FAILURE)

        try:
            for step in redirections:
                step.apply()
        except OSError as e:
            _child_report(f"{argv[0]}: redirection failed: {e.strerror or e}")
            os._exit(EXIT_CHILD_FAILURE)

        try:
            os.execvp(argv[0], argv)
        except OSError as e:
            if isinstance(e, FileNotFoundError):
                _child_report(f"command not found: {argv[0]}")
            else:
                _child_report(f"{argv[0]}: {e.strerror or e}")
            os._exit(EXIT_EXEC_FAILURE)
    except BaseException as e:
        _child_report(f"{argv[0]}: {e!r}")
    os._exit(EXIT_CHILD_FAILURE)


def _spawn():
    """
    Fork. Returns: 0 in the child, child pid in the parent.
    Raises OSError when no process could be created.
    """
    # Unflushed output would otherwise be written twice
    sys.stdout.flush()
    sys.stderr.flush()
    return os.fork()


def launch(argv, dispositions=CHILD, redirections=()):
    """
    Start argv[0] with argv in a new process.
    redirections: Bind/Release steps applied in order inside the child.
    Returns: pid, or None if fork failed (already reported)
    """
    try:
        pid = _spawn()
    except OSError as e:
        print(f"minishell: failed to create a new process: {e}", file=sys.stderr)
        return None

    if pid == 0:
        _child_main(argv, dispositions, redirections)

    log.debug("spawned %d: %s", pid, argv)
    return pid


def collect(pid):
    """
    Wait for pid to exit.
    "No such child" and "interrupted" do not count as failure: with SIGCHLD
    ignored the kernel may already have reaped it.
    Returns: True unless waitpid failed for another reason
    """
    try:
        _, status = os.waitpid(pid, 0)
    except (ChildProcessError, InterruptedError) as e:
        log.debug("collect %d: %s", pid, e)
        return True
    except OSError as e:
        print(f"minishell: waitpid failed for {pid}: {e}", file=sys.stderr)
        return False
    log.debug("collected %d: exit %d", pid, os.waitstatus_to_exitcode(status))
    return True
