import enum
import logging
import signal
import sys
from dataclasses import dataclass

log = logging.getLogger("minishell.signals")


class Disposition(enum.Enum):
    """What the OS does when a signal arrives"""
    IGNORE = signal.SIG_IGN
    DEFAULT = signal.SIG_DFL


@dataclass(frozen=True)
class DispositionSet:
    """Dispositions for the two signals the shell manages"""
    interrupt: Disposition
    child: Disposition


# Shell while waiting for input or running a line
IDLE = DispositionSet(interrupt=Disposition.IGNORE, child=Disposition.IGNORE)
# Every spawned child, foreground or background, right before exec
CHILD = DispositionSet(interrupt=Disposition.DEFAULT, child=Disposition.DEFAULT)

# CPython ignores these at startup; exec'd programs expect the default
RUNTIME_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGPIPE", "SIGXFSZ") if hasattr(signal, name)
)


def apply_dispositions(dispositions):
    """
    Install a DispositionSet on the calling process.
    Raises OSError/ValueError if the OS refuses.
    """
    signal.signal(signal.SIGINT, dispositions.interrupt.value)
    signal.signal(signal.SIGCHLD, dispositions.child.value)


def restore_runtime_signals():
    """Undo CPython's startup dispositions before exec"""
    for sig in RUNTIME_SIGNALS:
        signal.signal(sig, signal.SIG_DFL)


def init_signal_handlers():
    """
    Install the idle dispositions on the shell. Called once at startup.
    Returns: True on success
    """
    try:
        apply_dispositions(IDLE)
    except (OSError, ValueError) as e:
        print(f"minishell: failed to install signal dispositions: {e}", file=sys.stderr)
        return False
    log.debug("installed idle dispositions %s", IDLE)
    return True
