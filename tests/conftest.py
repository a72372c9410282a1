import os
import signal

import pytest

from Engine.jobs import background_jobs
from Engine.signals import IDLE, apply_dispositions


@pytest.fixture(autouse=True)
def clean_jobs():
    background_jobs.clear()
    yield
    for pid in list(background_jobs):
        # Only our own children; some tests record made-up pids
        try:
            if os.waitpid(pid, os.WNOHANG) != (0, 0):
                continue
            os.kill(pid, signal.SIGKILL)
            os.waitpid(pid, 0)
        except (ProcessLookupError, ChildProcessError):
            pass
    background_jobs.clear()


@pytest.fixture
def idle_signals():
    """Run the test with the shell's idle dispositions installed"""
    saved = {sig: signal.getsignal(sig) for sig in (signal.SIGINT, signal.SIGCHLD)}
    apply_dispositions(IDLE)
    yield
    for sig, handler in saved.items():
        signal.signal(sig, handler)


@pytest.fixture
def open_fds():
    """Return a callable listing this process's open descriptors"""
    if not os.path.isdir("/proc/self/fd"):
        pytest.skip("needs /proc/self/fd")
    return lambda: set(os.listdir("/proc/self/fd"))
