import logging
import os
from dataclasses import dataclass

log = logging.getLogger("minishell.plumbing")

STDIN = 0
STDOUT = 1


@dataclass(frozen=True)
class Channel:
    """Both ends of an anonymous pipe"""
    read_end: int
    write_end: int


def make_channel():
    """
    Create a pipe. Both ends are non-inheritable until bound to a std stream.
    Returns: Channel
    """
    read_end, write_end = os.pipe()
    log.debug("channel r=%d w=%d", read_end, write_end)
    return Channel(read_end, write_end)


def bind(endpoint, stream):
    """Duplicate endpoint onto stream (STDIN/STDOUT), then close endpoint"""
    if endpoint == stream:
        os.set_inheritable(stream, True)
        return
    os.dup2(endpoint, stream)
    os.close(endpoint)


def release(endpoint):
    """Close endpoint, ignoring descriptors that are already closed"""
    try:
        os.close(endpoint)
    except OSError:
        pass


def release_channel(channel):
    release(channel.read_end)
    release(channel.write_end)


@dataclass(frozen=True)
class Bind:
    """Redirection step: endpoint becomes the given std stream"""
    endpoint: int
    stream: int

    def apply(self):
        bind(self.endpoint, self.stream)


@dataclass(frozen=True)
class Release:
    """Redirection step: drop a descriptor this process must not hold"""
    endpoint: int

    def apply(self):
        release(self.endpoint)
