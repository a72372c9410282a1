import os

from Engine.plumbing import Bind, Release, bind, make_channel, release, release_channel


class TestChannel:
    def test_bytes_flow_from_write_end_to_read_end(self):
        channel = make_channel()
        try:
            os.write(channel.write_end, b"hello")
            assert os.read(channel.read_end, 5) == b"hello"
        finally:
            release_channel(channel)

    def test_release_channel_closes_both_ends(self, open_fds):
        before = open_fds()
        release_channel(make_channel())
        assert open_fds() == before


class TestBind:
    def test_bind_moves_endpoint_and_closes_original(self):
        channel = make_channel()
        target = os.dup(channel.write_end)
        try:
            bind(channel.write_end, target)
            os.write(target, b"x")
            assert os.read(channel.read_end, 1) == b"x"
            assert os.get_inheritable(target) is True
        finally:
            release(target)
            release(channel.read_end)

    def test_bind_step_applies_bind(self):
        channel = make_channel()
        target = os.dup(channel.read_end)
        try:
            Bind(channel.write_end, target).apply()
            os.write(target, b"y")
            assert os.read(channel.read_end, 1) == b"y"
        finally:
            release(target)
            release(channel.read_end)


class TestRelease:
    def test_release_is_idempotent(self):
        channel = make_channel()
        release(channel.read_end)
        release(channel.read_end)
        release(channel.write_end)

    def test_release_step_closes_descriptor(self, open_fds):
        before = open_fds()
        channel = make_channel()
        Release(channel.read_end).apply()
        Release(channel.write_end).apply()
        assert open_fds() == before
