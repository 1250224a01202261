import os
import pty
import tempfile
import termios

import pytest

from termcell.tty import set_buf_params


@pytest.fixture
def pty_pair():
    master, slave = pty.openpty()
    yield master, slave
    os.close(master)
    os.close(slave)


def _cc_value(value):
    return value[0] if isinstance(value, bytes) else value


def test_sets_vmin_and_vtime(pty_pair):
    _, slave = pty_pair
    set_buf_params(slave, 1, 5)
    cc = termios.tcgetattr(slave)[6]
    assert _cc_value(cc[termios.VMIN]) == 1
    assert _cc_value(cc[termios.VTIME]) == 5


def test_makes_fd_non_blocking(pty_pair):
    _, slave = pty_pair
    set_buf_params(slave, 0, 0)
    assert os.get_blocking(slave) is False


def test_other_attributes_preserved(pty_pair):
    _, slave = pty_pair
    before = termios.tcgetattr(slave)
    set_buf_params(slave, 2, 3)
    after = termios.tcgetattr(slave)
    assert after[:6] == before[:6]


def test_not_a_terminal_raises():
    with tempfile.TemporaryFile() as f:
        with pytest.raises(termios.error):
            set_buf_params(f.fileno(), 1, 0)


@pytest.mark.parametrize("vmin, vtime", [(256, 0), (0, 256), (-1, 0)])
def test_out_of_range_raises(pty_pair, vmin, vtime):
    _, slave = pty_pair
    with pytest.raises(ValueError):
        set_buf_params(slave, vmin, vtime)