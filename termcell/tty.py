"""Terminal driver settings on POSIX systems."""

from __future__ import annotations

import os


def set_buf_params(fd: int, vmin: int, vtime: int) -> None:
    """Make *fd* non-blocking and set its VMIN and VTIME parameters.

    VMIN is the minimum character count for a read and VTIME the read
    timeout in tenths of a second.  The change waits for pending output
    to drain.  Raises ``termios.error`` if *fd* is not a terminal and
    ``ValueError`` if a parameter does not fit in a byte.
    """
    import termios

    for label, value in (("vmin", vmin), ("vtime", vtime)):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"{label} must be in the range 0-255, not {value}")
    try:
        os.set_blocking(fd, False)
    except OSError:
        pass
    attrs = termios.tcgetattr(fd)
    cc = list(attrs[6])
    cc[termios.VMIN] = vmin
    cc[termios.VTIME] = vtime
    attrs[6] = cc
    termios.tcsetattr(fd, termios.TCSADRAIN, attrs)