import pytest

from termcell.cell import CellBuffer


@pytest.fixture
def buf():
    return CellBuffer(4, 3)


def test_size_after_resize():
    b = CellBuffer()
    assert b.size() == (0, 0)
    b.resize(5, 2)
    assert b.size() == (5, 2)


def test_negative_resize_rejected():
    with pytest.raises(ValueError):
        CellBuffer().resize(-1, 2)


def test_set_and_get_content(buf):
    buf.set_content(1, 2, "a", None, "bold")
    mainc, combc, style, width = buf.get_content(1, 2)
    assert (mainc, combc, style, width) == ("a", (), "bold", 1)


def test_combining_characters_are_kept(buf):
    buf.set_content(0, 0, "A", ["\u030a"], "plain")
    content = buf.get_content(0, 0)
    assert content.mainc == "A"
    assert content.combc == ("\u030a",)


def test_wide_character_width(buf):
    buf.set_content(0, 0, "\u5341", None, None)
    assert buf.get_content(0, 0).width == 2


def test_empty_cell_reads_as_space(buf):
    content = buf.get_content(0, 0)
    assert content.mainc == " "
    assert content.width == 1


def test_control_character_reads_as_space(buf):
    buf.set_content(0, 0, "\x07", None, None)
    content = buf.get_content(0, 0)
    assert (content.mainc, content.width) == (" ", 1)


def test_out_of_range_is_ignored(buf):
    buf.set_content(10, 10, "x", None, "s")
    assert buf.get_content(10, 10).width == 0
    assert buf.get_content(-1, 0).mainc == "\x00"
    assert buf.dirty(10, 10) is False


def test_dirty_tracking(buf):
    buf.set_content(0, 0, "a", None, "s")
    assert buf.dirty(0, 0)
    buf.set_dirty(0, 0, False)
    assert not buf.dirty(0, 0)
    buf.set_content(0, 0, "a", None, "s")
    assert not buf.dirty(0, 0)
    buf.set_content(0, 0, "a", None, "other")
    assert buf.dirty(0, 0)
    buf.set_dirty(0, 0, False)
    buf.set_content(0, 0, "b", None, "other")
    assert buf.dirty(0, 0)


def test_combining_change_makes_dirty(buf):
    buf.set_content(0, 0, "e", None, None)
    buf.set_dirty(0, 0, False)
    buf.set_content(0, 0, "e", ["\u0301"], None)
    assert buf.dirty(0, 0)


def test_clean_converts_nul_to_space(buf):
    buf.set_dirty(2, 1, False)
    assert not buf.dirty(2, 1)
    assert buf.get_content(2, 1).mainc == " "


def test_invalidate_marks_all_dirty(buf):
    for y in range(3):
        for x in range(4):
            buf.set_dirty(x, y, False)
    assert not any(buf.dirty(x, y) for y in range(3) for x in range(4))
    buf.invalidate()
    assert all(buf.dirty(x, y) for y in range(3) for x in range(4))


def test_overwriting_wide_character_dirties_neighbour(buf):
    buf.set_content(0, 0, "\u5341", None, None)
    buf.set_dirty(0, 0, False)
    buf.set_dirty(1, 0, False)
    buf.set_content(0, 0, "a", None, None)
    assert buf.dirty(1, 0)


def test_lock_and_unlock(buf):
    buf.set_content(1, 1, "z", None, None)
    buf.lock_cell(1, 1)
    assert not buf.dirty(1, 1)
    buf.set_content(1, 1, "y", None, None)
    assert not buf.dirty(1, 1)
    buf.unlock_cell(1, 1)
    assert buf.dirty(1, 1)


def test_resize_preserves_overlap_and_invalidates(buf):
    buf.set_content(1, 1, "q", None, "s")
    buf.set_content(3, 2, "r", None, "s")
    buf.set_dirty(1, 1, False)
    buf.resize(2, 2)
    assert buf.size() == (2, 2)
    assert buf.get_content(1, 1) == ("q", (), "s", 1)
    assert buf.dirty(1, 1)
    buf.resize(4, 3)
    assert buf.get_content(3, 2).mainc == " "


def test_fill(buf):
    buf.set_content(0, 0, "\u5341", ["\u0301"], None)
    buf.fill("#", "fillstyle")
    assert all(
        buf.get_content(x, y) == ("#", (), "fillstyle", 1)
        for y in range(3)
        for x in range(4)
    )