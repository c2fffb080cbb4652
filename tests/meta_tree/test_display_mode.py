"""Unit tests for the display_mode module."""

from dirmeta.meta_tree.display_mode import DisplayMode


def test_display_mode_enum():
    """Test the DisplayMode enum values."""
    assert DisplayMode.DIRECTORY_ITSELF == "directory_itself"
    assert DisplayMode.ONLY_VISIBLE == "only_visible"
    assert DisplayMode.ALMOST_ALL == "almost_all"
    assert DisplayMode.ALL == "all"
    assert DisplayMode.DEFAULT == "default"

    assert DisplayMode("all") is DisplayMode.ALL


def test_dotfile_policy():
    """Only ONLY_VISIBLE and DEFAULT hide dotfiles."""
    hiding = {mode for mode in DisplayMode if mode.hides_dotfiles}
    assert hiding == {DisplayMode.ONLY_VISIBLE, DisplayMode.DEFAULT}


def test_synthetic_entry_policy():
    """Only ALL synthesizes "." and ".."."""
    assert [mode for mode in DisplayMode if mode.shows_synthetic_entries] == [DisplayMode.ALL]
