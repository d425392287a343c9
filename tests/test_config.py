import pytest

from antsim.config import COLONY_COLORS, MAX_COLONIES_COUNT, Config


def test_defaults_match_source():
    conf = Config()
    assert (conf.win_width, conf.win_height) == (1920, 1080)
    assert conf.ants_count == 3000
    assert conf.marker_intensity == 8000.0
    assert len(COLONY_COLORS) == MAX_COLONIES_COUNT


def test_colony_position_default():
    assert Config().colony_position() == (500.0, 540.0)


def test_defaults_text_layout():
    lines = Config().defaults_text().splitlines()
    assert lines[0] == "# Window width"
    assert lines[1] == "1920"
    assert lines[3] == "1080"
    assert lines[7] == "1"
    assert lines[9] == "3000"


def test_write_then_load_round_trip(tmp_path):
    path = str(tmp_path / "conf.txt")
    written = Config(win_width=800, win_height=600, use_fullscreen=0, gui_scale=1.5, ants_count=42)
    written.write_defaults(path)
    loaded = Config()
    loaded.load_user_conf(path)
    assert loaded == written


def test_load_skips_comments_and_parses_leniently(tmp_path):
    path = tmp_path / "conf.txt"
    path.write_text("# comment\n800x\nabc\n# again\n0\n2.5\n10\n")
    conf = Config()
    conf.load_user_conf(str(path))
    assert conf.win_width == 800
    assert conf.win_height == 0
    assert conf.use_fullscreen == 0
    assert conf.gui_scale == 2.5
    assert conf.ants_count == 10


def test_empty_line_counts_as_a_value(tmp_path):
    path = tmp_path / "conf.txt"
    path.write_text("\n700\n")
    conf = Config()
    conf.load_user_conf(str(path))
    assert conf.win_width == 0
    assert conf.win_height == 700
    assert conf.ants_count == 3000


def test_negative_values_wrap_as_unsigned(tmp_path):
    path = tmp_path / "conf.txt"
    path.write_text("-1\n")
    conf = Config()
    conf.load_user_conf(str(path))
    assert conf.win_width == 4294967295


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config().load_user_conf(str(tmp_path / "absent.txt"))


def test_load_or_create_writes_defaults(tmp_path, capsys):
    path = tmp_path / "conf.txt"
    assert Config().load_or_create(str(path)) is False
    assert path.read_text() == Config().defaults_text()
    assert "Created default configuration file" in capsys.readouterr().out
    assert Config().load_or_create(str(path)) is True


def test_load_or_create_reports_write_failure(tmp_path, capsys):
    path = tmp_path / "missing_dir" / "conf.txt"
    assert Config().load_or_create(str(path)) is False
    assert not path.exists()
    assert "Failed to write conf.txt" in capsys.readouterr().out