from quill import config


def test_missing_file_gives_defaults(tmp_path):
    settings = config.load_settings(str(tmp_path / "quill.conf"))
    assert settings == config.Settings()
    assert settings.empty_line == "~"
    assert settings.welcome == "WELCOME! :q to quit"


def test_reads_known_keys(tmp_path):
    path = tmp_path / "quill.conf"
    path.write_text(
        "# quill settings\n"
        "\n"
        "log_file=/tmp/q.log\n"
        "empty_line = ·\n"
        "welcome=hello there\n"
        "colour=red\n"
        "garbage line\n",
        encoding="utf-8",
    )
    settings = config.load_settings(str(path))
    assert settings.log_file == "/tmp/q.log"
    assert settings.empty_line == "·"
    assert settings.welcome == "hello there"


def test_empty_line_keeps_first_character():
    assert config.parse_settings("empty_line=>>").empty_line == ">"


def test_blank_values_keep_defaults_except_welcome():
    settings = config.parse_settings("log_file=\nempty_line=\nwelcome=\n")
    assert settings.log_file == config.LOG_FILE_DEFAULT
    assert settings.empty_line == config.EMPTY_LINE_DEFAULT
    assert settings.welcome == ""


def test_unreadable_file_gives_defaults(tmp_path):
    path = tmp_path / "quill.conf"
    path.write_bytes(b"\xff\xfe\xfa")
    assert config.load_settings(str(path)) == config.Settings()


def test_log_file_expands_home(monkeypatch):
    monkeypatch.setenv("HOME", "/home/someone")
    assert config.parse_settings("log_file=~/q.log").log_file == "/home/someone/q.log"
