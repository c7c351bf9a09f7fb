import config


def test_load_config_reads_file_values(isolated_config):
    isolated_config.write_text(
        "[server]\nport = 9001\n\n[engine]\ndepth = 20\n",
        encoding="utf-8",
    )

    loaded = config.load_config()

    assert loaded["server"]["port"] == 9001
    assert loaded["engine"]["depth"] == 20
    assert loaded["ratings"]["default_elo"] == 1200
    assert loaded["logging"]["level"] == "INFO"


def test_env_overrides_file(monkeypatch):
    monkeypatch.setenv("CHESSTRACK_PORT", "9100")
    monkeypatch.setenv("CHESSTRACK_LOG_LEVEL", "debug")

    loaded = config.load_config()

    assert loaded["server"]["port"] == 9100
    assert loaded["logging"]["level"] == "DEBUG"


def test_missing_config_is_copied_from_example(tmp_path, monkeypatch):
    config_dir = tmp_path / "fresh"
    config_path = config_dir / "config.toml"
    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_PATH", config_path)

    loaded = config.load_config()

    assert config_path.exists()
    assert loaded["ratings"]["recent_window"] == 10


def test_get_config_value_falls_back_to_default():
    assert config.get_config_value("engine", "depth") == 15
    assert config.get_config_value("missing", "key", "fallback") == "fallback"
