from carddeck.config import DEFAULT_HAND_SIZE, AppConfig


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("CARDDECK_LOG_LEVEL", raising=False)

    config = AppConfig.from_env()
    assert config.hand_size == DEFAULT_HAND_SIZE == 4
    assert config.log_level == "WARNING"


def test_reads_log_level(monkeypatch) -> None:
    monkeypatch.setenv("CARDDECK_LOG_LEVEL", " debug ")
    assert AppConfig.from_env().log_level == "DEBUG"


def test_blank_log_level_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("CARDDECK_LOG_LEVEL", "   ")
    assert AppConfig.from_env().log_level == "WARNING"


def test_hand_size_ignores_environment(monkeypatch) -> None:
    monkeypatch.setenv("CARDDECK_HAND_SIZE", "20")
    assert AppConfig.from_env().hand_size == DEFAULT_HAND_SIZE
