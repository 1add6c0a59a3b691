import pytest

from usagestore.cli import parse_args


class TestParseArgs:
    def test_defaults(self, monkeypatch: "object") -> "None":
        monkeypatch.delenv("USAGESTORE_LOG_LEVEL", raising=False)
        monkeypatch.delenv("USAGESTORE_SEED", raising=False)
        config, query = parse_args([])
        assert config.log_level == "info"
        assert config.seed_sample_data is True
        assert query is None

    def test_flags_override_env(self, monkeypatch: "object") -> "None":
        monkeypatch.setenv("USAGESTORE_LOG_LEVEL", "error")
        config, _ = parse_args(
            ["--log.level", "debug", "--log.format", "json", "--no-seed"]
        )
        assert config.log_level == "debug"
        assert config.log_format == "json"
        assert config.seed_sample_data is False

    def test_env_kept_without_flag(self, monkeypatch: "object") -> "None":
        monkeypatch.setenv("USAGESTORE_LISTEN_ADDRESS", ":9999")
        config, _ = parse_args([])
        assert config.listen_address == ":9999"

    def test_compare_query(self) -> "None":
        _, query = parse_args(["--compare", "1920", "2016", "1"])
        assert query == ("1920", 2016, 1)

    def test_compare_requires_integers(self) -> "None":
        with pytest.raises(SystemExit):
            parse_args(["--compare", "1920", "last", "1"])
