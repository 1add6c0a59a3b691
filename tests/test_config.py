from usagestore.config import Config


class TestConfigFromEnv:
    def test_defaults(self, monkeypatch: "object") -> "None":
        for name in (
            "USAGESTORE_LOG_LEVEL",
            "USAGESTORE_LOG_FORMAT",
            "USAGESTORE_LISTEN_ADDRESS",
            "USAGESTORE_SEED",
        ):
            monkeypatch.delenv(name, raising=False)
        config = Config.from_env()
        assert config.log_level == "info"
        assert config.log_format == "console"
        assert config.listen_address == ""
        assert config.seed_sample_data is True

    def test_reads_env_vars(self, monkeypatch: "object") -> "None":
        monkeypatch.setenv("USAGESTORE_LOG_LEVEL", "debug")
        monkeypatch.setenv("USAGESTORE_LOG_FORMAT", "json")
        monkeypatch.setenv("USAGESTORE_LISTEN_ADDRESS", ":9186")
        monkeypatch.setenv("USAGESTORE_SEED", "false")
        config = Config.from_env()
        assert config.log_level == "debug"
        assert config.log_format == "json"
        assert config.listen_address == ":9186"
        assert config.seed_sample_data is False


class TestMetricsEnabled:
    def test_enabled_when_address_set(self) -> "None":
        assert Config(listen_address=":9186").metrics_enabled is True

    def test_disabled_by_default(self) -> "None":
        assert Config().metrics_enabled is False
