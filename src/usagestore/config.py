import os
from dataclasses import dataclass

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Config:
    log_level: "str" = "info"
    # console or json
    log_format: "str" = "console"
    # listen_address: format ":9186" or
    # "0.0.0.0:9186", empty disables the metrics server
    listen_address: "str" = ""
    seed_sample_data: "bool" = True

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            log_level=os.environ.get("USAGESTORE_LOG_LEVEL", "info"),
            log_format=os.environ.get("USAGESTORE_LOG_FORMAT", "console"),
            listen_address=os.environ.get("USAGESTORE_LISTEN_ADDRESS", ""),
            seed_sample_data=os.environ.get("USAGESTORE_SEED", "1").lower()
            not in _FALSE_VALUES,
        )

    @property
    def metrics_enabled(self) -> "bool":
        return bool(self.listen_address)
