import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class IdConfig:
    __slots__ = ("default_length", "batch_size", "timestamp_width", "random_width")

    def __init__(self, default_length=16, batch_size=40, timestamp_width=8, random_width=8):
        self.default_length = default_length
        self.batch_size = batch_size
        self.timestamp_width = timestamp_width
        self.random_width = random_width


class ServerConfig:
    __slots__ = ("host", "port")
    
    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class LoggingConfig:
    __slots__ = ("level", "crash_file")
    
    def __init__(self, level="INFO", crash_file="logs/crash.log"):
        self.level = level
        self.crash_file = crash_file


class Config:
    __slots__ = ("ids", "server", "logging")
    
    def __init__(self, ids=None, server=None, logging=None):
        self.ids = ids or IdConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            IdConfig(**d.get("ids", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG
    
    if not config_path.exists():
        return Config()
    
    with open(config_path) as file:
        return Config.from_dict(json.load(file))
