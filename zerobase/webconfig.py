"""Settings of the demo web server."""

from dataclasses import dataclass


@dataclass
class WebConfig:
    """Server settings with the demo defaults."""

    read_timeout: int = 1000
    writer_timeout: int = 1000
    host: str = "127.0.0.1"
    port: int = 8901
    name: str = "zerobase"
    mode: str = "dev"
    demo_msg: str = "dddddd"
    enable_dp: bool = False