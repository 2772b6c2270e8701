from typing import Literal

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]

LogHandler = Literal["console", "cli", "cli_alert", "rich", "null"]
