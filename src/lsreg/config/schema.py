import codecs
from typing import Optional
from pydantic import BaseModel, field_validator

DEFAULT_HEADER_LINES = 3


class RegdumpConfig(BaseModel):
    # Empty means "resolve lsregister for this system"
    command: str = ""
    header_lines: int = DEFAULT_HEADER_LINES
    encoding: str = "utf-8"

    @field_validator("header_lines")
    @classmethod
    def validate_header_lines(cls, v: int) -> int:
        if v < 0:
            raise ValueError("header_lines must not be negative")
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}")
        return v


class ParserConfig(BaseModel):
    on_unknown: str = "stop"

    @field_validator("on_unknown")
    @classmethod
    def validate_on_unknown(cls, v: str) -> str:
        if v not in ("stop", "resync"):
            raise ValueError("on_unknown must be 'stop' or 'resync'")
        return v


class OutputConfig(BaseModel):
    format: str = "c"

    @field_validator("format")
    @classmethod
    def normalize_format(cls, v: str) -> str:
        return v.lower()


class LoggingConfig(BaseModel):
    level: str = "INFO"
    file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return v


class AppConfig(BaseModel):
    regdump: RegdumpConfig = RegdumpConfig()
    parser: ParserConfig = ParserConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()
