"""Engine and session configuration.

Process-wide switches (sorting, page size, case folding) live on an
explicit :class:`EngineConfig` that is read once when a session or a
pipeline is built. Nothing in the pipeline reaches for ambient globals.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

from narrow.logger import get_logger

logger = get_logger("config")

DEFAULT_PAGE_SIZE = 10


class EngineConfig(BaseModel):
    """Settings shared by every session an engine starts."""

    model_config = ConfigDict(frozen=True)

    sort_enabled: bool = Field(
        default=True,
        description="Sort candidates by length then text during preprocessing",
    )
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, description="Rows shown at once")
    ignore_case: bool = Field(default=False, description="Case-insensitive default refine/highlight")
    count_format: str = Field(default="{shown}/{total}", description="Format of the count indicator")
    log_level: str = Field(default="INFO", description="Level passed to setup_logger")

    @model_validator(mode="after")
    def check_count_format(self) -> "EngineConfig":
        try:
            self.count_format.format(shown=0, total=0)
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"Invalid count_format {self.count_format!r}: {e}") from e
        return self


class SessionOptions(BaseModel):
    """Per-session options accepted by ``start_session``."""

    model_config = ConfigDict(frozen=True)

    default_candidate: Optional[str] = Field(
        default=None, description="Full form of the preferred candidate"
    )
    initial_input: str = Field(default="", description="Query text the session starts with")
    require_match: bool = Field(default=False, description="Forbid committing raw input")
    multi_select: bool = Field(default=False, description="Accumulate toggled candidates")
    move_default_to_front: bool = Field(
        default=True, description="Promote the default candidate to the top of the list"
    )
    page_size: Optional[int] = Field(
        default=None, ge=1, description="Override of EngineConfig.page_size"
    )

    def effective_page_size(self, config: EngineConfig) -> int:
        return self.page_size if self.page_size is not None else config.page_size


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_engine_config() -> EngineConfig:
    """Load engine configuration from environment variables (and ``.env``).

    Recognized variables: ``NARROW_SORT_ENABLED``, ``NARROW_PAGE_SIZE``,
    ``NARROW_IGNORE_CASE``, ``NARROW_COUNT_FORMAT``, ``NARROW_LOG_LEVEL``.
    """
    load_dotenv()

    values: dict[str, object] = {
        "sort_enabled": _env_flag("NARROW_SORT_ENABLED", True),
        "ignore_case": _env_flag("NARROW_IGNORE_CASE", False),
    }
    page_size = os.getenv("NARROW_PAGE_SIZE", "").strip()
    if page_size:
        values["page_size"] = page_size
    count_format = os.getenv("NARROW_COUNT_FORMAT")
    if count_format:
        values["count_format"] = count_format
    log_level = os.getenv("NARROW_LOG_LEVEL", "").strip()
    if log_level:
        values["log_level"] = log_level.upper()

    config = EngineConfig.model_validate(values)
    logger.debug(f"Engine config loaded: {config.model_dump()}")
    return config
