from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


@dataclass
class Settings:
    palette: str
    output_root: Path
    max_rows: int
    log_level: str


def _env_int(name: str, default: int, *, minimum: int = 1) -> int:
    raw = str(os.getenv(name, "")).strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(minimum, value)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        palette=os.getenv("CHARTSPEC_PALETTE", "default"),
        output_root=Path(os.getenv("CHARTSPEC_OUTPUT_ROOT", "charts")).resolve(),
        max_rows=_env_int("CHARTSPEC_MAX_ROWS", 10000),
        log_level=os.getenv("CHARTSPEC_LOG_LEVEL", "INFO").upper(),
    )
