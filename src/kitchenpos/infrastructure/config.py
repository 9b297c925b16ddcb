"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:

    data_dir: Path = _DEFAULT_DATA_DIR
    purgomalum_url: str = "https://www.purgomalum.com"
    purgomalum_timeout: float = 5.0
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            data_dir=Path(os.getenv("KITCHENPOS_DATA_DIR", str(_DEFAULT_DATA_DIR))),
            purgomalum_url=os.getenv(
                "KITCHENPOS_PURGOMALUM_URL", "https://www.purgomalum.com"
            ),
            purgomalum_timeout=float(os.getenv("KITCHENPOS_PURGOMALUM_TIMEOUT", "5.0")),
            log_level=os.getenv("KITCHENPOS_LOG_LEVEL", "WARNING").upper(),
        )
