"""Runtime settings, read from the environment (and a local .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Relative to the working directory the process starts in.
_DEFAULT_DATA_DIR = Path("data")


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    asset_dir: Path
    asset_base_url: str | None = None
    log_level: str = "INFO"
    actor_id: str | None = None
    actor_name: str = ""

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @classmethod
    def from_env(cls) -> Settings:
        load_dotenv()
        data_dir = Path(os.getenv("CATALOG_DATA_DIR") or _DEFAULT_DATA_DIR)
        asset_dir = Path(os.getenv("CATALOG_ASSET_DIR") or data_dir / "assets")
        return cls(
            data_dir=data_dir,
            asset_dir=asset_dir,
            asset_base_url=os.getenv("CATALOG_ASSET_BASE_URL") or None,
            log_level=os.getenv("CATALOG_LOG_LEVEL", "INFO").strip().upper(),
            actor_id=os.getenv("CATALOG_ACTOR_ID") or None,
            actor_name=os.getenv("CATALOG_ACTOR_NAME", ""),
        )
