from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv(override=False)

@dataclass(frozen=True)
class Settings:
    app_name: str = os.getenv("HYBRIDBAIL_APP_NAME", "HybridBail")

    # Outputs / logs
    outputs_dir: str = os.getenv("HYBRIDBAIL_OUTPUTS_DIR", "outputs")
    log_level: str = os.getenv("HYBRIDBAIL_LOG_LEVEL", "INFO").strip().upper()
    log_file: str | None = os.getenv("HYBRIDBAIL_LOG_FILE") or None

    # Parsing: wrap marker-free narratives into a single "Other" section
    fallback_section: bool = os.getenv("HYBRIDBAIL_FALLBACK_SECTION", "0").strip() == "1"

settings = Settings()
