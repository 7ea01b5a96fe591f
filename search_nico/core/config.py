"""Configuration from environment variables (.env)."""

import os
from pathlib import Path
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

DEFAULT_BASE_URL = "http://api.search.nicovideo.jp"
DEFAULT_TIMEOUT_MS = 3000


@dataclass
class Config:
    project_root: Path
    logs_dir: Path
    base_url: str
    default_timeout_ms: int
    issuer: str
    reason: str

    @classmethod
    def load(cls) -> "Config":
        project_root = Path(__file__).parent.parent.parent
        logs_dir = os.getenv("SEARCH_NICO_LOGS_DIR", "").strip()
        return cls(
            project_root=project_root,
            logs_dir=Path(logs_dir) if logs_dir else project_root / "logs",
            base_url=os.getenv("SEARCH_NICO_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            default_timeout_ms=int(os.getenv("SEARCH_NICO_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))),
            issuer=os.getenv("SEARCH_NICO_ISSUER", ""),
            reason=os.getenv("SEARCH_NICO_REASON", ""),
        )

    def validate(self) -> list[str]:
        errors = []
        if not self.issuer.strip():
            errors.append("SEARCH_NICO_ISSUER is not set")
        if not self.reason.strip():
            errors.append("SEARCH_NICO_REASON is not set")
        if self.default_timeout_ms <= 0:
            errors.append(f"SEARCH_NICO_TIMEOUT_MS must be positive, got {self.default_timeout_ms}")
        return errors


config = Config.load()
