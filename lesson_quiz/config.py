from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"

DEFAULTS = {
    "submissions_path": "data/submissions.json",
    "save_submissions": True,
    "default_num_questions": 5,
    "max_questions": 20,
    "content_log_limit": 5000,
    "demo_mode": True,
    "demo_delay_ms": 800,
}


@dataclass
class Settings:
    submissions_path: str = DEFAULTS["submissions_path"]
    save_submissions: bool = DEFAULTS["save_submissions"]
    default_num_questions: int = DEFAULTS["default_num_questions"]
    max_questions: int = DEFAULTS["max_questions"]
    content_log_limit: int = DEFAULTS["content_log_limit"]
    demo_mode: bool = DEFAULTS["demo_mode"]
    demo_delay_ms: int = DEFAULTS["demo_delay_ms"]

    @property
    def project_root(self) -> Path:
        return Path(__file__).resolve().parent.parent

    @property
    def submissions_full_path(self) -> Path:
        # Absolute paths pass through the join unchanged
        return self.project_root / self.submissions_path

    def to_dict(self) -> dict:
        return {
            "submissions_path": self.submissions_path,
            "save_submissions": self.save_submissions,
            "default_num_questions": self.default_num_questions,
            "max_questions": self.max_questions,
            "content_log_limit": self.content_log_limit,
            "demo_mode": self.demo_mode,
            "demo_delay_ms": self.demo_delay_ms,
        }


def load_settings() -> Settings:
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        known = {f.name for f in Settings.__dataclass_fields__.values()}
        filtered = {k: v for k, v in raw.items() if k in known}
        return Settings(**filtered)
    return Settings()


def save_settings(settings: Settings) -> None:
    CONFIG_PATH.write_text(json.dumps(settings.to_dict(), indent=4) + "\n")
