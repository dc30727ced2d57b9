from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    log_level: str = "WARNING"
    fail_fast: bool = True  # validate stops at the first bad expression
    comment_prefix: str = "//"
