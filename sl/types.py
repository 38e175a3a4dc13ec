import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_PROMPT = "sl> "


@dataclass
class ParseOptions:
    # None means list nesting is unbounded.
    max_depth: Optional[int] = None


@dataclass
class ReplConfig:
    prompt: str = DEFAULT_PROMPT
    history_file: Optional[str] = None
    history_length: int = 1000

    @classmethod
    def from_env(cls) -> "ReplConfig":
        """Build a config from SL_PROMPT, SL_HISTFILE and SL_HISTSIZE."""
        cfg = cls()
        if "SL_PROMPT" in os.environ:
            cfg.prompt = os.environ["SL_PROMPT"]
        if os.environ.get("SL_HISTFILE"):
            cfg.history_file = os.path.expanduser(os.environ["SL_HISTFILE"])
        size = os.environ.get("SL_HISTSIZE", "")
        if size.lstrip("-").isdigit():
            cfg.history_length = int(size)
        return cfg
