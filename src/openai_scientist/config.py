from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_MODEL = "gpt-4o"


class TokenPricing(BaseModel):
    """USD prices per one million tokens."""

    input_per_million: float = 5.00
    output_per_million: float = 15.00

    @property
    def per_input_token(self) -> float:
        return self.input_per_million / 1e6

    @property
    def per_output_token(self) -> float:
        return self.output_per_million / 1e6


class ScientistConfig(BaseModel):
    """
    Everything a pipeline needs from its environment.

    api_key: OpenAI secret; empty string is treated the same as missing
    model: chat-completion model name
    base_url: optional endpoint override for OpenAI-compatible services
    output_root: directory under which timestamped run folders are created
    pricing: token prices used for cost reporting
    """

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    base_url: Optional[str] = None
    output_root: Path = Path(".")
    pricing: TokenPricing = Field(default_factory=TokenPricing)

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    @classmethod
    def from_env(cls, **overrides: object) -> "ScientistConfig":
        """
        Build a config from OPENAI_API_KEY, OPENAI_BASE_URL and OPENAI_SCIENTIST_MODEL.

        Only the CLI calls this; library code receives its config explicitly.
        Overrides with a value of None are ignored.
        """
        values: dict[str, object] = {
            "api_key": os.environ.get("OPENAI_API_KEY", ""),
            "base_url": os.environ.get("OPENAI_BASE_URL") or None,
            "model": os.environ.get("OPENAI_SCIENTIST_MODEL") or DEFAULT_MODEL,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
