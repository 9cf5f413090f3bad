from __future__ import annotations

import logging
from typing import Any, Optional

from ..config import DEFAULT_MODEL, ScientistConfig
from ..errors import CredentialMissingError, EmptyCompletionError
from ..models import CompletionResult, TokenUsage

logger = logging.getLogger(__name__)


class LLMClient:
    """Single-shot chat-completion client.

    One `complete` call is one blocking request: no retries, no streaming,
    and the SDK's default timeout. `client` may be any object shaped like
    `openai.OpenAI` (`client.chat.completions.create(...)`); tests pass a fake.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        base_url: Optional[str] = None,
        client: Any = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self._client = client

    @classmethod
    def from_config(cls, config: ScientistConfig, client: Any = None) -> "LLMClient":
        return cls(api_key=config.api_key, model=config.model, base_url=config.base_url, client=client)

    def _ensure_client(self) -> Any:
        if self._client is None:
            # Lazy import so the SDK is only loaded when a request is made.
            from openai import OpenAI

            kwargs: dict[str, Any] = {"api_key": self.api_key}
            if self.base_url:
                kwargs["base_url"] = self.base_url
            self._client = OpenAI(**kwargs)
        return self._client

    def complete(self, prompt: str) -> CompletionResult:
        """Send `prompt` as one user message and return the reply text and usage.

        Raises:
            CredentialMissingError: api key is None or blank; nothing is sent.
            EmptyCompletionError: the reply has no choices or no content.
        """
        if not self.api_key or not self.api_key.strip():
            raise CredentialMissingError()

        client = self._ensure_client()
        resp = client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
        )

        choices = getattr(resp, "choices", None) or []
        if not choices:
            raise EmptyCompletionError()
        message = getattr(choices[0], "message", None)
        text = getattr(message, "content", None) if message is not None else None
        if not text:
            raise EmptyCompletionError()

        return CompletionResult(text=text, usage=_usage_from(resp))


def _usage_from(resp: Any) -> Optional[TokenUsage]:
    usage = getattr(resp, "usage", None)
    if usage is None:
        return None
    prompt_tokens = int(getattr(usage, "prompt_tokens", 0) or 0)
    completion_tokens = int(getattr(usage, "completion_tokens", 0) or 0)
    total_tokens = getattr(usage, "total_tokens", None)
    return TokenUsage(
        prompt_tokens=prompt_tokens,
        completion_tokens=completion_tokens,
        total_tokens=int(total_tokens) if total_tokens is not None else prompt_tokens + completion_tokens,
    )
