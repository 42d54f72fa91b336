"""OpenAI chat-completions adapter using aiohttp — implements LLMPort."""

import asyncio
import sys
from datetime import datetime
from typing import Optional

import aiohttp

from actionscribe.config import ProviderConfig
from actionscribe.domain.errors import ProviderFailure


def _log(msg: str):
    print(msg, file=sys.stderr)


class OpenAIAdapter:
    """Single-turn chat completion over HTTP. Implements LLMPort protocol."""

    def __init__(self, config: Optional[ProviderConfig] = None):
        self.config = config or ProviderConfig()

    @property
    def is_configured(self) -> bool:
        return bool(self.config.api_key)

    @property
    def completions_url(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/chat/completions"

    async def execute(
        self,
        message: str,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> str:
        if not self.is_configured:
            raise ProviderFailure("OPENAI_API_KEY is not configured")

        payload = {
            "model": model or self.config.model,
            "messages": [{"role": "user", "content": message}],
            "temperature": self.config.temperature if temperature is None else temperature,
        }
        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }
        timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
        print(f"[{datetime.now().isoformat()}] Executing with OpenAI ({payload['model']})")

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self.completions_url, json=payload, headers=headers) as resp:
                    status = resp.status
                    try:
                        data = await resp.json(content_type=None)
                    except ValueError:
                        data = None
        except asyncio.TimeoutError:
            raise ProviderFailure(f"Timeout ({self.config.timeout_seconds:.0f}s)")
        except aiohttp.ClientError as e:
            raise ProviderFailure(f"Provider unreachable: {e}") from e

        if status != 200:
            error = data.get("error", {}) if isinstance(data, dict) else {}
            detail = error.get("message") if isinstance(error, dict) else None
            _log(f"OpenAI returned HTTP {status}: {detail or data}")
            raise ProviderFailure(f"HTTP {status}: {detail or 'provider error'}")

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            raise ProviderFailure(f"Unexpected provider response: {str(data)[:200]}")

        print(f"[{datetime.now().isoformat()}] Completed")
        return (content or "").strip()
