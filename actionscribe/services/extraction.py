"""Action extraction service: note text in, candidate actions out."""

from typing import List, Optional

from actionscribe.domain.action_parser import (
    NO_ACTIONS,
    build_extraction_prompt,
    parse_action_lines,
)
from actionscribe.domain.errors import ProviderFailure
from actionscribe.ports.outbound import LLMPort

EXTRACTION_TEMPERATURE = 0.7


class ActionExtractionService:
    """Wraps one provider call with the fixed extraction prompt.

    Every provider error surfaces as ProviderFailure; nothing is retried and
    partial output is never salvaged.
    """

    def __init__(self, provider: LLMPort, temperature: Optional[float] = EXTRACTION_TEMPERATURE):
        self.provider = provider
        self.temperature = temperature

    async def extract_raw(self, text: str) -> str:
        """Return the provider's response text, or NO_ACTIONS when it is empty."""
        prompt = build_extraction_prompt(text)
        try:
            response = await self.provider.execute(prompt, temperature=self.temperature)
        except ProviderFailure:
            raise
        except Exception as e:
            raise ProviderFailure(str(e)) from e
        return response.strip() or NO_ACTIONS

    async def extract_actions(self, text: str) -> List[str]:
        return parse_action_lines(await self.extract_raw(text))
