"""Extraction prompt and provider response parsing.

Pure Python, no framework dependencies.
"""

from typing import List

# Sentinel the provider returns when the text holds nothing actionable
NO_ACTIONS = "NO_ACTIONS"

EXTRACTION_PROMPT = """
Analyze the following text and extract or infer action items. Consider:
1. Explicit tasks (e.g., "need to", "todo", "should")
2. Implied tasks from context
3. Break down complex tasks into smaller actionable items
4. Convert discussions/notes into concrete action items

Text to analyze:
{text}

Return ONLY the list of action items in a clear, actionable format. Each action should be on a new line.
If no actions are found, return "{sentinel}".
"""


def build_extraction_prompt(text: str) -> str:
    """Embed the note delta verbatim into the fixed instruction prompt."""
    return EXTRACTION_PROMPT.format(text=text, sentinel=NO_ACTIONS).strip()


def is_no_actions(response: str) -> bool:
    return response.strip() == NO_ACTIONS


def parse_action_lines(response: str) -> List[str]:
    """Turn a provider response into ordered candidate action strings."""
    if not response or is_no_actions(response):
        return []
    return [line.strip() for line in response.split("\n") if line.strip()]
