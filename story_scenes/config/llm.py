"""
LLM configuration for the Cultural Story Scenes service.

Stories are written by Groq's hosted Llama model, reached through Groq's
OpenAI-compatible chat-completions endpoint. Calls are single-shot: no
retry and no explicit timeout beyond the client defaults.
"""

from typing import Optional

GENERATION_CONSTANTS = {
    "model": "llama-3.1-8b-instant",
    "base_url": "https://api.groq.com/openai/v1",
    "max_tokens": 900,
    "temperature": 0.7,
    "max_retries": 0,  # Single attempt per request
}

SYSTEM_PROMPT_TEMPLATE = """Write a {zone} cultural story in {language}.
Split the story into exactly 4 scenes.
Each scene must be ONE paragraph (5–7 lines).
Do not use bullet points."""


def build_system_prompt(zone: Optional[str], language: Optional[str]) -> str:
    """Build the system instruction for a zone and language.

    A missing zone or language is left blank in the instruction.
    """
    return SYSTEM_PROMPT_TEMPLATE.format(zone=zone or "", language=language or "")


def build_messages(zone: Optional[str], language: Optional[str], query: str) -> list[dict]:
    """Build the chat messages: system instruction plus the raw topic."""
    return [
        {"role": "system", "content": build_system_prompt(zone, language)},
        {"role": "user", "content": query},
    ]
