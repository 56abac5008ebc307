from typing import Any
from loguru import logger
from openai import OpenAI
from healthbot.errors import GenerationError
from healthbot.settings import Settings


def extract_text(resp: Any) -> str:
    """Pull the generated text out of a chat completion, "" if there is none."""
    choices = getattr(resp, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None) or ""


class ReportGenerator:
    """One-shot JSON report generation over an OpenAI-compatible chat API."""

    def __init__(self, client: OpenAI, model: str, temperature: float = 0.2):
        self.client = client
        self.model = model
        self.temperature = temperature

    @classmethod
    def from_settings(cls, settings: Settings) -> "ReportGenerator":
        # max_retries=0: a failed call fails the request
        client = OpenAI(
            api_key=settings.api_key,
            base_url=settings.base_url,
            max_retries=0,
        )
        return cls(client, model=settings.model, temperature=settings.temperature)

    def generate(self, system_instruction: str, user_message: str) -> str:
        messages = [
            {"role": "system", "content": system_instruction},
            {"role": "user", "content": user_message},
        ]
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
                response_format={"type": "json_object"},
            )
        except Exception as e:
            logger.exception("LLM error")
            raise GenerationError(str(e)) from e

        return extract_text(resp)
