# app/lib/openai_client.py
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from openai import AsyncOpenAI

from app.config import config

CHAT_SYSTEM = "You are a creative children's story writer."

client = AsyncOpenAI(api_key=config.openai_api_key)


@dataclass(frozen=True)
class GenerationParams:
    model: str = config.openai_text_model
    max_tokens: int = 300
    temperature: float = 0.7
    top_p: float = 0.9
    frequency_penalty: float = 0.5
    presence_penalty: float = 0.5


@runtime_checkable
class StoryGenerator(Protocol):
    async def generate(self, prompt: str, params: GenerationParams) -> str: ...


class OpenAIStoryGenerator:
    """
    Story text from OpenAI. `mode="completions"` sends the prompt to the
    completions endpoint; `mode="chat"` wraps it in a chat exchange with a
    story-writer system message.
    """

    def __init__(self, openai_client: Optional[AsyncOpenAI] = None, mode: str = config.openai_api_mode):
        self.client = openai_client or client
        self.mode = mode

    async def generate(self, prompt: str, params: GenerationParams) -> str:
        sampling = dict(
            model=params.model,
            max_tokens=params.max_tokens,
            temperature=params.temperature,
            top_p=params.top_p,
            frequency_penalty=params.frequency_penalty,
            presence_penalty=params.presence_penalty,
        )
        if self.mode == "chat":
            resp = await self.client.chat.completions.create(
                messages=[
                    {"role": "system", "content": CHAT_SYSTEM},
                    {"role": "user", "content": prompt},
                ],
                **sampling,
            )
            return (resp.choices[0].message.content or "").strip()

        resp = await self.client.completions.create(prompt=prompt, **sampling)
        return (resp.choices[0].text or "").strip()
