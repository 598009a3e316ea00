"""Outbound request seam for cumulative-return figures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from openai import AsyncOpenAI

from config.settings import settings


@dataclass(frozen=True, slots=True)
class SourceReply:
    text: str
    citations: tuple[str, ...] = field(default_factory=tuple)


class PerformanceSource(Protocol):
    async def generate(self, prompt: str) -> SourceReply: ...


class OpenAIPerformanceSource:
    """Ask a web-search capable chat model and keep its citation URLs."""

    def __init__(self, client: AsyncOpenAI | None = None, model: str | None = None) -> None:
        self._client = client or AsyncOpenAI(api_key=settings.upstream.api_key or None)
        self._model = model or settings.upstream.model

    async def generate(self, prompt: str) -> SourceReply:
        response = await self._client.chat.completions.create(
            model=self._model,
            web_search_options={},
            messages=[
                {"role": "system", "content": "You are a fund data researcher. Reply with JSON only."},
                {"role": "user", "content": prompt},
            ],
        )
        message = response.choices[0].message
        if not message.content:
            raise ValueError("Upstream reply was empty")

        citations = tuple(
            annotation.url_citation.url
            for annotation in (message.annotations or [])
            if annotation.type == "url_citation"
        )
        return SourceReply(text=message.content, citations=citations)

    async def aclose(self) -> None:
        await self._client.close()


class UnavailableSource:
    """Source that always fails; every fetch falls back to estimates."""

    async def generate(self, prompt: str) -> SourceReply:
        raise ConnectionError("Performance source is disabled (offline mode)")

    async def aclose(self) -> None:
        return None
