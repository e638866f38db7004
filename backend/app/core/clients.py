from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx
import openai
from openai import AsyncOpenAI
from pydantic import BaseModel, Field

log = logging.getLogger("lyricsmv.textgen")


class ClientError(RuntimeError):
    pass


class UpstreamRequestError(ClientError):
    pass


class CompletionMessage(BaseModel):
    content: str | None = None


class CompletionChoice(BaseModel):
    message: CompletionMessage = Field(default_factory=CompletionMessage)


class ChatCompletionPayload(BaseModel):
    choices: list[CompletionChoice] = Field(default_factory=list)

    def first_content(self) -> str:
        if not self.choices:
            return ""
        return self.choices[0].message.content or ""


@dataclass(slots=True)
class TextGenerationClient:
    base_url: str
    model: str
    http_client: httpx.AsyncClient | None = None
    _base: AsyncOpenAI | None = field(default=None, init=False, repr=False)

    async def complete(self, system_prompt: str, user_prompt: str, credential: str) -> str:
        client = self._client(credential)
        try:
            raw = await client.chat.completions.with_raw_response.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except openai.APIStatusError as exc:
            log.warning("chat completion rejected", extra={"status": exc.status_code})
            raise UpstreamRequestError("request failed") from exc

        payload = ChatCompletionPayload.model_validate_json(raw.http_response.text)
        return payload.first_content()

    async def aclose(self) -> None:
        if self._base is not None:
            await self._base.close()
            self._base = None

    def _client(self, credential: str) -> AsyncOpenAI:
        # copies from with_options share the base client's connection pool
        if self._base is None:
            self._base = AsyncOpenAI(
                api_key=credential,
                base_url=self.base_url.rstrip("/"),
                max_retries=0,
                http_client=self.http_client,
            )
        return self._base.with_options(api_key=credential)
