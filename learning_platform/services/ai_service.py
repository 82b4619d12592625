"""
OpenAI chat-completion gateway for the tutor.

Every call either returns the model's text verbatim or an explicit
GatewayError; nothing is raised to the caller.
"""

import enum
from dataclasses import dataclass
from typing import Any, Optional

import openai
from loguru import logger

from learning_platform.config import OPENAI_KEY_PLACEHOLDER, settings


SYSTEM_PROMPT = """You are a helpful, friendly teacher for rural Punjab school students (ages 8-16).
Your responses should be:
- Simple and easy to understand
- In English (students are learning)
- Use examples from Punjab/India context when possible
- Encouraging and positive
- Include emojis to make it fun 😊
- Keep answers concise (2-3 paragraphs max)
- Focus on subjects: Math, Science, English, Punjabi, Social Studies
- If asked about Punjab, mention its culture, agriculture, festivals
- Always end with an encouraging note or follow-up question"""


# ── Key validation ────────────────────────────────────────
def is_configured(api_key: Optional[str]) -> bool:
    """True when the key is present and not the sample placeholder."""
    return bool(api_key) and api_key != OPENAI_KEY_PLACEHOLDER


# ─────────────────────────────────────────────────────────
#  RESULT TYPES
# ─────────────────────────────────────────────────────────

class GatewayErrorKind(str, enum.Enum):
    NOT_CONFIGURED = "not_configured"
    UPSTREAM = "upstream"


@dataclass(frozen=True)
class GatewayError:
    kind: GatewayErrorKind
    detail: str = ""


@dataclass(frozen=True)
class GatewayResult:
    answer: Optional[str] = None
    error: Optional[GatewayError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, answer: str) -> "GatewayResult":
        return cls(answer=answer)

    @classmethod
    def failure(cls, kind: GatewayErrorKind, detail: str = "") -> "GatewayResult":
        return cls(error=GatewayError(kind=kind, detail=detail))


# ─────────────────────────────────────────────────────────
#  GATEWAY
# ─────────────────────────────────────────────────────────

class AIGateway:
    """Sends one question per call to the chat-completions endpoint.

    ``client`` is anything exposing ``chat.completions.create`` like
    ``openai.AsyncOpenAI``; it is built lazily from the key when omitted.
    Request parameters are fixed per instance.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        client: Any = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> None:
        self.api_key = settings.OPENAI_API_KEY if api_key is None else api_key
        self.model = model or settings.OPENAI_MODEL
        self.max_tokens = max_tokens if max_tokens is not None else settings.AI_MAX_TOKENS
        self.temperature = temperature if temperature is not None else settings.AI_TEMPERATURE
        self._client = client

    @property
    def is_configured(self) -> bool:
        return is_configured(self.api_key)

    def _get_client(self):
        if self._client is None:
            # No retries: one outbound call per question.
            self._client = openai.AsyncOpenAI(api_key=self.api_key, max_retries=0)
        return self._client

    async def generate(self, question: str) -> GatewayResult:
        if not self.is_configured:
            return GatewayResult.failure(
                GatewayErrorKind.NOT_CONFIGURED, "OpenAI API key not configured"
            )

        try:
            response = await self._get_client().chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": question},
                ],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except openai.APIStatusError as e:
            return GatewayResult.failure(
                GatewayErrorKind.UPSTREAM, f"status {e.status_code}: {e.message}"
            )
        except openai.OpenAIError as e:
            return GatewayResult.failure(GatewayErrorKind.UPSTREAM, f"{type(e).__name__}: {e}")

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            return GatewayResult.failure(GatewayErrorKind.UPSTREAM, f"malformed response: {e!r}")
        if not isinstance(content, str):
            return GatewayResult.failure(GatewayErrorKind.UPSTREAM, "malformed response: no message content")

        logger.debug(f"[AI] '{question[:40]}' -> '{content[:60]}'")
        return GatewayResult.success(content)

    async def aclose(self) -> None:
        if self._client is not None and hasattr(self._client, "close"):
            await self._client.close()
