"""Review service - asks the LLM (DashScope / 通义千问) for a write-up of a finished run.

The engine hands over an immutable JourneySnapshot (or the equivalent wire
request); nothing here reads or writes game state. A failed call yields no
review for that run and is never retried.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from xml.sax.saxutils import escape

import yaml

from wildtrail.config import settings
from wildtrail.core.errors import UpstreamUnavailable
from wildtrail.schemas.review import ReviewRequest, ReviewResponse
from wildtrail.schemas.session import JourneySnapshot

logger = logging.getLogger(__name__)

PROMPT_PATH = Path(__file__).parent.parent / "data" / "prompts" / "review.yaml"


class MissingApiKey(UpstreamUnavailable):
    """Raised when no DashScope API key is configured."""


def _get_generation(api_key: str):
    """Lazy import of dashscope.Generation to avoid import-time crashes in test."""
    import dashscope
    from dashscope import Generation

    dashscope.api_key = api_key
    return Generation


def load_prompt_config(path: Path = PROMPT_PATH) -> dict:
    """Load the review prompt template and model params from YAML."""
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class ReviewService:
    def __init__(self, api_key: str | None = None, model: str | None = None, prompt_path: Path = PROMPT_PATH):
        self.api_key = settings.DASHSCOPE_API_KEY if api_key is None else api_key
        self.model = model or settings.LLM_MODEL
        config = load_prompt_config(prompt_path)
        self._template: str = config.get("system_prompt", "{journey_log}\n{unlocked_gallery}")
        self._model_params: dict = config.get("model_params", {})

    def build_prompt(self, request: ReviewRequest) -> str:
        """Fill the prompt template with the journey log and the new gallery entries."""
        journey_log = "\n".join(
            "        <event>\n"
            f"            <encounter>{escape(entry.encounter)}</encounter>\n"
            f"            <choice>{escape(entry.choice)}</choice>\n"
            "        </event>"
            for entry in request.journey_log
        )
        unlocked_gallery = "\n".join(f"        - {escape(name)}" for name in request.unlocked_gallery)
        return self._template.format(journey_log=journey_log, unlocked_gallery=unlocked_gallery)

    async def generate_review(self, request: ReviewRequest | JourneySnapshot) -> str:
        """Return the review text, or raise UpstreamUnavailable."""
        if isinstance(request, JourneySnapshot):
            request = ReviewRequest.from_snapshot(request)
        if not self.api_key:
            raise MissingApiKey("DASHSCOPE_API_KEY is not configured")

        Generation = _get_generation(self.api_key)
        try:
            response = await asyncio.to_thread(
                Generation.call,
                model=self.model,
                messages=[{"role": "system", "content": self.build_prompt(request)}],
                result_format="message",
                temperature=self._model_params.get("temperature", settings.LLM_TEMPERATURE),
                max_tokens=self._model_params.get("max_tokens", settings.LLM_MAX_TOKENS),
            )
        except Exception as exc:  # the SDK raises its own and requests' exception types
            raise UpstreamUnavailable(f"LLM request failed: {exc}") from exc

        if response.status_code != 200:
            raise UpstreamUnavailable(f"LLM API error: {response.status_code} - {response.message}")
        try:
            content = response.output.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as exc:
            raise UpstreamUnavailable("LLM response had no message content") from exc
        if not content or not content.strip():
            raise UpstreamUnavailable("LLM returned an empty review")
        return content.strip()

    async def request_review(self, request: ReviewRequest | JourneySnapshot) -> ReviewResponse:
        """Soft-failure wrapper: never raises, reports failure in the response."""
        try:
            review = await self.generate_review(request)
        except UpstreamUnavailable as exc:
            logger.warning("Journey review unavailable: %s", exc)
            return ReviewResponse(success=False, error=str(exc))
        return ReviewResponse(success=True, review=review)


review_service = ReviewService()
