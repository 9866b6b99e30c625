"""Availability converter — turns free-text availability into a weekday/interval string via LLM."""
import logging
import re

from openai import AsyncOpenAI

from .config import settings

logger = logging.getLogger(__name__)

AVAILABILITY_PROMPT = (
    "Convert the following text to a stringify string that resembles json as the keys as days \n"
    "        with Sunday 0-index, and its values be a list of floats from a 24 hour clock as [start, end]. "
    "Include the empty days \n"
    "        and do not include code or code blocking. \"{availability}\""
)

_LEADING_FENCE = re.compile(r"^```json\s*")
_TRAILING_FENCE = re.compile(r"\s*```\Z")


def _get_client() -> AsyncOpenAI:
    return AsyncOpenAI(
        api_key=settings.gemini_api_key,
        base_url=settings.llm_base_url,
    )


def strip_code_fence(raw: str) -> str:
    """Remove a leading ```json and a trailing ``` fence, leaving everything else as-is."""
    text = _LEADING_FENCE.sub("", raw, count=1)
    return _TRAILING_FENCE.sub("", text, count=1)


async def convert_availability(availability: str) -> str:
    """Ask the model for the structured form of ``availability``.

    The reply is stored verbatim once fences are stripped; it is not parsed as JSON.
    """
    client = _get_client()
    prompt = AVAILABILITY_PROMPT.replace("{availability}", availability)

    response = await client.chat.completions.create(
        model=settings.availability_model,
        messages=[{"role": "user", "content": prompt}],
    )

    raw = response.choices[0].message.content or ""
    logger.info(f"Availability raw: {raw[:200]}")
    return strip_code_fence(raw)
