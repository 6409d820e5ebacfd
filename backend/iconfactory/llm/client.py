"""LangChain ChatAnthropic wrapper for icon set generation."""

from __future__ import annotations

import logging

from iconfactory.config import settings
from iconfactory.errors import LLMNotConfiguredError, LLMRequestError
from iconfactory.llm.prompts import get_system_prompt, get_user_prompt

logger = logging.getLogger(__name__)


def is_configured() -> bool:
    return bool(settings.anthropic_api_key)


async def get_icon_set_response(prompt: str, style: str = "modern", count: int = 6) -> str:
    """Return the model's raw text answer. It may or may not be valid JSON."""
    if not is_configured():
        raise LLMNotConfiguredError("LLM not configured. Set ANTHROPIC_API_KEY in .env")

    from langchain_anthropic import ChatAnthropic
    from langchain_core.messages import HumanMessage, SystemMessage

    llm = ChatAnthropic(
        model=settings.model_generate,
        api_key=settings.anthropic_api_key,
        max_tokens=settings.llm_max_tokens,
        temperature=settings.llm_temperature,
        timeout=settings.llm_timeout_s,
    )

    messages = [
        SystemMessage(content=get_system_prompt(style, count)),
        HumanMessage(content=get_user_prompt(prompt)),
    ]

    logger.info("Requesting %d icon(s) from %s", count, settings.model_generate)
    try:
        response = await llm.ainvoke(messages)
    except Exception as e:
        logger.error("Icon generation request failed: %s", e)
        raise LLMRequestError(f"Failed to generate icons: {e}") from e

    content = response.content
    if isinstance(content, list):
        return "".join(
            block.get("text", "") if isinstance(block, dict) else str(block) for block in content
        )
    return str(content)
