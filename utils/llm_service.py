import asyncio
import json
import logging
import re
from enum import Enum
from typing import Any, Dict, List, Optional

from langchain_anthropic import ChatAnthropic
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from config.settings import settings, PLACEHOLDER_API_KEY
from models.common import AgentType, SwotQuadrant
from utils.errors import LLMParseError, LLMTransportError, ValidationError
from utils.langfuse_config import get_langfuse_handler
from utils.prompt_loader import PromptLoader

logger = logging.getLogger(__name__)

# Greedy: first "{" to last "}" so nested objects stay intact
_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


class LLMProvider(Enum):
    GEMINI = "gemini"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    OLLAMA = "ollama"
    OPENROUTER = "openrouter"


class SwotResult(BaseModel):
    """Parsed SWOT object; quadrants the model leaves out are empty."""
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    opportunities: List[str] = Field(default_factory=list)
    threats: List[str] = Field(default_factory=list)


def extract_json_object(content: str) -> Dict[str, Any]:
    """
    Pull the embedded JSON object out of a model reply.

    Models often wrap the object in prose or code fences; everything from the
    first "{" to the last "}" is parsed.

    Args:
        content: Raw model text

    Returns:
        Parsed dict

    Raises:
        LLMParseError: No object found or it is not valid JSON
    """
    match = _JSON_OBJECT_RE.search(content or "")
    if not match:
        raise LLMParseError("Failed to parse SWOT analysis: No valid JSON found in response")

    try:
        return json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise LLMParseError(f"Failed to parse SWOT analysis: {e}") from e


def format_transcript(messages: List[Dict[str, str]]) -> str:
    """Render prior turns as "role: content" lines."""
    return "\n".join(f"{m.get('role', '')}: {m.get('content', '')}" for m in messages)


def _content_text(response: Any, purpose: str) -> str:
    """
    Flatten a LangChain reply to plain text.

    Content is either a string or a list of blocks (strings or
    {"type": "text", "text": ...} dicts); non-text blocks are skipped.

    Raises:
        LLMParseError: The reply carries no text at all
    """
    content = getattr(response, "content", None)
    if isinstance(content, str):
        return content

    parts = []
    if isinstance(content, list):
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type", "text") == "text":
                text = block.get("text")
                if isinstance(text, str):
                    parts.append(text)

    if not parts:
        raise LLMParseError(f"Failed to generate {purpose}: response contained no text")
    return "".join(parts)


class LLMService:
    """
    Provider-agnostic LLM wrapper for the dashboard agents.

    Supports:
    - OpenAI
    - Anthropic
    - OpenRouter (OpenAI-compatible)
    - Gemini
    - Ollama (local, OpenAI-compatible)

    Every call carries an explicit timeout. Failures are raised, never
    swallowed: LLMTransportError for the call itself, LLMParseError for
    unusable output. There is no retry and no caching.
    """

    def __init__(
        self,
        provider: Optional[str] = None,
        model_name: Optional[str] = None,
        temperature: Optional[float] = None,
        timeout: Optional[float] = None,
        model: Optional[Any] = None,
        prompt_loader: Optional[PromptLoader] = None,
    ):
        """
        Args:
            provider: openai | anthropic | openrouter | ollama | gemini
            model_name: Provider model name
            temperature: Sampling temperature
            timeout: Seconds before a call is abandoned
            model: Pre-built LangChain chat model; replaces the provider
                models for both SWOT and turn calls
            prompt_loader: Template loader for system/human prompts
        """
        self.provider = (provider or settings.LLM_PROVIDER).lower()
        self.model_name = model_name or settings.LLM_MODEL
        self.temperature = settings.LLM_TEMPERATURE if temperature is None else temperature
        self.timeout = timeout or settings.LLM_TIMEOUT_SECONDS
        self.prompt_loader = prompt_loader or PromptLoader()

        if model is not None:
            self.swot_model = model
            self.turn_model = model
        else:
            self.swot_model = self._load_provider_model(settings.SWOT_MAX_TOKENS)
            self.turn_model = self._load_provider_model(settings.TURN_MAX_TOKENS)

    # ---------------------------------------------------------------------
    # Provider Loader
    # ---------------------------------------------------------------------
    def _load_provider_model(self, max_tokens: int):
        provider = self.provider

        # ★ OPENAI (native)
        if provider == "openai":
            return ChatOpenAI(
                api_key=settings.OPENAI_API_KEY or PLACEHOLDER_API_KEY,
                model=self.model_name,
                temperature=self.temperature,
                max_tokens=max_tokens,
                timeout=self.timeout,
                max_retries=0,
            )

        # ★ ANTHROPIC
        if provider == "anthropic":
            return ChatAnthropic(
                api_key=settings.ANTHROPIC_API_KEY or PLACEHOLDER_API_KEY,
                model=self.model_name,
                temperature=self.temperature,
                max_tokens=max_tokens,
                timeout=self.timeout,
                max_retries=0,
            )

        # ★ OPENROUTER (OpenAI-compatible API)
        if provider == "openrouter":
            return ChatOpenAI(
                api_key=settings.OPENROUTER_API_KEY or PLACEHOLDER_API_KEY,
                base_url="https://openrouter.ai/api/v1",
                model=self.model_name,
                temperature=self.temperature,
                max_tokens=max_tokens,
                timeout=self.timeout,
                max_retries=0,
            )

        # ★ OLLAMA (OpenAI-compatible)
        if provider == "ollama":
            return ChatOpenAI(
                api_key="ollama",  # not used
                base_url="http://localhost:11434/v1",
                model=self.model_name,
                temperature=self.temperature,
                max_tokens=max_tokens,
                timeout=self.timeout,
                max_retries=0,
            )

        # ★ GOOGLE GEMINI
        if provider == "gemini":
            return ChatGoogleGenerativeAI(
                google_api_key=settings.GEMINI_API_KEY or PLACEHOLDER_API_KEY,
                model=self.model_name,
                temperature=self.temperature,
                max_output_tokens=max_tokens,
                timeout=self.timeout,
                max_retries=0,
            )

        raise ValueError(f"Unsupported LLM provider: {provider}")

    # ---------------------------------------------------------------------
    # Transport
    # ---------------------------------------------------------------------
    async def _ainvoke(self, model: Any, messages: List[Any], purpose: str) -> str:
        """Run one model call under the timeout and map failures to LLMTransportError."""
        handler = get_langfuse_handler()
        config = {"callbacks": [handler]} if handler else None

        try:
            response = await asyncio.wait_for(
                model.ainvoke(messages, config=config),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"LLM {purpose} timed out after {self.timeout}s")
            raise LLMTransportError(
                f"Failed to generate {purpose}: timed out after {self.timeout}s"
            ) from e
        except Exception as e:
            logger.error(f"LLM {purpose} call failed: {e}")
            raise LLMTransportError(f"Failed to generate {purpose}: {e}") from e

        return _content_text(response, purpose)

    # ---------------------------------------------------------------------
    # SWOT Generator
    # ---------------------------------------------------------------------
    async def generate_swot(
        self,
        question: str,
        current_role: Optional[str] = None,
        target_role: Optional[str] = None,
    ) -> SwotResult:
        """
        Ask the model for a SWOT analysis of a career decision.

        Args:
            question: Career question text
            current_role: Optional current role
            target_role: Optional target role

        Returns:
            SwotResult with the four quadrant lists

        Raises:
            LLMTransportError: Provider call failed or timed out
            LLMParseError: Reply had no usable JSON object
        """
        prompt = self.prompt_loader.load(
            "swot_analysis",
            mode="shared",
            question=question,
            current_role=current_role or "Not specified",
            target_role=target_role or "Not specified",
        )

        logger.info(f"Generating SWOT analysis with {self.provider}/{self.model_name}")
        content = await self._ainvoke(
            self.swot_model, [HumanMessage(content=prompt)], "SWOT analysis"
        )
        logger.debug(f"SWOT response content: {content[:200]}")

        data = extract_json_object(content)
        try:
            return SwotResult.model_validate(data)
        except PydanticValidationError as e:
            raise LLMParseError(f"Failed to parse SWOT analysis: {e}") from e

    # ---------------------------------------------------------------------
    # Conversation Turn Generator
    # ---------------------------------------------------------------------
    async def generate_turn(
        self,
        agent_type: str,
        context: str,
        prior_messages: List[Dict[str, str]],
        focus_section: Optional[str] = None,
    ) -> str:
        """
        Produce one free-text turn for an agent conversation.

        Args:
            agent_type: "vazir" | "gawi" | "zaki"
            context: Career question context block
            prior_messages: Transcript so far ({"role", "content", ...})
            focus_section: SWOT quadrant Vazir should focus on

        Returns:
            Turn text

        Raises:
            ValidationError: Unknown agent type or quadrant
            LLMTransportError: Provider call failed or timed out
        """
        try:
            agent = AgentType(agent_type)
            section = SwotQuadrant(focus_section) if focus_section else None
        except ValueError as e:
            raise ValidationError(str(e)) from e

        focus = f"Focus specifically on {section.value} analysis." if section else ""
        system_prompt = self.prompt_loader.load(agent.value, mode="agents", focus=focus)
        human_prompt = self.prompt_loader.load(
            "conversation_turn",
            mode="shared",
            context=context,
            transcript=format_transcript(prior_messages),
        )

        messages = [
            SystemMessage(content=system_prompt),
            HumanMessage(content=human_prompt),
        ]
        return await self._ainvoke(self.turn_model, messages, f"{agent.value} turn")
