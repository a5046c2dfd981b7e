"""Shared model access for all flows."""

from typing import Any, TypeVar

from langchain_anthropic import ChatAnthropic
from langchain_aws import ChatBedrock
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from pydantic import BaseModel

from nuvia.config.settings import get_settings
from nuvia.core.exceptions import LLMError
from nuvia.core.logging_config import get_logger
from nuvia.models.chat import HistoryItem

logger = get_logger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)
MessageContent = str | list[str | dict[str, Any]]


def get_chat_model(temperature: float | None = None) -> BaseChatModel:
    """
    Build the configured chat model.

    Args:
        temperature: Sampling temperature, defaults to the configured default

    Returns:
        ChatBedrock or ChatAnthropic instance
    """
    settings = get_settings()
    if temperature is None:
        temperature = settings.default_temperature

    if settings.llm_provider == "anthropic":
        kwargs: dict[str, Any] = {}
        if settings.anthropic_api_key:
            kwargs["api_key"] = settings.anthropic_api_key
        return ChatAnthropic(
            model=settings.anthropic_model_name,
            temperature=temperature,
            max_tokens=8192,
            **kwargs,
        )

    kwargs = {}
    if settings.aws_default_region:
        kwargs["region_name"] = settings.aws_default_region
    if settings.aws_api_key_id and settings.aws_api_key_secret:
        kwargs["aws_access_key_id"] = settings.aws_api_key_id
        kwargs["aws_secret_access_key"] = settings.aws_api_key_secret
    return ChatBedrock(
        model=settings.model_name,
        temperature=temperature,
        **kwargs,
    )


def build_content(*parts: str | list[dict[str, Any]] | None) -> MessageContent:
    """
    Join prompt text and media blocks into human message content.

    Plain strings become text blocks; lists are treated as ready-made
    content blocks. When there is no media the result is a single string.
    """
    blocks: list[dict[str, Any]] = []
    for part in parts:
        if not part:
            continue
        if isinstance(part, str):
            blocks.append({"type": "text", "text": part})
        else:
            blocks.extend(part)

    if all(block.get("type") == "text" for block in blocks):
        return "\n".join(block["text"] for block in blocks)
    return blocks


def history_to_messages(history: list[HistoryItem] | None) -> list[BaseMessage]:
    """Convert chat history items to langchain messages."""
    messages: list[BaseMessage] = []
    for item in history or []:
        if item.role == "user":
            messages.append(HumanMessage(content=item.text))
        else:
            messages.append(AIMessage(content=item.text))
    return messages


def message_text(message: BaseMessage) -> str:
    """Extract the text of a model reply, whatever its content shape."""
    content = message.content
    if isinstance(content, str):
        return content
    texts = []
    for block in content:
        if isinstance(block, str):
            texts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            texts.append(block.get("text", ""))
    return "".join(texts)


def run_structured_prompt(
    schema: type[SchemaT],
    system_prompt: str,
    content: MessageContent,
    temperature: float | None = None,
    flow_name: str = "flow",
) -> SchemaT | None:
    """
    Send a prompt and parse the reply into ``schema``.

    Args:
        schema: Pydantic model describing the expected output
        system_prompt: Instructions for the model
        content: Human message content (text or content blocks)
        temperature: Sampling temperature
        flow_name: Name used in logs and error messages

    Returns:
        Parsed schema instance, or None if the model produced no output

    Raises:
        LLMError: If the model call or output parsing fails
    """
    llm = get_chat_model(temperature)

    # Use structured output to automatically generate and validate the schema
    llm_with_structure = llm.with_structured_output(schema)

    messages = [
        SystemMessage(content=system_prompt),
        HumanMessage(content=content),
    ]

    logger.debug(f"{flow_name}: invoking model for {schema.__name__}")
    try:
        result = llm_with_structure.invoke(messages)
    except Exception as e:
        logger.error(f"{flow_name}: model call failed: {e}")
        raise LLMError(f"AI request failed in {flow_name}", details=str(e)) from e

    if result is None:
        logger.warning(f"{flow_name}: model returned no structured output")
        return None
    if isinstance(result, dict):
        result = schema.model_validate(result)
    return result


def run_chat_prompt(
    system_prompt: str,
    history: list[BaseMessage],
    content: MessageContent,
    temperature: float | None = None,
) -> str:
    """
    Send a conversational prompt and return the reply text.

    Raises:
        LLMError: If the model call fails
    """
    llm = get_chat_model(temperature)
    messages: list[BaseMessage] = [SystemMessage(content=system_prompt)]
    messages.extend(history)
    messages.append(HumanMessage(content=content))

    try:
        reply = llm.invoke(messages)
    except Exception as e:
        logger.error(f"chat: model call failed: {e}")
        raise LLMError("AI request failed in chat", details=str(e)) from e

    return message_text(reply)
