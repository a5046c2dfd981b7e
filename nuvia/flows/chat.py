"""Chat flow - Nuvia's general-purpose assistant with history and attachments."""

from typing import Any

from nuvia.config.settings import get_settings
from nuvia.core.exceptions import NuviaError
from nuvia.core.logging_config import get_logger
from nuvia.flows import base
from nuvia.flows.media import media_content_blocks
from nuvia.graph.state import ChatState, create_initial_state
from nuvia.models.chat import ChatInput, ChatOutput

logger = get_logger(__name__)

EMPTY_RESPONSE = (
    "🚫 Sorry, I'm having a technical issue right now (empty response). "
    "Please try again shortly."
)
ERROR_RESPONSE = (
    "🚫 Sorry, I'm having a technical issue right now. "
    "Please try again shortly. (Details: {details})"
)

CHAT_SYSTEM_PROMPT = """You are Nuvia AI, a smart educational assistant for students. Always provide consistent, correct, and detailed answers.

- For MCQs: Only return the correct option clearly. Avoid hallucination.
- For explanations: Be structured and logical.
- Keep answers concise but clear.

Your personality:
- Be warm and conversational, yet professional.
- Detect the user's tone and respond in a fitting manner; be subtly witty when the user is casual.
- Always keep replies respectful, safe, and constructive.
- For informal or flirtatious input like "hey baby", respond with: "😊 I'm flattered! But I'm all brains and zero romance. How can I help you effectively today?" and steer back to productive topics.

Response Formatting:
- Highlight key points, answers, or important ideas using Markdown bold. Emojis like 💡 may mark main concepts.
- Use backticks for single-line code snippets.
- Start every list or numbered item on a new line.
- Ask follow-up questions only when genuinely helpful.

Code Generation:
- When asked to generate code, ALWAYS provide the FULL, COMPLETE, and RUNNABLE source code. Never truncate it.
- Use Markdown code blocks with language specifiers for multi-line code.
- When several files are needed (for example HTML, CSS and JavaScript), introduce each file by name before its code block.

Reasoning:
- For complex or research-style questions, understand the intent, break the question into parts, reason through each part using your knowledge and the conversation history, then combine the findings into a well-structured answer. State your reasoning where it adds clarity and acknowledge multiple perspectives when they exist.
- For straightforward messages such as greetings, respond directly and naturally.

Introduction:
- When introducing yourself or asked who you are, say: "Hi, I'm Nuvia, your intelligent productivity companion."

Safety:
- Politely filter or rephrase inappropriate prompts and redirect towards productive assistance.

Always answer like an expert mentor: clear, step-by-step and logical, like a tutor who makes hard things simple. Use real-life examples or analogies when they help."""


def build_chat_content(chat_input: ChatInput) -> base.MessageContent:
    """Render the user turn, including any attachment, as message content."""
    intro = None
    if chat_input.history:
        intro = "This is a continued conversation. Please consider the previous messages."

    if chat_input.media_data_uri:
        media_label = chat_input.media_type or "file"
        return base.build_content(
            intro,
            f"USER INPUT (note: this message includes an attached {media_label}): {chat_input.user_input}",
            "MEDIA REFERENCE (analyze or use as context for the user input):",
            media_content_blocks(chat_input.media_data_uri),
        )

    return base.build_content(intro, f"USER INPUT: {chat_input.user_input}")


def respond_once(chat_input: ChatInput) -> str:
    """Make a single model call for a chat turn and return the raw reply text."""
    settings = get_settings()
    content = build_chat_content(chat_input)
    history = base.history_to_messages(chat_input.history)
    return base.run_chat_prompt(
        CHAT_SYSTEM_PROMPT,
        history,
        content,
        temperature=settings.chat_temperature,
    )


def respond(state: ChatState) -> dict[str, Any]:
    """
    Respond node: ask the model for a reply to the current turn.

    Errors are recorded on the state rather than raised so the finalize
    node can turn them into a user-facing message.

    Args:
        state: Current chat state containing chat_input

    Returns:
        Dictionary with updated response, attempts and error
    """
    attempts = state.get("attempts", 0) + 1
    chat_input = state["chat_input"]

    try:
        text = respond_once(chat_input)
    except NuviaError as e:
        logger.error(f"AI error in chat flow: {e.message} ({e.details})")
        return {"response": "", "attempts": attempts, "error": e.details or e.message}
    except Exception as e:
        logger.exception("Unexpected error in chat flow")
        return {"response": "", "attempts": attempts, "error": str(e) or "Unknown error"}

    if not text or not text.strip():
        logger.warning(f"AI response was empty (attempt {attempts} of {state['max_attempts']})")
        return {"response": "", "attempts": attempts, "error": None}

    return {"response": text, "attempts": attempts, "error": None}


def finalize(state: ChatState) -> dict[str, Any]:
    """Finalize node: replace a failed or empty reply with a fallback message."""
    if state.get("error"):
        return {"response": ERROR_RESPONSE.format(details=state["error"])}
    if not state.get("response", "").strip():
        return {"response": EMPTY_RESPONSE}
    return {"response": state["response"]}


def generate_chat_response(chat_input: ChatInput) -> ChatOutput:
    """
    Generate Nuvia's reply to a chat turn.

    This never raises for model problems: empty replies are retried a
    configurable number of times and then replaced, and errors become an
    apology that includes the error details.

    Args:
        chat_input: User input, optional attachment and prior history

    Returns:
        ChatOutput with the reply text
    """
    # Imported here because the workflow imports this module's nodes
    from nuvia.graph.workflow import compile_chat_workflow

    history_len = len(chat_input.history or [])
    logger.debug(f"Chat flow received {history_len} history messages")

    workflow = compile_chat_workflow()
    final_state = workflow.invoke(create_initial_state(chat_input))
    return ChatOutput(response=final_state["response"])
