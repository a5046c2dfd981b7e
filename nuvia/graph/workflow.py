"""LangGraph workflow definition for a chat turn."""

from typing import Literal

from langgraph.graph import END, StateGraph

from nuvia.flows.chat import finalize, respond
from nuvia.graph.state import ChatState


def should_retry(state: ChatState) -> Literal["retry", "finalize"]:
    """
    Decide whether to ask the model again after an empty reply.

    Errors are never retried; only empty replies are, and only while
    attempts remain.

    Args:
        state: Current chat state

    Returns:
        "retry" to call the model again, "finalize" otherwise
    """
    if state.get("error"):
        return "finalize"
    if state.get("response", "").strip():
        return "finalize"
    if state["attempts"] >= state["max_attempts"]:
        # Give up and let finalize substitute the fallback
        return "finalize"
    return "retry"


def create_chat_workflow() -> StateGraph:
    """
    Create the LangGraph workflow for a chat turn.

    The workflow follows this structure:
    1. Respond - One model call
    2. [Conditional] Respond again if the reply was empty
    3. Finalize - Substitute fallback text for empty or failed replies

    Returns:
        StateGraph ready to compile
    """
    workflow = StateGraph(ChatState)

    workflow.add_node("respond", respond)
    workflow.add_node("finalize", finalize)

    workflow.set_entry_point("respond")

    workflow.add_conditional_edges(
        "respond",
        should_retry,
        {
            "retry": "respond",  # Loop back for another attempt
            "finalize": "finalize",
        },
    )

    workflow.add_edge("finalize", END)

    return workflow


def compile_chat_workflow():
    """
    Compile the workflow and return it ready for execution.

    Returns:
        Compiled workflow
    """
    return create_chat_workflow().compile()
