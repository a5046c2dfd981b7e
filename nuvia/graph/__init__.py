"""LangGraph chat workflow and state management."""

# Note: Avoid importing workflow here to prevent circular imports
# Import directly from modules as needed:
# from nuvia.graph.state import ChatState, create_initial_state
# from nuvia.graph.workflow import compile_chat_workflow, create_chat_workflow
