"""Smart task flow - Breaks a request into scheduled, actionable tasks."""

from nuvia.core.logging_config import get_logger
from nuvia.flows import base
from nuvia.models.planning import SmartTask, SmartTaskInput, SmartTaskList

logger = get_logger(__name__)

SHORT_DEADLINE_NOTE = "Note: Your deadline is very close, so only limited preparation steps are suggested."

SYSTEM_PROMPT = f"""You are Nuvia, an intelligent task assistant. Your goal is to break down user requests into a list of actionable tasks, each with a realistic deadline.

Instructions for Task Generation:
1.  **Analyze the Request**: Understand the user's goal and any explicit or implicit timeframes.
2.  **Task Breakdown**: Decompose the request into smaller, manageable tasks. Each task should be a clear action item.
3.  **Deadline Assignment**:
    *   Assign a specific deadline to each task (e.g., "June 20, 2024", "End of day", "Tomorrow morning").
    *   **All task deadlines MUST be on or after the Current Date. Never generate tasks with deadlines before it.**
    *   If the request implies a final deadline (e.g., "party by June 22", "report in 7 days"), fit every task within that timeframe, culminating on or before it.
    *   If no end date is given, create a reasonable schedule based on the tasks.
4.  **Output**: A list of tasks, each with a "task" and a "deadline".
5.  **Short Deadline Note**: If the implied final deadline is less than 2 full days after the Current Date AND you can only suggest 1-3 real steps, put this task first: "{SHORT_DEADLINE_NOTE}" with the Current Date as its deadline. Otherwise do not include this note.

Example of a short deadline:
User Request: "Help me prepare for my exam tomorrow!"
Current Date: "October 25, 2024"
Tasks:
- "{SHORT_DEADLINE_NOTE}" by "October 25, 2024"
- "Review key concepts for Chapter 1-3" by "October 25, 2024"
- "Get a good night's sleep" by "October 25, 2024"
"""


def smart_task_creation(task_input: SmartTaskInput) -> list[SmartTask]:
    """
    Create prioritised, scheduled tasks from a free-text request.

    Args:
        task_input: The request, optional user profile and current date

    Returns:
        List of SmartTask; empty when the model returns nothing
    """
    profile = ""
    if task_input.user_profile:
        profile = f"User's Profile (for context): {task_input.user_profile}\n"

    user_prompt = (
        f"User's Request: {task_input.request}\n"
        f"{profile}"
        f"Current Date: {task_input.current_date}\n\n"
        "Generate the tasks based on these instructions."
    )

    output = base.run_structured_prompt(
        SmartTaskList,
        SYSTEM_PROMPT,
        user_prompt,
        flow_name="smart_task_creation",
    )
    if output is None:
        logger.warning("Smart tasks: model returned no output, returning no tasks")
        return []

    return [t for t in output.tasks if t.task.strip()]
