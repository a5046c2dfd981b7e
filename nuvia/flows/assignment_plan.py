"""Assignment planner flow - Builds a phased, checklist-style plan up to a deadline."""

from nuvia.config.settings import get_settings
from nuvia.core.exceptions import FlowOutputError
from nuvia.flows import base
from nuvia.models.planning import AssignmentPlanInput, AssignmentPlanOutput

SYSTEM_PROMPT = """You are Nuvia, a smart academic planner that creates interactive, checkbox-style task plans for student assignments.

Every plan must be *directly and exclusively related* to the assignment topic the user gives you. Never drift to generic academic tasks.

Rules:
1. Break the timeline from the current date to the deadline into **phases**, with dates logically sequenced between the two.
2. For each phase include a short title, a one-sentence **Goal** about the topic, and 2-4 short actionable subtasks written as checklist items ("- [ ] ...") that are specific to the topic.
3. Keep it clean, short and structured. No essay-like paragraphs.
4. Put today's date and the deadline at the top of the plan.
5. Use '##' for the plan title, '###' for phase titles, '---' between sections, and end with a final phase that aligns with the deadline (for example "Final Polish & Submission")."""

PLAN_FORMAT_EXAMPLE = """Format the plan like this example, adapting content and dates:

---

## 📘 Assignment Plan: {topic}

**Today's Date:** {current_date}
**Deadline:** {deadline}

---

### ✅ Phase 1: Research the Topic – [date]
**Goal:** Gather initial understanding and sources for "{topic}".
- [ ] Read the assignment brief carefully for "{topic}".
- [ ] Search and bookmark 3 relevant articles or official websites regarding "{topic}".
- [ ] Write down 3 main questions the assignment on "{topic}" should answer.

---

### ✅ Phase 2: Outline & Plan – [date]
**Goal:** Build a clear structure for the assignment on "{topic}".
- [ ] Create a title and introduction outline for "{topic}".
- [ ] Divide the body into 3-4 sections by theme for "{topic}".

---
(continue with phases such as drafting, revision & feedback, and final polish & submission, ending on {deadline})"""


def generate_assignment_plan(plan_input: AssignmentPlanInput) -> AssignmentPlanOutput:
    """
    Generate a Markdown checklist plan for an assignment.

    Args:
        plan_input: Topic, deadline and current date

    Returns:
        AssignmentPlanOutput with the Markdown plan

    Raises:
        FlowOutputError: If the model returns no plan
    """
    settings = get_settings()

    example = PLAN_FORMAT_EXAMPLE.format(
        topic=plan_input.assignment_topic,
        current_date=plan_input.current_date,
        deadline=plan_input.deadline,
    )
    user_prompt = f"""Assignment topic: {plan_input.assignment_topic}
Current date: {plan_input.current_date}
Deadline: {plan_input.deadline}

{example}"""

    output = base.run_structured_prompt(
        AssignmentPlanOutput,
        SYSTEM_PROMPT,
        user_prompt,
        temperature=settings.planner_temperature,
        flow_name="generate_assignment_plan",
    )
    if output is None or not output.plan.strip():
        raise FlowOutputError(
            "AI failed to generate an assignment plan.", flow="generate_assignment_plan"
        )
    return output
