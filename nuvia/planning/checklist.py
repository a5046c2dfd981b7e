"""Interactive checklist view of a Markdown assignment plan."""

from nuvia.models.planning import PlanItem


def parse_line(line: str, index: int) -> PlanItem:
    """
    Classify one line of a plan.

    Args:
        line: Raw Markdown line
        index: Line number, used for the item id

    Returns:
        PlanItem typed as heading, goal, task, separator or text
    """
    item_id = f"item-{index}"
    if line.startswith("## "):
        return PlanItem(id=item_id, type="h2", text=line[3:].strip(), original_line=line)
    if line.startswith("### "):
        return PlanItem(id=item_id, type="h3", text=line[4:].strip(), original_line=line)
    if line.startswith("**Goal:**"):
        return PlanItem(id=item_id, type="bold", text=line[len("**Goal:**"):].strip(), original_line=line)
    if line.startswith("- [ ] "):
        return PlanItem(id=item_id, type="task", text=line[6:].strip(), completed=False, original_line=line)
    if line.lower().startswith("- [x] "):
        return PlanItem(id=item_id, type="task", text=line[6:].strip(), completed=True, original_line=line)
    if line.strip() == "---":
        return PlanItem(id=item_id, type="separator", text="", original_line=line)
    # Today's Date and Deadline lines
    if line.startswith("**"):
        return PlanItem(id=item_id, type="bold", text=line.replace("**", "").strip(), original_line=line)
    return PlanItem(id=item_id, type="text", text=line.strip(), original_line=line)


def parse_plan(markdown: str | None) -> list[PlanItem]:
    """Split a Markdown plan into typed items, one per line."""
    if not markdown:
        return []
    return [parse_line(line, i) for i, line in enumerate(markdown.split("\n"))]


def toggle_task(items: list[PlanItem], item_id: str) -> list[PlanItem]:
    """
    Flip the completed flag of one task.

    Returns:
        A new list; the original items are not modified

    Raises:
        KeyError: If no task has the given id
    """
    result = []
    found = False
    for item in items:
        if item.id == item_id and item.type == "task":
            found = True
            done = not item.completed
            mark = "- [x] " if done else "- [ ] "
            item = item.model_copy(update={"completed": done, "original_line": f"{mark}{item.text}"})
        result.append(item)
    if not found:
        raise KeyError(f"No task with id {item_id}")
    return result


def render_plan(items: list[PlanItem]) -> str:
    """Turn items back into Markdown."""
    return "\n".join(item.original_line for item in items)


def progress(items: list[PlanItem]) -> tuple[int, int]:
    """Return (completed tasks, total tasks)."""
    tasks = [item for item in items if item.type == "task"]
    return sum(1 for t in tasks if t.completed), len(tasks)
