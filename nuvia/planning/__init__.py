"""Assignment plan checklists."""

from .checklist import parse_plan, progress, render_plan, toggle_task

__all__ = ["parse_plan", "toggle_task", "render_plan", "progress"]
