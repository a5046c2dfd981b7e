"""Built-in routine templates."""

from nuvia.models.game import Routine, RoutineStep


def _steps(*steps: tuple[str, int]) -> list[RoutineStep]:
    return [RoutineStep(name=name, duration=minutes * 60) for name, minutes in steps]


ROUTINE_TEMPLATES: list[Routine] = [
    Routine(
        id="exam-mode",
        name="📝 Exam Mode Focus",
        tasks=_steps(
            ("Eliminate distractions (phone off, clear desk)", 5),
            ("Deep revision of core concepts (Chapter 1-2)", 45),
            ("Short break (stretch, hydrate)", 10),
            ("Practice mock test questions", 60),
            ("Review mock test answers & identify weak areas", 30),
        ),
    ),
    Routine(
        id="fitness-sprint",
        name="🏋️ Fitness Sprint",
        tasks=_steps(
            ("Warm-up routine (dynamic stretches)", 10),
            ("High-Intensity Interval Training (HIIT)", 20),
            ("Core strengthening exercises", 15),
            ("Cool-down and stretching", 10),
        ),
    ),
    Routine(
        id="morning-kickstart",
        name="☀️ Morning Kickstart",
        tasks=_steps(
            ("Hydrate (glass of water)", 2),
            ("Mindful meditation or breathing", 10),
            ("Plan top 3 priorities for the day", 15),
            ("Light stretching or yoga", 15),
        ),
    ),
    Routine(
        id="deep-work-pomodoro",
        name="🍅 Deep Work Pomodoro",
        tasks=_steps(
            ("Focused work session 1", 25),
            ("Short break", 5),
            ("Focused work session 2", 25),
            ("Short break", 5),
            ("Focused work session 3", 25),
            ("Longer break", 15),
        ),
    ),
]


def get_routine(routine_id: str) -> Routine:
    """
    Look up a routine template by id.

    Raises:
        KeyError: If the id is unknown
    """
    for routine in ROUTINE_TEMPLATES:
        if routine.id == routine_id:
            return routine.model_copy(deep=True)
    raise KeyError(f"Unknown routine: {routine_id}")


def format_time(seconds: int) -> str:
    """Format seconds as MM:SS (minutes are not wrapped at an hour)."""
    minutes, remaining = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{remaining:02d}"
