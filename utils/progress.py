from typing import Any, Dict, Iterable, Sequence

from models.course import Course
from models.goal import Goal, GoalType
from models.stats import CompletionSummary, CourseSummary


def completion_percent(completed: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return max(0.0, min(100.0, (completed / total) * 100))


def summarize_completion(items: Iterable[Any]) -> CompletionSummary:
    """Count completed records in any collection carrying a `completed` flag."""
    items = list(items)
    completed = sum(1 for item in items if item.completed)
    return CompletionSummary(
        completed=completed,
        total=len(items),
        percent=completion_percent(completed, len(items)),
    )


def summarize_goals_by_type(goals: Iterable[Goal]) -> Dict[str, CompletionSummary]:
    goals = list(goals)
    return {
        goal_type.value: summarize_completion(goal for goal in goals if goal.type == goal_type)
        for goal_type in GoalType
    }


def course_lesson_percent(course: Course) -> float:
    return completion_percent(course.completed_lessons, course.total_lessons)


def summarize_courses(courses: Sequence[Course]) -> CourseSummary:
    base = summarize_completion(courses)
    completed_lessons = sum(course.completed_lessons for course in courses)
    total_lessons = sum(course.total_lessons for course in courses)
    return CourseSummary(
        completed=base.completed,
        total=base.total,
        percent=base.percent,
        completed_lessons=completed_lessons,
        total_lessons=total_lessons,
        lesson_percent=completion_percent(completed_lessons, total_lessons),
    )


def set_course_completed(course: Course, completed: bool) -> Dict[str, Any]:
    """Fields to write when a course is marked complete or incomplete.

    Marking complete fills the remaining lessons; marking incomplete only
    clears the flag and leaves lesson counts alone.
    """
    fields: Dict[str, Any] = {"completed": completed}
    if completed and course.completed_lessons < course.total_lessons:
        fields["completed_lessons"] = course.total_lessons
    return fields


def apply_lesson_counts(course: Course, fields: Dict[str, Any]) -> Dict[str, Any]:
    """Re-derive `completed` whenever an update touches lesson counts.

    Raises ValueError if the resulting completed count exceeds the total.
    """
    if "completed_lessons" not in fields and "total_lessons" not in fields:
        return fields
    total = fields.get("total_lessons")
    if total is None:
        total = course.total_lessons
    completed_lessons = fields.get("completed_lessons")
    if completed_lessons is None:
        completed_lessons = course.completed_lessons
    if completed_lessons > total:
        raise ValueError("Completed lessons cannot exceed total lessons")
    updated = dict(fields)
    updated["total_lessons"] = total
    updated["completed_lessons"] = completed_lessons
    updated["completed"] = completed_lessons >= total
    return updated
