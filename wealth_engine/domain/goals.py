"""Savings goal tracking"""

from dataclasses import replace
from datetime import date
from typing import Iterable

from wealth_engine.domain.models import FinancialGoal, GoalProgress


def goal_progress(goal: FinancialGoal, today: date) -> GoalProgress:
    """Progress percent, amount still missing and days to the deadline"""
    progress = (goal.current_amount / goal.target_amount) * 100 if goal.target_amount > 0 else 0.0

    days_until_deadline = None
    if goal.deadline is not None:
        days_until_deadline = (goal.deadline - today).days

    return GoalProgress(
        goal_id=goal.goal_id,
        progress_percent=progress,
        remaining_amount=goal.target_amount - goal.current_amount,
        days_until_deadline=days_until_deadline,
        completed=goal.completed,
    )


def settle_goal(goal: FinancialGoal, today: date) -> FinancialGoal:
    """Mark a goal completed once the current amount reaches the target"""
    if goal.completed or goal.current_amount < goal.target_amount:
        return goal
    return replace(goal, completed=True, completed_at=today)


def overall_progress(goals: Iterable[FinancialGoal]) -> float:
    """Aggregate progress percent across goals that are still active"""
    active = [g for g in goals if not g.completed]
    target = sum(g.target_amount for g in active)
    if target <= 0:
        return 0.0
    return sum(g.current_amount for g in active) / target * 100
