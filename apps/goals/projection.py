# ===== apps/goals/projection.py =====
"""
Goal progress: how far the current analytics are from the latest goal,
plus the suggestion lines shown under it.
"""
import math
from datetime import datetime, time, timezone as dt_timezone

from django.utils import timezone

SECONDS_PER_DAY = 24 * 60 * 60

# en-US display symbols; other codes are shown as "<CODE> 1,234.00"
CURRENCY_SYMBOLS = {
    'USD': '$',
    'EUR': '€',
    'GBP': '£',
    'INR': '₹',
    'JPY': '¥',
    'CNY': 'CN¥',
    'CAD': 'CA$',
    'AUD': 'A$',
    'NGN': '₦',
}


def format_currency(amount, currency='USD'):
    code = (currency or 'USD').upper()
    sign = '-' if amount < 0 else ''
    number = f"{abs(amount):,.2f}"
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol:
        return f"{sign}{symbol}{number}"
    return f"{sign}{code} {number}"


def days_left(deadline, now=None):
    """
    Whole days until the deadline (midnight UTC), rounded up.
    Goes negative once the deadline has passed.
    """
    now = now or timezone.now()
    deadline_at = datetime.combine(deadline, time.min, tzinfo=dt_timezone.utc)
    return math.ceil((deadline_at - now).total_seconds() / SECONDS_PER_DAY)


def goal_suggestions(revenue_needed, profit_needed, top_items, currency='USD'):
    # Each check is independent: several lines can appear together
    suggestions = []

    if revenue_needed > 0:
        suggestions.append(
            f"You need to generate {format_currency(revenue_needed, currency)} more in revenue"
        )

    if profit_needed > 0:
        suggestions.append(
            f"You need to make {format_currency(profit_needed, currency)} more in profit"
        )

    if top_items:
        suggestions.append(
            f"Focus on selling more \"{top_items[0]['name']}\" - it's your most profitable item"
        )

    if revenue_needed <= 0 and profit_needed <= 0:
        suggestions.append(
            "Congratulations! You have achieved your goals! Consider setting new targets."
        )

    return suggestions


def project_goal(goal, analytics, currency='USD', now=None):
    revenue_needed = goal.target_revenue - analytics.get('totalRevenue', 0)
    profit_needed = goal.target_profit - analytics.get('totalProfit', 0)

    return {
        'daysLeft': days_left(goal.deadline, now),
        'revenueNeeded': revenue_needed,
        'profitNeeded': profit_needed,
        'suggestions': goal_suggestions(
            revenue_needed, profit_needed, analytics.get('topItems') or [], currency
        ),
    }
