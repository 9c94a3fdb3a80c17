"""
Goals: storage, current-goal lookup and progress projection.
"""
from datetime import date, datetime, timezone

import pytest

from apps.goals.models import Goal
from apps.goals.projection import days_left, format_currency, goal_suggestions, project_goal

REVENUE_LINE = "You need to generate {} more in revenue"
PROFIT_LINE = "You need to make {} more in profit"
CONGRATS = "Congratulations! You have achieved your goals! Consider setting new targets."


class TestFormatCurrency:

    def test_known_symbols(self):
        assert format_currency(40) == "$40.00"
        assert format_currency(1234.5, "EUR") == "€1,234.50"
        assert format_currency(10, "inr") == "₹10.00"

    def test_unknown_code_falls_back_to_code(self):
        assert format_currency(40, "KES") == "KES 40.00"

    def test_negative(self):
        assert format_currency(-3.5) == "-$3.50"


class TestDaysLeft:
    now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

    def test_rounds_up(self):
        assert days_left(date(2026, 10, 30), self.now) == 11

    def test_same_day_deadline(self):
        assert days_left(date(2026, 10, 19), self.now) == 0

    def test_passed_deadline_is_negative(self):
        assert days_left(date(2026, 10, 10), self.now) == -9


class TestGoalSuggestions:

    def test_revenue_short_profit_met(self):
        suggestions = goal_suggestions(40, -10, [])

        assert suggestions == [REVENUE_LINE.format("$40.00")]

    def test_both_short_with_top_item(self):
        suggestions = goal_suggestions(40, 5, [{"name": "Tomatoes"}], "USD")

        assert suggestions == [
            REVENUE_LINE.format("$40.00"),
            PROFIT_LINE.format("$5.00"),
            'Focus on selling more "Tomatoes" - it\'s your most profitable item',
        ]

    def test_goals_met_message_is_added_alongside_top_item(self):
        suggestions = goal_suggestions(0, -1, [{"name": "Maize"}])

        assert len(suggestions) == 2
        assert suggestions[-1] == CONGRATS

    def test_goals_met_without_items(self):
        assert goal_suggestions(-5, 0, []) == [CONGRATS]

    def test_revenue_short_profit_met_projection(self):
        goal = Goal(target_revenue=100, target_profit=50, deadline=date(2026, 11, 1))
        analytics = {"totalRevenue": 60, "totalProfit": 60, "topItems": []}
        now = datetime(2026, 10, 19, tzinfo=timezone.utc)

        progress = project_goal(goal, analytics, "USD", now)

        assert progress["revenueNeeded"] == 40
        assert progress["profitNeeded"] == -10
        assert progress["daysLeft"] == 13
        assert progress["suggestions"] == [REVENUE_LINE.format("$40.00")]


@pytest.mark.django_db
class TestGoalEndpoints:

    def test_no_goal_is_null(self, api_client, user_id):
        response = api_client.get(f"/api/goals/{user_id}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "goal": None}

    def test_set_goal(self, api_client, user_id):
        response = api_client.post("/api/goals", {
            "userId": user_id,
            "target_revenue": 1000,
            "target_profit": 400,
            "deadline": "2026-12-31",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Goal set successfully"
        assert data["goal"]["deadline"] == "2026-12-31"
        assert data["goal"]["target_revenue"] == 1000

    def test_latest_goal_is_current(self, api_client, user_id):
        for revenue in (100, 200, 300):
            api_client.post("/api/goals", {
                "userId": user_id,
                "target_revenue": revenue,
                "target_profit": 10,
                "deadline": "2026-12-31",
            })

        goal = api_client.get(f"/api/goals/{user_id}").json()["goal"]

        assert goal["target_revenue"] == 300
        assert Goal.objects.filter(user_id=user_id).count() == 3

    def test_set_goal_rejects_bad_deadline(self, api_client, user_id):
        response = api_client.post("/api/goals", {
            "userId": user_id,
            "target_revenue": 1000,
            "target_profit": 400,
            "deadline": "next week",
        })

        assert response.status_code == 400
        assert "deadline" in response.json()["errors"]
        assert not Goal.objects.exists()

    def test_progress_without_goal(self, api_client, user_id):
        response = api_client.get(f"/api/goals/{user_id}/progress")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["progress"] is None

    def test_progress_uses_latest_analytics_and_currency(self, api_client, user_id, make_item):
        api_client.put(f"/api/settings/{user_id}", {
            "currency": "EUR",
            "app_name": "GD Farms",
            "unit_preferences": {"weight": "kg", "volume": "liters"},
        })
        make_item(user_id, name="Tomatoes", quantity_value=10, buying_price=2, selling_price=5)
        api_client.post("/api/goals", {
            "userId": user_id,
            "target_revenue": 100,
            "target_profit": 20,
            "deadline": "2999-01-01",
        })

        progress = api_client.get(f"/api/goals/{user_id}/progress").json()["progress"]

        assert progress["goal"]["target_revenue"] == 100
        assert progress["revenueNeeded"] == 50
        assert progress["profitNeeded"] == -10
        assert progress["daysLeft"] > 0
        assert progress["suggestions"] == [
            REVENUE_LINE.format("€50.00"),
            'Focus on selling more "Tomatoes" - it\'s your most profitable item',
        ]
