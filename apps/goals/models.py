# ===== apps/goals/models.py =====
from django.db import models


class GoalQuerySet(models.QuerySet):
    def current_for(self, user_id):
        """Latest goal of the user; older ones are inert history"""
        return self.filter(user_id=user_id).order_by('-created_at', '-id').first()


class Goal(models.Model):
    """Revenue/profit target with a deadline. Superseded by insertion, never edited"""
    user_id = models.CharField(max_length=64)
    target_revenue = models.FloatField()
    target_profit = models.FloatField()
    deadline = models.DateField()
    created_at = models.DateTimeField(auto_now_add=True)

    objects = GoalQuerySet.as_manager()

    class Meta:
        db_table = 'goals'
        indexes = [
            models.Index(fields=['user_id', 'created_at'], name='goals_user_created_idx'),
        ]
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.user_id} - {self.target_revenue}/{self.target_profit} by {self.deadline}"
