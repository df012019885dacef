# ============================================
# board/models/issue.py
# ============================================
from django.core.validators import MinValueValidator
from django.db import models


class Issue(models.Model):
    class IssueType(models.TextChoices):
        STORY = 'Story', 'Story'
        BUG = 'Bug', 'Bug'
        TASK = 'Task', 'Task'
        SPIKE = 'Spike', 'Spike'

    class Priority(models.TextChoices):
        P0 = 'P0', 'P0'
        P1 = 'P1', 'P1'
        P2 = 'P2', 'P2'
        P3 = 'P3', 'P3'

    class Status(models.TextChoices):
        BACKLOG = 'backlog', 'Backlog'
        SPRINT = 'sprint', 'Sprint'
        IN_PROGRESS = 'in_progress', 'In progress'
        DONE = 'done', 'Done'
        RELEASED = 'released', 'Released'

    issue_key = models.CharField(max_length=32, unique=True, db_index=True)
    summary = models.TextField()
    description = models.TextField()
    acceptance_criteria = models.TextField()
    issue_type = models.CharField(
        max_length=10,
        choices=IssueType.choices,
        default=IssueType.STORY
    )
    priority = models.CharField(
        max_length=2,
        choices=Priority.choices,
        default=Priority.P2
    )
    story_points = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)]
    )
    start_date = models.DateField(null=True, blank=True)
    due_date = models.DateField(null=True, blank=True)
    sprint = models.CharField(max_length=100, null=True, blank=True)
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.BACKLOG
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'issues'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['status'], name='issues_status_a5f1c2_idx'),
            models.Index(fields=['-created_at'], name='issues_created_9b3e4d_idx'),
        ]

    def __str__(self):
        return f"{self.issue_key} - {self.summary}"
