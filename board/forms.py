from django import forms
from .models import Issue
from .services.issue import REQUIRED_FIELDS_MESSAGE


class IssueForm(forms.Form):
    # Text fields are checked together in the service; a missing one
    # produces the single "fill all required fields" banner.
    summary = forms.CharField(
        required=False, strip=False,
        widget=forms.Textarea(attrs={"rows": 3, "placeholder": "Short summary of the issue"})
    )
    description = forms.CharField(
        required=False, strip=False,
        widget=forms.Textarea(attrs={"rows": 3, "placeholder": "Describe the issue in detail"})
    )
    acceptance_criteria = forms.CharField(
        required=False, strip=False,
        widget=forms.Textarea(attrs={"rows": 3, "placeholder": "What needs to be true to accept this?"})
    )
    issue_type = forms.ChoiceField(choices=Issue.IssueType.choices, initial=Issue.IssueType.STORY, required=False)
    priority = forms.ChoiceField(choices=Issue.Priority.choices, initial=Issue.Priority.P2, required=False)
    story_points = forms.DecimalField(
        required=False, min_value=0, max_digits=6, decimal_places=2,
        widget=forms.NumberInput(attrs={"placeholder": "e.g. 3", "min": "0"})
    )
    start_date = forms.DateField(required=False, widget=forms.DateInput(attrs={"type": "date"}))
    due_date = forms.DateField(required=False, widget=forms.DateInput(attrs={"type": "date"}))
    sprint = forms.CharField(
        required=False, max_length=100,
        widget=forms.TextInput(attrs={"placeholder": "Sprint 12"})
    )

    REQUIRED_FIELDS = ("summary", "description", "acceptance_criteria", "issue_type", "priority")

    def error_message(self) -> str:
        """Banner text for an invalid form"""
        if any(not (self.data.get(name) or "").strip() for name in self.REQUIRED_FIELDS):
            return REQUIRED_FIELDS_MESSAGE
        name, errors = next(iter(self.errors.items()))
        return f"{self[name].label}: {errors[0]}"

    @classmethod
    def for_issue(cls, issue: Issue) -> "IssueForm":
        return cls(initial={
            "summary": issue.summary or "",
            "description": issue.description or "",
            "acceptance_criteria": issue.acceptance_criteria or "",
            "issue_type": issue.issue_type or Issue.IssueType.STORY,
            "priority": issue.priority or Issue.Priority.P2,
            "story_points": issue.story_points,
            "start_date": issue.start_date,
            "due_date": issue.due_date,
            "sprint": issue.sprint or "",
        })


class MoveForm(forms.Form):
    status = forms.ChoiceField(choices=Issue.Status.choices)
