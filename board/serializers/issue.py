# ============================================
# board/serializers/issue.py
# ============================================
from rest_framework import serializers
from board.models import Issue


class IssueWriteSerializer(serializers.Serializer):
    # Required text is checked by the service so every missing field
    # yields the same message.
    summary = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    acceptance_criteria = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    issue_type = serializers.ChoiceField(
        choices=Issue.IssueType.choices,
        required=False,
        allow_blank=True,
        allow_null=True
    )
    priority = serializers.ChoiceField(
        choices=Issue.Priority.choices,
        required=False,
        allow_blank=True,
        allow_null=True
    )
    story_points = serializers.DecimalField(
        max_digits=6,
        decimal_places=2,
        min_value=0,
        required=False,
        allow_null=True
    )
    start_date = serializers.DateField(required=False, allow_null=True)
    due_date = serializers.DateField(required=False, allow_null=True)
    sprint = serializers.CharField(
        max_length=100,
        required=False,
        allow_blank=True,
        allow_null=True
    )

    def to_service_kwargs(self):
        data = self.validated_data
        return {
            'summary': data.get('summary'),
            'description': data.get('description'),
            'acceptance_criteria': data.get('acceptance_criteria'),
            'issue_type': data.get('issue_type'),
            'priority': data.get('priority'),
            'story_points': data.get('story_points'),
            'start_date': data.get('start_date'),
            'due_date': data.get('due_date'),
            'sprint': data.get('sprint'),
        }


class IssueMoveSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Issue.Status.choices)


class IssueOutputSerializer(serializers.ModelSerializer):

    class Meta:
        model = Issue
        fields = [
            'id', 'issue_key', 'summary', 'description', 'acceptance_criteria',
            'issue_type', 'priority', 'story_points', 'start_date', 'due_date',
            'sprint', 'status', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class BoardColumnOutputSerializer(serializers.Serializer):
    """One column of a board view with its issues"""
    status = serializers.CharField(source='column.status')
    title = serializers.CharField(source='column.title')
    move_to = serializers.CharField(source='column.move_to')
    move_label = serializers.CharField(source='column.move_label')
    empty_text = serializers.CharField(source='column.empty_text')
    count = serializers.IntegerField()
    issues = IssueOutputSerializer(many=True)


class BoardMetricSerializer(serializers.Serializer):
    label = serializers.CharField()
    status = serializers.CharField(allow_null=True)
    count = serializers.IntegerField()


class BoardOutputSerializer(serializers.Serializer):
    view = serializers.CharField(source='view.name')
    label = serializers.CharField(source='view.label')
    search = serializers.CharField()
    total = serializers.IntegerField()
    metrics = BoardMetricSerializer(many=True)
    columns = BoardColumnOutputSerializer(many=True)
