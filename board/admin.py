from django.contrib import admin
from .models import Issue

@admin.register(Issue)
class IssueAdmin(admin.ModelAdmin):
    list_display = ('issue_key', 'summary', 'issue_type', 'priority', 'status', 'sprint', 'created_at')
    list_filter = ('status', 'issue_type', 'priority')
    search_fields = ('issue_key', 'summary')

    def get_readonly_fields(self, request, obj=None):
        # keys are immutable once assigned
        if obj is not None:
            return ('issue_key', 'created_at', 'updated_at')
        return ('created_at', 'updated_at')
