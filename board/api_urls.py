# ============================================
# board/api_urls.py
# ============================================
from django.urls import path
from board.views.issue import (
    IssueListCreateAPIView,
    IssueDetailAPIView,
    IssueMoveAPIView,
    IssueDuplicateAPIView,
)
from board.views.board import BoardAPIView

app_name = 'board-api'

urlpatterns = [
    # Issues
    path('issues/', IssueListCreateAPIView.as_view(), name='issue-list-create'),
    path('issues/<int:issue_id>/', IssueDetailAPIView.as_view(), name='issue-detail'),
    path('issues/<int:issue_id>/move/', IssueMoveAPIView.as_view(), name='issue-move'),
    path('issues/<int:issue_id>/duplicate/', IssueDuplicateAPIView.as_view(), name='issue-duplicate'),

    # Board projection
    path('board/', BoardAPIView.as_view(), name='board'),
]
