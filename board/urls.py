# ============================================
# board/urls.py
# ============================================
from django.urls import path
from board.views import page

app_name = 'board'

urlpatterns = [
    path('', page.board_index, name='index'),
    path('issues/new/', page.issue_create, name='issue-create'),
    path('issues/<int:issue_id>/edit/', page.issue_update, name='issue-update'),
    path('issues/<int:issue_id>/move/', page.issue_move, name='issue-move'),
    path('issues/<int:issue_id>/delete/', page.issue_delete, name='issue-delete'),
    path('issues/<int:issue_id>/duplicate/', page.issue_duplicate, name='issue-duplicate'),
]
