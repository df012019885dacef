# ============================================
# board/models/__init__.py
# ============================================
from .issue import Issue

__all__ = [
    'Issue',
]
