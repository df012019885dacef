# ============================================
# board/exceptions.py
# ============================================


class IssueStoreError(Exception):
    """A read or write against the issues table failed."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CreateInFlight(Exception):
    """Another create from the same client has not finished yet."""

    def __init__(self, message: str = "An issue is already being created."):
        super().__init__(message)
        self.message = message
