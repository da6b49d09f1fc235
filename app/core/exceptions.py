"""Custom exception classes for Expense Insights."""


class ExpenseTrackerError(Exception):
    """Base exception for Expense Insights."""
    pass


class DataAccessError(ExpenseTrackerError):
    """The expense store could not be read or written."""
    pass
