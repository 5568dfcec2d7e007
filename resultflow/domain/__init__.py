"""
Domain layer for resultflow.

Holds the exception hierarchy raised on contract violations.
"""

from resultflow.domain.exceptions import ContractViolation, ResultflowError

__all__ = ["ResultflowError", "ContractViolation"]
