# hospital_core/common/exceptions.py
from __future__ import annotations

from rest_framework import exceptions, status
from rest_framework.exceptions import APIException, PermissionDenied, ValidationError


class ConflictError(APIException):
    """
    409 Conflict: a business rule blocks the operation.
    """
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict."
    default_code = "conflict"

    def __init__(self, detail=None, code=None):
        super().__init__(detail=detail or self.default_detail, code=code or self.default_code)


class InsufficientBalance(ConflictError):
    default_detail = "Insufficient balance."
    default_code = "insufficient_balance"


class BalanceOverflow(ConflictError):
    default_detail = "Balance would exceed the maximum representable amount."
    default_code = "balance_overflow"


class DuplicateKey(ConflictError):
    default_detail = "Identifier is already present."
    default_code = "duplicate_key"


class NotAuthorized(PermissionDenied):
    default_detail = "Caller is not authorized for this record."
    default_code = "not_authorized"


class NotFound(exceptions.NotFound):
    default_detail = "Record not found."
    default_code = "not_found"


class InvalidAmount(ValidationError):
    default_detail = "Amount must be an unsigned integer in the smallest currency unit."
    default_code = "invalid_amount"
