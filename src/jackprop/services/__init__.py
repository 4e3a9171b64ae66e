"""Service layer: registry-backed operations returning ServiceResult."""

from jackprop.services.result import ServiceError, ServiceResult

__all__ = ["ServiceError", "ServiceResult"]
