# app/core/exceptions.py
from typing import Any, Dict, Optional
from fastapi import status


class SupplySightError(Exception):
    """Base de errores de dominio; cada subclase fija su status HTTP y código"""
    status_code: int = status.HTTP_400_BAD_REQUEST
    error_code: str = "supplysight_error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NotFoundError(SupplySightError):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"

    def __init__(self, entity: str, identifier: Any):
        super().__init__(
            f"{entity} with id {identifier} not found",
            {"entity": entity, "id": identifier}
        )
        self.entity = entity
        self.identifier = identifier


class NotInSourceWarehouseError(SupplySightError):
    status_code = status.HTTP_409_CONFLICT
    error_code = "not_in_source_warehouse"

    def __init__(self, product_id: str, source_warehouse: str):
        super().__init__(
            f"Product {product_id} is not in warehouse {source_warehouse}",
            {"product_id": product_id, "source_warehouse": source_warehouse}
        )
        self.product_id = product_id
        self.source_warehouse = source_warehouse


class InsufficientStockError(SupplySightError):
    status_code = status.HTTP_409_CONFLICT
    error_code = "insufficient_stock"

    def __init__(self, available: int, requested: int):
        super().__init__(
            f"Insufficient stock. Available: {available}, Requested: {requested}",
            {"available": available, "requested": requested}
        )
        self.available = available
        self.requested = requested


class ValidationError(SupplySightError):
    status_code = 422
    error_code = "validation_error"
