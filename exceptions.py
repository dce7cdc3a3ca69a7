"""
Error taxonomy for the inventory services.

Services raise these; the HTTP layer maps ``status_code`` onto the response.
"""


class InventoryError(Exception):
    status_code = 500

    def __init__(self, message: str = ""):
        self.message = message or self.__class__.__doc__ or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(InventoryError):
    """Invalid or missing field"""
    status_code = 400


class NotFoundError(InventoryError):
    """Resource not found"""
    status_code = 404


class ComponentNotFound(NotFoundError):
    """Component not found"""


class MovementNotFound(NotFoundError):
    """Movement not found"""


class AuthError(InventoryError):
    """Invalid credentials"""
    status_code = 401


class ForbiddenError(InventoryError):
    """Access denied"""
    status_code = 403


class DomainError(InventoryError):
    status_code = 422


class InvalidQuantity(DomainError):
    """Quantity must be a positive integer"""


class UnknownPerson(DomainError):
    """The given person is not a registered user"""


class InvalidMovementKind(DomainError):
    """Invalid movement kind"""


class InsufficientStock(DomainError):
    """Not enough stock available for this movement"""
    status_code = 409


class ExternalServiceError(InventoryError):
    status_code = 502


class AssetStoreError(ExternalServiceError):
    """Image storage failed"""


class NotificationError(ExternalServiceError):
    """Message could not be sent"""
