"""Custom exceptions for the lettings application."""

class LettingsError(Exception):
    """Base exception for all application errors."""
    def __init__(self, message="An internal error occurred", status_code=500, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv['message'] = self.message
        rv['status'] = 'error'
        return rv

class BusinessLogicError(LettingsError):
    """Exception raised for business logic violations."""
    def __init__(self, message, status_code=400, payload=None):
        super().__init__(message, status_code, payload)

class NotFoundError(LettingsError):
    """Exception raised when a resource is not found."""
    def __init__(self, message="Resource not found", payload=None):
        super().__init__(message, 404, payload)

class ConflictError(LettingsError):
    """Raised on invariant or uniqueness violations."""
    def __init__(self, message="Conflict", payload=None):
        super().__init__(message, 409, payload)

class InternalError(LettingsError):
    """Storage or infrastructure failure. The message is never shown to clients."""
    def __init__(self, message="An unexpected error occurred", payload=None):
        super().__init__(message, 500, payload)

class UnauthorizedError(LettingsError):
    """Raised when the caller identity is missing."""
    def __init__(self, message="Authentication required"):
        super().__init__(message, 401)

class PropertyNotFoundError(NotFoundError):
    """Raised when a property id does not reference an existing property."""
    def __init__(self, property_id):
        super().__init__(f"Property with id {property_id} does not exist.", {'property_id': property_id})
        self.property_id = property_id

class TenantConflictError(ConflictError):
    """Raised when a property already has an active tenant."""
    def __init__(self, property_id):
        super().__init__("This property already has an active tenant", {'property_id': property_id})
        self.property_id = property_id
