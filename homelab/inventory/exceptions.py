"""
Inventory errors.

Not-found is never an error here: lookups by id return None / False.
"""

SELF_RELATIONSHIP_MESSAGE = 'A device cannot have a relationship with itself'


class InventoryError(Exception):
    """Base class for errors reported back to the caller."""
    pass


class InputValidationError(InventoryError):
    """Raised when procedure input fails schema validation."""

    def __init__(self, errors):
        self.errors = errors  # {field: [message, ...]}, '__all__' for non-field errors
        super().__init__(self._summary())

    def _summary(self):
        parts = []
        for field, messages in self.errors.items():
            label = 'input' if field == '__all__' else field
            parts.append(f"{label}: {'; '.join(messages)}")
        return 'Invalid input - ' + ', '.join(parts)


class DeviceNotFoundError(InventoryError):
    """Raised when a relationship references a device that does not exist."""

    def __init__(self, device_id, role):
        self.device_id = device_id
        self.role = role  # 'parent' or 'child'
        super().__init__(f"{role.capitalize()} device with ID {device_id} does not exist")


class SelfRelationshipError(InventoryError):
    """Raised when a relationship would link a device to itself."""

    def __init__(self):
        super().__init__(SELF_RELATIONSHIP_MESSAGE)
