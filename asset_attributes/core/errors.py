"""
Error taxonomy for the attribute configuration engine.

Every exception raised by the engine for an expected condition derives
from AssetConfigError. The HTTP layer maps each kind to a status code.
"""

class AssetConfigError(Exception):
    """Base class for all engine errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class NotFoundError(AssetConfigError):
    """An attribute, category, manufacturer or model id does not exist"""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity.capitalize()} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id

class ReferentialGuardError(AssetConfigError):
    """Deletion blocked because other entities still reference the target"""

class InvalidInputError(AssetConfigError):
    """Blank names, unknown enum values and similar input problems"""

class CyclicHierarchyError(InvalidInputError):
    """A parent assignment would make a category its own ancestor"""

class ImmutableEntityError(AssetConfigError):
    """Attempt to delete a system attribute or strip its system flag"""
