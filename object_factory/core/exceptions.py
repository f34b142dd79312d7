"""Custom exception types used across the project."""


class ObjectFactoryError(Exception):
    """Base exception for the project."""


class RegistryError(ObjectFactoryError):
    """Raised when a builder is registered twice under one kind."""


class ComponentTypeError(ObjectFactoryError, TypeError):
    """Raised when a stored entry is missing or not of the requested component type."""


class ConfigurationError(ObjectFactoryError):
    """Raised when configuration is invalid or incomplete."""
