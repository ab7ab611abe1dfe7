from profile_composer.core import ConfigurationError, ValidationError  # noqa: F401

__version__ = "0.1.0"
