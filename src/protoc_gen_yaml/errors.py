"""Exceptions raised by the plugin pipeline.

Every stage raises a PluginError subclass; main() is the only place that
catches them and turns them into an exit status.
"""

from __future__ import annotations


class PluginError(Exception):
    """Base class for all fatal plugin errors."""


class InputReadError(PluginError):
    """Raised when the request cannot be read from its stream."""


class DecodeError(PluginError):
    """Raised when the request bytes are not a valid CodeGeneratorRequest."""


class EmptyInputError(PluginError):
    """Raised when the request names no files to generate."""


class MissingDescriptorError(PluginError):
    """Raised when a file to generate has no descriptor in the request."""


class ConfigError(PluginError):
    """Raised when the plugin parameter string is malformed."""


class TypeReferenceError(PluginError):
    """Raised when a method type reference lacks its leading '.' marker."""


class SerializationError(PluginError):
    """Raised when a schema cannot be rendered to YAML."""


class EncodeError(PluginError):
    """Raised when the response cannot be encoded to wire bytes."""


class OutputWriteError(PluginError):
    """Raised when the encoded response cannot be written out."""
