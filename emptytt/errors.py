"""Exceptions raised while building ST 428-7 documents and track files."""


class EmptyTTError(Exception):
    """Base class for all emptytt failures."""


class InvalidFrameRate(EmptyTTError, ValueError):
    """The frame rate cannot drive timecode arithmetic."""


class TemplateError(EmptyTTError):
    """A template document could not be used."""


class TemplateUnreadable(TemplateError):
    """The template file could not be opened or read."""


class InvalidNamespace(TemplateError):
    """The template uses a deprecated ST 428-7 namespace."""


class TemplateUndetermined(TemplateError):
    """The template document type cannot be determined."""


class InvalidExtension(TemplateUndetermined):
    """The template path does not carry the .xml extension."""


class RenderFailure(EmptyTTError):
    """The document model could not be serialized."""


class WrapperUnavailable(EmptyTTError):
    """The track-file wrapper is not installed or not on $PATH."""


class WrapperExecutionFailure(EmptyTTError):
    """The track-file wrapper ran but did not produce a track file."""
