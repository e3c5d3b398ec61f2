"""
Errors raised by the generation step.

Every stage failure is fatal to a generation run. The lookup accessor never
raises; a missing type is reported through its boolean result.
"""


class GenerationError(Exception):
    """Raised when the description table cannot be generated."""
    pass


class FetchError(GenerationError):
    """Raised when the XML database cannot be fetched or opened."""
    pass


class DecodeError(GenerationError):
    """Raised when the XML is malformed or a mime-type element has the wrong shape."""
    pass


class RenderError(GenerationError):
    """Raised when the table module cannot be rendered or formatted."""
    pass


class WriteError(GenerationError):
    """Raised when the rendered module cannot be persisted."""
    pass
