"""
Exceptions raised by pipechain.

Everything the package raises on its own account derives from PipelineError.
Failures raised by middleware or handlers are never wrapped in these.
"""


class PipelineError(Exception):
    """Base class for all pipechain errors."""


class ConfigurationError(PipelineError):
    """A pipeline was assembled or invoked with an invalid configuration."""


class InvalidMiddlewareError(ConfigurationError, TypeError):
    """
    A value that is not a Middleware was supplied to a pipeline.

    Attributes:
        position: Zero-based index of the offending value in the batch it came from
        value: The rejected value
    """

    def __init__(self, position, value):
        self.position = position
        self.value = value
        super().__init__(
            f"Middleware at position {position} must be an instance of "
            f"pipechain.Middleware, {_debug_type(value)} given"
        )


class CircularReferenceError(ConfigurationError):
    """A pipeline would end up containing itself."""


class PipelineExhaustedError(PipelineError, RuntimeError):
    """The chain ran out of middleware and no real handler was configured."""


def _debug_type(value):
    if value is None:
        return "None"
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
