"""
Middleware and RequestHandler - the two capabilities a pipeline is built from.
"""

from .exceptions import ConfigurationError


class RequestHandler:
    """
    Base class for anything that turns a request into a result.

    Terminal (fallback) handlers implement this, and so does the continuation
    each middleware receives, so a middleware cannot tell whether it is the
    last one in the chain.
    """

    def handle(self, request):
        """
        Handle the request and return a result.

        Args:
            request: Opaque request value

        Returns:
            Opaque result value
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement handle()")

    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def __str__(self):
        return self.__class__.__name__


class Middleware:
    """
    Base class for a unit of request processing inside a pipeline.

    Middleware is shared by every invocation of the pipelines that hold it,
    so it should not keep per-request state on the instance.
    """

    def process(self, request, handler):
        """
        Process the request, optionally delegating to the rest of the chain.

        Args:
            request: Opaque request value
            handler: RequestHandler representing the rest of the chain

        Returns:
            The result of handler.handle() (or a modified one), or a result
            produced directly to short-circuit the chain

        Example:
            def process(self, request, handler):
                # Before logic, runs in pipeline order
                if not is_allowed(request):
                    return "denied"

                result = handler.handle(request)

                # After logic, runs in reverse pipeline order
                return result
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement process()")

    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def __str__(self):
        return self.__class__.__name__


class CallableMiddleware(Middleware):
    """Adapts a plain function ``func(request, handler)`` to Middleware."""

    def __init__(self, func):
        if not callable(func):
            raise ConfigurationError(
                f"CallableMiddleware expects a callable, {type(func).__name__} given"
            )
        self.func = func

    def process(self, request, handler):
        return self.func(request, handler)

    def __repr__(self):
        return f"CallableMiddleware({getattr(self.func, '__qualname__', self.func)!r})"


class CallableHandler(RequestHandler):
    """Adapts a plain function ``func(request)`` to RequestHandler."""

    def __init__(self, func):
        if not callable(func):
            raise ConfigurationError(
                f"CallableHandler expects a callable, {type(func).__name__} given"
            )
        self.func = func

    def handle(self, request):
        return self.func(request)

    def __repr__(self):
        return f"CallableHandler({getattr(self.func, '__qualname__', self.func)!r})"
