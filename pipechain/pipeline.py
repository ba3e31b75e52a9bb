"""
Pipeline - an immutable, composable chain of middleware.
"""

import logging
from collections.abc import Iterable

from .cursor import Next
from .exceptions import CircularReferenceError, ConfigurationError, InvalidMiddlewareError
from .handlers import EmptyPipelineHandler
from .middleware import Middleware, RequestHandler

logger = logging.getLogger(__name__)


class Pipeline(Middleware, RequestHandler):
    """
    Runs a request through an ordered sequence of middleware.

    The pipeline manages:
    - Sequential middleware execution (insertion order)
    - Short-circuiting when a middleware returns without delegating
    - A fallback handler for when every middleware delegated
    - Composition, since a pipeline is itself a Middleware

    A pipeline never changes after construction. pipe() and
    with_fallback_handler() return new pipelines, and each call to handle()
    or process() walks its own Next cursor, so one instance can serve any
    number of concurrent callers.

    Example:
        pipeline = Pipeline([AuthMiddleware(), CorsMiddleware()], AppHandler())
        response = pipeline.handle(request)
    """

    def __init__(self, middlewares=(), fallback_handler=None):
        """
        Initialize a Pipeline.

        Args:
            middlewares: Iterable of Middleware, in execution order
            fallback_handler: RequestHandler run when the chain is exhausted
                (default: EmptyPipelineHandler)

        Raises:
            InvalidMiddlewareError: If an element is not a Middleware
            ConfigurationError: If fallback_handler is not a RequestHandler
        """
        self._middlewares = tuple(_validated(middlewares))
        self._fallback_handler = _validated_handler(fallback_handler)
        logger.debug("Built %r", self)

    @classmethod
    def create_from_iterable(cls, middlewares, fallback_handler=None):
        """Create a pipeline from an iterable of middleware."""
        return cls(middlewares, fallback_handler)

    @property
    def fallback_handler(self):
        """The RequestHandler handle() finishes with."""
        return self._fallback_handler

    def has(self, middleware):
        """
        Check whether the pipeline directly holds a middleware.

        Nested pipelines are not searched.

        Args:
            middleware: A Middleware instance, matched by identity, or a
                class, matched against each element's exact type

        Returns:
            True if a matching element exists
        """
        if isinstance(middleware, type):
            return any(type(m) is middleware for m in self._middlewares)
        return any(m is middleware for m in self._middlewares)

    def is_empty(self):
        """Return True if the pipeline holds no middleware."""
        return not self._middlewares

    def count(self):
        """Return the number of middleware in the pipeline."""
        return len(self._middlewares)

    def pipe(self, middlewares, prepend=False):
        """
        Return a new pipeline with additional middleware.

        Args:
            middlewares: A Middleware or an iterable of Middleware
            prepend: If True, place the additions before the existing
                middleware, keeping their relative order

        Returns:
            A new Pipeline; this one is left untouched

        Raises:
            InvalidMiddlewareError: If an addition is not a Middleware. The
                position is relative to the additions.
            CircularReferenceError: If an addition is this pipeline, or a
                pipeline that directly contains it
        """
        if isinstance(middlewares, Middleware):
            middlewares = (middlewares,)

        additions = []
        for middleware in _validated(middlewares):
            if middleware is self:
                raise CircularReferenceError(
                    "Cannot add pipeline to itself - this would create circular reference"
                )
            # One level only: a deeper cycle (A in B in C in A) goes unnoticed.
            if isinstance(middleware, Pipeline) and middleware.has(self):
                raise CircularReferenceError(
                    "Cannot add pipeline that contains reference to this pipeline"
                )
            additions.append(middleware)

        if prepend:
            combined = tuple(additions) + self._middlewares
        else:
            combined = self._middlewares + tuple(additions)

        logger.debug("Piping %d middleware into %r (prepend=%s)", len(additions), self, prepend)
        return self._copy(combined, self._fallback_handler)

    def with_fallback_handler(self, handler):
        """
        Return a new pipeline that finishes with a different fallback handler.

        Passing None restores the default EmptyPipelineHandler.

        Raises:
            ConfigurationError: If handler is not a RequestHandler
        """
        return self._copy(self._middlewares, _validated_handler(handler))

    def process(self, request, handler):
        """
        Run the request through the chain, finishing with the given handler.

        This is what makes a pipeline usable as one middleware inside another
        pipeline: handler is then the outer chain's continuation.

        Raises:
            ConfigurationError: If handler is this pipeline
        """
        if handler is self:
            raise ConfigurationError(
                "Cannot use pipeline as its own handler - this would cause all middleware to execute twice"
            )
        return Next(self._middlewares, handler).handle(request)

    def handle(self, request):
        """Run the request through the chain, finishing with the fallback handler."""
        return Next(self._middlewares, self._fallback_handler).handle(request)

    def _copy(self, middlewares, fallback_handler):
        # Everything has been validated already; skip __init__.
        clone = object.__new__(type(self))
        clone._middlewares = middlewares
        clone._fallback_handler = fallback_handler
        return clone

    def __iter__(self):
        return iter(self._middlewares)

    def __len__(self):
        return len(self._middlewares)

    def __bool__(self):
        # An empty pipeline is still a usable handler.
        return True

    def __repr__(self):
        return (f"Pipeline(middleware={len(self._middlewares)}, "
                f"fallback_handler={self._fallback_handler!r})")


def pipe(middlewares=(), fallback_handler=None):
    """
    Shorthand for Pipeline.create_from_iterable().

    Example:
        app = pipe([ErrorMiddleware(), SessionMiddleware()], AppHandler())
    """
    return Pipeline.create_from_iterable(middlewares, fallback_handler)


def _validated(middlewares):
    if not isinstance(middlewares, Iterable):
        middlewares = (middlewares,)
    for position, middleware in enumerate(middlewares):
        if not isinstance(middleware, Middleware):
            raise InvalidMiddlewareError(position, middleware)
        yield middleware


def _validated_handler(handler):
    if handler is None:
        return EmptyPipelineHandler()
    if not isinstance(handler, RequestHandler):
        raise ConfigurationError(
            f"Fallback handler must be an instance of pipechain.RequestHandler, "
            f"{type(handler).__name__} given"
        )
    return handler
