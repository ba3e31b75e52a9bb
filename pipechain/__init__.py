"""
pipechain - Immutable middleware pipelines

pipechain runs a request through an ordered chain of middleware and a
terminal handler. It provides:
- Middleware that either answers a request or delegates to the rest of the chain
- Pipelines that never change once built (pipe() returns a new one)
- Pipelines that nest inside other pipelines as a single middleware
- Per-call continuations, so one pipeline can serve concurrent callers

Example:
    from pipechain import Middleware, Pipeline, RequestHandler

    class Greeting(RequestHandler):
        def handle(self, request):
            return f"Hello, {request}!"

    class Shout(Middleware):
        def process(self, request, handler):
            return handler.handle(request).upper()

    pipeline = Pipeline([Shout()], Greeting())
    print(pipeline.handle('world'))  # HELLO, WORLD!
"""

__version__ = "1.0.0"
__author__ = "pipechain Contributors"

from .cursor import Next
from .exceptions import (
    CircularReferenceError,
    ConfigurationError,
    InvalidMiddlewareError,
    PipelineError,
    PipelineExhaustedError,
)
from .factory import PipelineFactory, config_provider
from .handlers import EmptyPipelineHandler
from .middleware import CallableHandler, CallableMiddleware, Middleware, RequestHandler
from .pipeline import Pipeline, pipe

__all__ = [
    'Pipeline',
    'pipe',
    'Middleware',
    'RequestHandler',
    'CallableMiddleware',
    'CallableHandler',
    'EmptyPipelineHandler',
    'Next',
    'PipelineFactory',
    'config_provider',
    'PipelineError',
    'ConfigurationError',
    'InvalidMiddlewareError',
    'CircularReferenceError',
    'PipelineExhaustedError',
]
