"""
Next - the continuation handed to each middleware.
"""

from .middleware import RequestHandler


class Next(RequestHandler):
    """
    The rest of a chain, presented as a RequestHandler.

    A Next never changes after construction: it points at a position in an
    immutable tuple of middleware, and advancing builds a new Next for the
    following position. Every pipeline call therefore walks its own view of
    the chain, and calling the continuation twice simply runs the remainder
    twice.

    Call stack for middlewares (M1, M2) and final handler H:

        Next(0).handle(req)  -> M1.process(req, Next(1))
        Next(1).handle(req)  -> M2.process(req, Next(2))
        Next(2).handle(req)  -> H.handle(req)
    """

    def __init__(self, middlewares, handler, position=0):
        """
        Args:
            middlewares: Sequence of Middleware; stored as a tuple
            handler: RequestHandler invoked once the sequence is exhausted
            position: Index of the next middleware to run
        """
        self._middlewares = tuple(middlewares)
        self._handler = handler
        self._position = position

    def handle(self, request):
        if self._position >= len(self._middlewares):
            return self._handler.handle(request)

        middleware = self._middlewares[self._position]
        rest = Next(self._middlewares, self._handler, self._position + 1)
        return middleware.process(request, rest)

    def remaining(self):
        """Return the number of middleware this continuation has yet to run."""
        return max(len(self._middlewares) - self._position, 0)

    def __repr__(self):
        return f"Next(remaining={self.remaining()}, handler={self._handler!r})"
