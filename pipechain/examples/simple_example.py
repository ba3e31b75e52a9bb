"""
Simple example demonstrating a pipechain pipeline.
"""

import time

from pipechain import Middleware, Pipeline, RequestHandler


# Define the application handler
class GreetUser(RequestHandler):
    def handle(self, request):
        name = request.get('name', 'World')
        print(f"Handler: greeting {name}")
        return {'status': 200, 'body': f"Hello, {name}!"}


# Define middleware
class LoggingMiddleware(Middleware):
    def process(self, request, handler):
        print(f"[LOG] Request for {request.get('path')}")

        response = handler.handle(request)

        print(f"[LOG] Responded {response['status']}")
        return response


class TimingMiddleware(Middleware):
    def process(self, request, handler):
        start = time.perf_counter()
        response = handler.handle(request)
        elapsed = (time.perf_counter() - start) * 1000

        print(f"[TIMING] {request.get('path')} took {elapsed:.2f}ms")
        return response


class AuthMiddleware(Middleware):
    def process(self, request, handler):
        if not request.get('user'):
            print("[AUTH] Rejected anonymous request")
            return {'status': 401, 'body': 'Unauthorized'}
        return handler.handle(dict(request, name=request['user']))


def main():
    print("=" * 60)
    print("pipechain Simple Example")
    print("=" * 60)
    print()

    # Build the pipeline
    pipeline = Pipeline([LoggingMiddleware(), TimingMiddleware()], GreetUser())
    secured = pipeline.pipe(AuthMiddleware())

    print(f"Pipeline built: {secured}")
    print()

    print("Authenticated request...")
    print("-" * 60)
    response = secured.handle({'path': '/hello', 'user': 'Alice'})
    print("-" * 60)
    print(f"Response: {response}")
    print()

    print("Anonymous request...")
    print("-" * 60)
    response = secured.handle({'path': '/hello'})
    print("-" * 60)
    print(f"Response: {response}")

    print()
    print("=" * 60)


if __name__ == "__main__":
    main()
