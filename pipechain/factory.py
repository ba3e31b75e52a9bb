"""
PipelineFactory and container configuration.
"""

from .pipeline import Pipeline


class PipelineFactory:
    """
    Builds pipelines for dependency-injection containers.

    The factory is also callable, so it can be registered wherever a
    container expects a plain factory function.
    """

    def create_middleware_pipeline(self, middlewares=(), fallback_handler=None):
        """
        Create a pipeline.

        Args:
            middlewares: Iterable of Middleware, in execution order
            fallback_handler: Optional RequestHandler (default: EmptyPipelineHandler)

        Returns:
            A new Pipeline
        """
        return Pipeline(middlewares, fallback_handler)

    def __call__(self, middlewares=(), fallback_handler=None):
        return self.create_middleware_pipeline(middlewares, fallback_handler)

    def __repr__(self):
        return f"{self.__class__.__name__}()"


def config_provider():
    """
    Describe how an application container should wire pipechain.

    Returns:
        Dictionary with a 'dependencies' section mapping Pipeline to a
        factory and PipelineFactory to its class
    """
    return {
        'dependencies': {
            'factories': {Pipeline: PipelineFactory()},
            'invokables': {PipelineFactory: PipelineFactory},
        }
    }
