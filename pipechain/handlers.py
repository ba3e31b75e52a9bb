"""
Terminal handlers shipped with pipechain.
"""

import logging

from .exceptions import PipelineExhaustedError
from .middleware import RequestHandler

logger = logging.getLogger(__name__)


class EmptyPipelineHandler(RequestHandler):
    """
    Default fallback handler.

    Reaching it means every middleware delegated and no application handler
    was configured, which is treated as a configuration bug.
    """

    message = "Failed to process the request. The pipeline is empty!"

    def handle(self, request):
        logger.warning("Request reached the end of a pipeline with no fallback handler")
        raise PipelineExhaustedError(self.message)
