"""Base class for routers in the RPC Optimizer API."""

from abc import ABC, abstractmethod
from typing import Optional

from fastapi import APIRouter, HTTPException

from rpc_optimizer.benchmark.models import BenchmarkOptions
from rpc_optimizer.chains.networks import Network
from rpc_optimizer.const import HTTP_BAD_REQUEST
from rpc_optimizer.exceptions import UnknownNetworkError
from rpc_optimizer.shared.logging import LoggingManager


class BaseRouter(ABC):
    """Base class for API routers backed by an optimizer instance."""

    prefix = ""
    tag = None

    def __init__(self, optimizer):
        self.optimizer = optimizer
        self.router = APIRouter(prefix=self.prefix, tags=[self.tag])
        self.logger = LoggingManager.get_logger(self.__class__.__module__)
        self.add_routes()

    @abstractmethod
    def add_routes(self):
        """Add routes to the router."""
        pass

    @classmethod
    def get_router(cls, optimizer) -> APIRouter:
        """Get the router instance."""
        return cls(optimizer).router

    def parse_network(self, network: str) -> Network:
        """Resolve a path parameter to a network, answering 400 when it is unknown."""
        try:
            return Network.parse(network)
        except UnknownNetworkError as e:
            self.logger.info(f"Rejected request for unknown network: {network}")
            raise HTTPException(status_code=HTTP_BAD_REQUEST, detail=str(e))

    def build_options(self, samples: Optional[int], timeout_ms: Optional[int],
                      parallel: Optional[bool] = None) -> BenchmarkOptions:
        """Benchmark options from query parameters, answering 400 on invalid values."""
        try:
            return self.optimizer.default_options(samples=samples, timeout_ms=timeout_ms, parallel=parallel)
        except ValueError as e:
            raise HTTPException(status_code=HTTP_BAD_REQUEST, detail=str(e))
