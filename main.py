"""Main entry point for the RPC Optimizer HTTP API."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from rpc_optimizer.const import APP_DESCRIPTION, APP_TITLE, APP_VERSION
from rpc_optimizer.optimizer import RpcOptimizer
from rpc_optimizer.shared.config import Config
from rpc_optimizer.shared.logging import LoggingManager
from rpc_optimizer.slices.benchmark.benchmark_router import BenchmarkRouter
from rpc_optimizer.slices.health.health_router import HealthRouter
from rpc_optimizer.slices.networks.networks_router import NetworksRouter


class RpcOptimizerApp:
    """Main application class for the RPC Optimizer API."""

    def __init__(self, optimizer: Optional[RpcOptimizer] = None):
        # Setup logging
        LoggingManager.setup_logging()

        # One optimizer per app so the benchmark cache is shared across requests
        self.optimizer = optimizer or RpcOptimizer()

        # Initialize routers
        self.networks_router = NetworksRouter.get_router(self.optimizer)
        self.health_router = HealthRouter.get_router(self.optimizer)
        self.benchmark_router = BenchmarkRouter.get_router(self.optimizer)

        # Create FastAPI app
        self.app = FastAPI(
            title=APP_TITLE,
            description=APP_DESCRIPTION,
            version=APP_VERSION,
            lifespan=self.lifespan,
        )

        # Mount slices
        self.app.include_router(self.networks_router)
        self.app.include_router(self.health_router)
        self.app.include_router(self.benchmark_router)

    @asynccontextmanager
    async def lifespan(self, app: FastAPI):
        yield
        await self.optimizer.aclose()


def create_app(optimizer: Optional[RpcOptimizer] = None) -> FastAPI:
    """Build the FastAPI application around an optimizer."""
    return RpcOptimizerApp(optimizer).app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    server_config = Config()
    uvicorn.run(app, host=server_config.server_host, port=server_config.server_port)
