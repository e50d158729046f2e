"""Manages concurrent benchmark execution."""
import asyncio
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar

from rpc_optimizer.shared.logging import LoggingManager


logger = LoggingManager.get_logger(__name__)

T = TypeVar('T')
R = TypeVar('R')


class ConcurrencyManager:
    """Runs one coroutine per item either all at once or one after another."""

    def __init__(self, parallel: bool = True):
        self.parallel = parallel

    async def run(self, items: Sequence[T], worker: Callable[[T], Awaitable[R]], parallel: Optional[bool] = None) -> List[R]:
        """
        Apply ``worker`` to every item and collect the results in input order.

        In parallel mode all workers run inside a single task group, so by the time
        this returns every worker has finished (or been cancelled if one raised).

        Args:
            items: Inputs, one worker call each.
            worker: Coroutine function to run per item.
            parallel: Overrides the manager default for this call.

        Returns:
            List of worker results aligned with ``items``.
        """
        parallel = self.parallel if parallel is None else parallel
        if not items:
            return []

        if not parallel:
            results = []
            for item in items:
                results.append(await worker(item))
            return results

        logger.debug(f"Launching {len(items)} concurrent workers")
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(worker(item)) for item in items]
        return [task.result() for task in tasks]
