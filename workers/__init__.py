from concurrent import futures
from typing import Any, Callable, Dict, Sequence

class QueryWorkerPool:
    def __init__(self, queries: Dict[str, Callable[[Sequence[Any]], Any]],
                 items: Sequence[Any], num_workers: int = 3):
        """
        queries: Query name to function; each function receives the whole item sequence.
        items: Sequence every query runs against (read-only).
        num_workers: Number of concurrent workers.
        """
        if num_workers < 1:
            raise ValueError(f"num_workers must be at least 1 (got {num_workers})")
        self.queries = queries
        self.items = items
        self.num_workers = num_workers

    def _worker(self, name: str) -> Any:
        """Run a single named query."""
        return self.queries[name](self.items)

    def run(self) -> Dict[str, Any]:
        """Execute every query in parallel using ThreadPoolExecutor."""
        completed = {}

        with futures.ThreadPoolExecutor(max_workers=self.num_workers) as executor:
            jobs = {executor.submit(self._worker, name): name for name in self.queries}
            for job in futures.as_completed(jobs):
                completed[jobs[job]] = job.result()

        # Completion order is arbitrary, hand results back in query order
        return {name: completed[name] for name in self.queries}
