"""Bounded worker pipeline: ingestion -> workers -> result sink.

Both queues hold at most ``parallel`` items. When every worker is busy and
the task queue is full, ingestion blocks, so input is consumed no faster
than domains are verified. Closure is signalled with a sentinel: ingestion
pushes it after the last domain, and a watcher thread pushes it to the
result queue once all workers have exited.
"""

import logging
import queue
import threading
from collections.abc import Callable, Iterable, Iterator

from .models import DomainVerdict

logger = logging.getLogger(__name__)

_CLOSED = object()


class VerificationPipeline:
    """Runs a verify function over a stream of domains with bounded parallelism."""

    def __init__(self, verify: Callable[[str], DomainVerdict], parallel: int = 10):
        if parallel < 1:
            raise ValueError(f"parallel must be at least 1, got {parallel}")
        self.verify = verify
        self.parallel = parallel
        self.tasks: queue.Queue = queue.Queue(maxsize=parallel)
        self.results: queue.Queue = queue.Queue(maxsize=parallel)
        self._workers: list[threading.Thread] = []

    def run(self, domains: Iterable[str]) -> Iterator[DomainVerdict]:
        """Start all stages and yield verdicts in completion order.

        Each submitted domain yields exactly one verdict. Duplicates are
        verified independently.
        """
        self.tasks = queue.Queue(maxsize=self.parallel)
        self.results = queue.Queue(maxsize=self.parallel)
        self._workers = []

        ingest = threading.Thread(
            target=self._ingest, args=(domains,), name="ingest", daemon=True
        )
        ingest.start()

        for i in range(self.parallel):
            worker = threading.Thread(
                target=self._work, name=f"worker-{i}", daemon=True
            )
            self._workers.append(worker)
            worker.start()

        watcher = threading.Thread(target=self._watch, name="watcher", daemon=True)
        watcher.start()

        while True:
            item = self.results.get()
            if item is _CLOSED:
                break
            yield item

    def _ingest(self, domains: Iterable[str]) -> None:
        count = 0
        try:
            for domain in domains:
                self.tasks.put(domain)
                count += 1
        except Exception as e:
            logger.error(f"Reading domains failed after {count} domain(s): {e}")
        finally:
            self.tasks.put(_CLOSED)
            logger.debug(f"Ingestion finished, {count} domain(s) queued")

    def _work(self) -> None:
        while True:
            domain = self.tasks.get()
            if domain is _CLOSED:
                # Hand the sentinel on so the remaining workers see it too
                self.tasks.put(_CLOSED)
                return

            try:
                verdict = self.verify(domain)
            except Exception as e:
                logger.exception(f"Unexpected error verifying {domain}")
                verdict = DomainVerdict(domain, error=f"internal error: {e}")
            self.results.put(verdict)

    def _watch(self) -> None:
        for worker in self._workers:
            worker.join()
        self.results.put(_CLOSED)
        logger.debug("All workers finished")
