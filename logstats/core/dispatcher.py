"""Fork-join dispatch of per-file aggregation tasks."""

from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Callable, Dict, List, Optional, Sequence

from logstats.core.aggregator import PathLike, aggregate_file
from logstats.core.constants import DEFAULT_ENCODING
from logstats.core.errors import ConfigError, EmptyBatchError
from logstats.core.logging import get_logger, log_duration
from logstats.core.reducer import reduce_summaries
from logstats.models.data import FileSummary, GlobalSummary

logger = get_logger(__name__)

AggregateFn = Callable[[PathLike, str], FileSummary]

class FileAnalysisDispatcher:
    """Runs one aggregation task per file and reduces the results.
    
    Every task owns its file handle, records and summary; the only shared
    point is the join on the list of futures. Results are put back in input
    order before reduction so ranking ties resolve the same way whichever
    task finishes first.
    """
    
    def __init__(
        self,
        max_workers: Optional[int] = None,
        encoding: str = DEFAULT_ENCODING,
        aggregate: AggregateFn = aggregate_file
    ):
        """Initialize the dispatcher.
        
        Args:
            max_workers: Upper bound on concurrent tasks, None for one per file
            encoding: Text encoding of the log files
            aggregate: Callable producing a summary for one file
        """
        if max_workers is not None and max_workers < 1:
            raise ConfigError(
                "max_workers must be a positive integer",
                details={"max_workers": max_workers}
            )
        self.max_workers = max_workers
        self.encoding = encoding
        self.aggregate = aggregate
    
    def _pool_size(self, num_paths: int) -> int:
        if self.max_workers is None:
            return num_paths
        return min(self.max_workers, num_paths)
    
    def collect(self, paths: Sequence[PathLike]) -> List[FileSummary]:
        """Aggregate every file concurrently and wait for all of them.
        
        Args:
            paths: Log files to analyze
            
        Returns:
            One summary per path, in input order
            
        Raises:
            EmptyBatchError: If no paths are supplied
            LogStatsError: The first fatal task error, in input order, once
                every task has finished
        """
        if not paths:
            raise EmptyBatchError()
        
        workers = self._pool_size(len(paths))
        logger.debug("dispatch_started", files=len(paths), workers=workers)
        
        results: Dict[int, FileSummary] = {}
        failures: Dict[int, BaseException] = {}
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="logstats") as pool:
            futures: Dict[Future, int] = {
                pool.submit(self.aggregate, path, self.encoding): index
                for index, path in enumerate(paths)
            }
            for future in as_completed(futures):
                index = futures[future]
                error = future.exception()
                if error is not None:
                    failures[index] = error
                    logger.error("task_failed", path=str(paths[index]), error=str(error))
                else:
                    results[index] = future.result()
        
        if failures:
            raise failures[min(failures)]
        
        return [results[index] for index in range(len(paths))]
    
    @log_duration(logger)
    def analyze(self, paths: Sequence[PathLike]) -> GlobalSummary:
        """Aggregate every file concurrently and reduce to a global summary.
        
        Args:
            paths: Log files to analyze
            
        Returns:
            Global summary across all files
        """
        summaries = self.collect(paths)
        summary = reduce_summaries(summaries)
        logger.info(
            "batch_reduced",
            files=summary.num_files,
            entries=summary.num_entries,
            unreadable=len(summary.unreadable_files)
        )
        return summary

def analyze_files(
    paths: Sequence[PathLike],
    max_workers: Optional[int] = None,
    encoding: str = DEFAULT_ENCODING
) -> GlobalSummary:
    """Analyze a batch of log files into one global summary."""
    return FileAnalysisDispatcher(max_workers=max_workers, encoding=encoding).analyze(paths)
