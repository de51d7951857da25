"""Fan-out/join helper for independent pipeline branches."""

from collections.abc import Callable, Sequence
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import TypeVar

T = TypeVar("T")


class BranchFailedError(Exception):
    """Raised when one branch of a fan-out raised or did not finish in time."""

    def __init__(self, index: int, cause: BaseException):
        self.index = index
        self.cause = cause
        super().__init__(f"Branch {index} failed: {cause}")


def run_branches(
    branches: Sequence[Callable[[], T]],
    *,
    timeout: float | None,
    name: str,
) -> list[T]:
    """
    Runs every branch on its own thread and waits for all of them.

    The join returns as soon as one branch raises. Branches that have not
    started are cancelled; branches already running are left to finish and
    their results are dropped.

    Args:
        branches: Zero-argument callables without shared mutable state.
        timeout: Seconds to wait for the whole group, or None to wait forever.
        name: Thread name prefix.

    Returns:
        Branch results in the order the branches were given.

    Raises:
        BranchFailedError: For the first failing branch in the given order,
            or for the first unfinished one when the timeout expires.
    """
    if not branches:
        return []

    executor = ThreadPoolExecutor(max_workers=len(branches), thread_name_prefix=name)
    try:
        futures = [executor.submit(branch) for branch in branches]
        done, pending = wait(futures, timeout=timeout, return_when=FIRST_EXCEPTION)

        for index, future in enumerate(futures):
            if future in done and future.exception() is not None:
                raise BranchFailedError(index, future.exception())

        for index, future in enumerate(futures):
            if future in pending:
                raise BranchFailedError(
                    index, TimeoutError(f"not finished after {timeout} seconds")
                )

        return [future.result() for future in futures]
    finally:
        executor.shutdown(wait=False, cancel_futures=True)
