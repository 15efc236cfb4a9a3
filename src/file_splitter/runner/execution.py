"""Executor policy and executor selection utilities."""

from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import TypeAlias

ExecutorClass: TypeAlias = type[ThreadPoolExecutor] | type[ProcessPoolExecutor] | None

# "serial" writes in the main thread - useful for debugging with breakpoints.
WRITER_EXECUTORS: dict[str, ExecutorClass] = {
    "threads": ThreadPoolExecutor,
    "processes": ProcessPoolExecutor,
    "serial": None,
}

EXECUTOR_POLICIES = tuple(WRITER_EXECUTORS)

# Writes are I/O bound, so threads are the default.
DEFAULT_EXECUTOR_POLICY = "threads"


def get_executor_class(policy: str = DEFAULT_EXECUTOR_POLICY) -> ExecutorClass:
    """Look up the executor class that runs writer tasks for a policy name."""
    try:
        return WRITER_EXECUTORS[policy.lower()]
    except KeyError:
        raise ValueError(
            f"unknown executor policy {policy!r}, expected one of {EXECUTOR_POLICIES}"
        ) from None


def describe_executor(executor_class: ExecutorClass) -> str:
    """Map an executor class back to its policy name."""
    for policy, known_class in WRITER_EXECUTORS.items():
        if known_class is executor_class:
            return policy
    raise ValueError(f"no executor policy for {executor_class!r}")
