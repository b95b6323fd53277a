"""
Utilities for measuring compression results and host resource usage.
"""
import time
from pathlib import Path
from typing import Dict, Any

import psutil


def calculate_savings(original_size: int, compressed_size: int) -> float:
    """
    Percentage of bytes saved by compression.

    Args:
        original_size: Size of the uploaded file in bytes
        compressed_size: Size of the written JPEG in bytes

    Returns:
        ``100 - compressed/original * 100``; negative when the output grew

    Raises:
        ValueError: If ``original_size`` is not positive
    """
    if original_size <= 0:
        raise ValueError("original_size must be positive")
    return 100 - (compressed_size / original_size * 100)


def get_cpu_mem() -> Dict[str, float]:
    """
    Get current CPU and memory usage.

    Returns:
        Dictionary with CPU and memory usage percentages
    """
    return {
        "cpu_usage": psutil.cpu_percent(interval=None),
        "memory_usage": psutil.virtual_memory().percent
    }


def get_disk_status(directory: Path) -> Dict[str, Any]:
    """Disk usage for the filesystem holding ``directory``."""
    usage = psutil.disk_usage(str(directory))
    return {
        "disk_usage": usage.percent,
        "free_space_mb": round(usage.free / (1024 * 1024), 2),
    }


class PerformanceTimer:
    """
    Context manager for measuring execution time.

    Example:
        with PerformanceTimer() as timer:
            # Code to measure
        execution_time = timer.execution_time
    """

    def __init__(self):
        self.start_time = None
        self.execution_time = 0

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.execution_time = time.perf_counter() - self.start_time
        return False  # Don't suppress exceptions
