"""
Utility functions for the Squeeze API.
"""
from squeeze.utils.metrics import (
    calculate_savings,
    get_cpu_mem,
    get_disk_status,
    PerformanceTimer
)

from squeeze.utils.file_handling import (
    next_timestamp,
    ensure_output_dir,
    output_file,
    is_writable
)

__all__ = [
    # Metrics utilities
    'calculate_savings',
    'get_cpu_mem',
    'get_disk_status',
    'PerformanceTimer',

    # File handling utilities
    'next_timestamp',
    'ensure_output_dir',
    'output_file',
    'is_writable'
]
