#!/usr/bin/env python3
"""
System Monitoring Module

Snapshots of process memory and CPU usage, attached to training logs so a
large source text shows up in the metrics it costs.
"""

import os
import threading
import time
from datetime import datetime

import psutil


class MemoryManager:
    """
    Reports memory usage of the current process against a soft limit.
    """

    def __init__(self, logger, memory_limit_mb=None, memory_limit_percentage=85):
        """
        Initialize memory manager with specified limits.

        Args:
            logger: Logger instance for recording memory events
            memory_limit_mb (int, optional): Explicit memory threshold in MB
            memory_limit_percentage (float): Percentage of system memory to use if threshold not specified
        """
        self.logger = logger
        self.memory_limit_percentage = memory_limit_percentage

        system_memory = psutil.virtual_memory()
        self.total_system_memory_mb = system_memory.total / (1024 * 1024)

        if memory_limit_mb:
            self.memory_limit_mb = memory_limit_mb
        else:
            self.memory_limit_mb = int(
                self.total_system_memory_mb * (memory_limit_percentage / 100))

    def get_current_memory_usage(self):
        """
        Get current process memory usage.

        Returns:
            dict: Current usage in MB, share of system memory and the configured limit
        """
        process = psutil.Process(os.getpid())
        current_memory_mb = process.memory_info().rss / (1024 * 1024)

        return {
            "current_mb": current_memory_mb,
            "percent_used": (current_memory_mb / self.total_system_memory_mb) * 100,
            "system_percent_used": psutil.virtual_memory().percent,
            "limit_mb": self.memory_limit_mb
        }

    def check_memory_health(self):
        """
        Check if memory usage is within healthy limits.

        Returns:
            tuple: (is_healthy, memory_usage_dict, warning_message)
        """
        memory_usage = self.get_current_memory_usage()

        warning_threshold = 0.9 * self.memory_limit_mb
        danger_threshold = 0.95 * self.memory_limit_mb

        if memory_usage["current_mb"] > danger_threshold:
            message = f"DANGER: Memory usage at {memory_usage['current_mb']:.2f} MB, {(memory_usage['current_mb'] / self.memory_limit_mb) * 100:.1f}% of limit"
            is_healthy = False
        elif memory_usage["current_mb"] > warning_threshold:
            message = f"WARNING: Memory usage at {memory_usage['current_mb']:.2f} MB, {(memory_usage['current_mb'] / self.memory_limit_mb) * 100:.1f}% of limit"
            is_healthy = True
        else:
            message = None
            is_healthy = True

        return is_healthy, memory_usage, message


class ResourceMonitor:
    """
    Collects resource usage for an operation and logs it with progress messages.
    """

    def __init__(self, logger, memory_limit_mb=None, memory_limit_percentage=85):
        """
        Initialize the resource monitor.

        Args:
            logger: Logger instance for recording resource metrics
            memory_limit_mb (int, optional): Explicit memory threshold in MB
            memory_limit_percentage (float): Percentage of system memory to use if threshold not specified
        """
        self.logger = logger
        self.memory_manager = MemoryManager(
            logger=logger,
            memory_limit_mb=memory_limit_mb,
            memory_limit_percentage=memory_limit_percentage
        )

        self.current_operation = None
        self.operation_start_time = None

    def get_resource_usage(self):
        """
        Get resource usage statistics without blocking.

        Returns:
            dict: Memory, CPU and thread metrics for this process
        """
        process = psutil.Process(os.getpid())

        return {
            "timestamp": datetime.now().isoformat(),
            "memory": self.memory_manager.get_current_memory_usage(),
            "cpu": {
                # interval=None compares against the previous call instead of sleeping
                "process_percent": process.cpu_percent(interval=None),
                "cores": psutil.cpu_count(),
            },
            "threads": threading.active_count(),
            "process_id": os.getpid()
        }

    def start(self, operation_name=None):
        """
        Mark the start of an operation so later progress logs carry elapsed time.

        Args:
            operation_name (str, optional): Name of the operation being monitored
        """
        self.current_operation = operation_name
        self.operation_start_time = time.time()

    def stop(self):
        """
        Log final resource usage and clear the operation.

        Returns:
            float or None: Duration of the operation in seconds
        """
        duration = None
        if self.operation_start_time:
            duration = time.time() - self.operation_start_time

        self.logger.debug("Resource monitoring stopped", extra={
            "metrics": {
                "system_resources": self.get_resource_usage(),
                "duration": duration
            },
            "operation": self.current_operation
        })

        self.current_operation = None
        self.operation_start_time = None
        return duration

    def log_progress(self, message, operation=None, extra_metrics=None):
        """
        Log progress of an ongoing operation with current resource metrics.

        Args:
            message (str): Progress message to log
            operation (str, optional): Operation name (updates current_operation if provided)
            extra_metrics (dict, optional): Additional metrics to include in the log
        """
        if operation:
            self.current_operation = operation

        metrics = {"system_resources": self.get_resource_usage()}
        if extra_metrics:
            metrics.update(extra_metrics)

        if self.operation_start_time:
            metrics["elapsed_time"] = time.time() - self.operation_start_time

        _, _, warning = self.memory_manager.check_memory_health()
        if warning:
            self.logger.warning(warning, extra={"metrics": metrics})

        self.logger.info(message, extra={
            "metrics": metrics,
            "operation": self.current_operation
        })
