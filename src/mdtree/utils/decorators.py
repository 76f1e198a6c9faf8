#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/utils/decorators.py
"""Utility decorators shared by the conversion entry points.

This module holds the dependency guard used in front of every operation that
needs the markdown parser, and a DEBUG-level timer for whole passes.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from mdtree.exceptions import DependencyError
from mdtree.utils.packages import check_version_requirement


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before method execution.

    Parameters
    ----------
    converter_name : str
        Name of the converter (e.g., "markdown"). Appears in error messages.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples where:
        - install_name: Package name for pip install (e.g., "mistune")
        - import_name: Module name for import statement (e.g., "mistune")
        - version_spec: Version requirement (e.g., ">=3.0.0" or "" for any version)

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    Examples
    --------
        >>> @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
        ... def parse(self, input_data):
        ...     import mistune

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            version_mismatches = []
            original_error = None

            for install_name, import_name, version_spec in packages:
                try:
                    importlib.import_module(import_name)

                    if version_spec:
                        meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
                        if not meets_requirement:
                            version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e

            if missing or version_mismatches:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=version_mismatches,
                    original_import_error=original_error,
                ) from original_error

            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time the enclosed block and log the elapsed time at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Conversion (markdown)")

    Notes
    -----
    Nothing is measured when the logger is not enabled for DEBUG.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
