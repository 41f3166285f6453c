"""Version and system information for line-points.

This module provides version information and system diagnostics useful for:
- Bug reports and error reporting
- Debugging environment issues

Usage:
    from linepoints import __version__, get_version_info, print_version_info

    # Simple version string
    print(__version__)  # "0.2.0"

    # Print formatted version info (for bug reports)
    print_version_info()

CLI Usage:
    python -m linepoints --version
    python -m linepoints info
"""

from __future__ import annotations

import importlib
import importlib.util
import platform
import sys
from typing import Any, Dict, Optional

# Version components
VERSION_MAJOR = 0
VERSION_MINOR = 2
VERSION_PATCH = 0
VERSION_SUFFIX = ""  # e.g., "alpha", "beta", "rc1"

__version__ = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}{'-' + VERSION_SUFFIX if VERSION_SUFFIX else ''}"


def get_python_info() -> Dict[str, str]:
    return {
        "version": platform.python_version(),
        "implementation": platform.python_implementation(),
        "executable": sys.executable,
    }


def get_platform_info() -> Dict[str, str]:
    return {
        "system": platform.system(),
        "release": platform.release(),
        "machine": platform.machine(),
    }


def _get_package_version(module_name: str) -> Optional[str]:
    """Get a package version from its `__version__`, or None if not installed."""
    # find_spec checks the module exists without importing it
    if importlib.util.find_spec(module_name) is None:
        return None
    module = importlib.import_module(module_name)
    return getattr(module, "__version__", "unknown")


def get_dependency_versions() -> Dict[str, Optional[str]]:
    """Get versions of key dependencies.

    Returns:
        Dict mapping package names to version strings (or None if not installed).
    """
    deps: Dict[str, Optional[str]] = {}

    deps["pydantic"] = _get_package_version("pydantic")
    deps["pydantic_core"] = _get_package_version("pydantic_core")
    deps["typing_extensions"] = _get_package_version("typing_extensions")
    deps["yaml"] = _get_package_version("yaml")

    return deps


def get_version_info() -> Dict[str, Any]:
    """Get comprehensive version and system information.

    Returns:
        Dict with version, python, platform, and dependency info.
    """
    return {
        "line_points": __version__,
        "python": get_python_info(),
        "platform": get_platform_info(),
        "dependencies": get_dependency_versions(),
    }


def format_version_info(info: Optional[Dict[str, Any]] = None) -> str:
    """Format version info as a human-readable string with aligned colons.

    Args:
        info: Version info dict from get_version_info(). If None, fetches it.

    Returns:
        Formatted multi-line string suitable for bug reports.
    """
    if info is None:
        info = get_version_info()

    py_info = info["python"]
    py_fields = [
        ("Version", py_info["version"]),
        ("Implementation", py_info["implementation"]),
        ("Executable", py_info["executable"]),
    ]

    plat_info = info["platform"]
    plat_fields = [
        ("System", plat_info["system"]),
        ("Release", plat_info["release"]),
        ("Machine", plat_info["machine"]),
    ]

    deps = info["dependencies"]
    dep_items = [(pkg, ver if ver else "not installed") for pkg, ver in deps.items()]

    width = max(len(label) for label, _ in py_fields + plat_fields + dep_items)

    lines = [f"line-points: {info['line_points']}", "", "Python:"]
    for label, value in py_fields:
        lines.append(f"  {label:>{width}} : {value}")

    lines.append("")
    lines.append("Platform:")
    for label, value in plat_fields:
        lines.append(f"  {label:>{width}} : {value}")

    lines.append("")
    lines.append("Dependencies:")
    for pkg, ver in dep_items:
        lines.append(f"  {pkg:>{width}} : {ver}")

    return "\n".join(lines)


def print_version_info() -> None:
    """Print version and system information to stdout."""
    print(format_version_info())
