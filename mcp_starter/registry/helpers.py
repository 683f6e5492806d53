"""
Registry Helpers
Path resolution, file enumeration, module loading and result bookkeeping
for automatic module discovery.
"""

import importlib.util
import os
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType as PyModule
from typing import Any, Dict, List, Optional, Sequence, Union

from mcp_starter.utils.logger import Logger

# Attribute a module file binds its RegisterableModule to
EXPORT_NAME = "MODULE"

MODULE_EXTENSION = ".py"

# One subdirectory per module type, searched non-recursively
MODULE_DIRECTORIES = ("tools", "resources", "prompts")


class _Missing:
    """Marker returned by load_module when a file has no MODULE export."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


@dataclass(frozen=True)
class ModuleLoadResult:
    """Outcome of processing one candidate module file."""
    success: bool
    name: str
    type: Optional[str] = None
    error: Any = None


# A settled outcome: the processor's result, or an exception that escaped it
Outcome = Union[ModuleLoadResult, BaseException]


def get_module_name(file_path: Union[str, Path]) -> str:
    """Module name derived from the file name, without extension."""
    return Path(file_path).stem


def get_module_type(file_path: Union[str, Path]) -> str:
    """Module type derived from the parent directory (e.g. "tools")."""
    return Path(file_path).parent.name


def format_module_info(module_type: str, module_name: str) -> str:
    """Format like "tools/echo"."""
    return f"{module_type}/{module_name}"


def get_root_dir(location: Union[str, Path]) -> Path:
    """
    Search root for module directories, derived from a module's ``__file__``.

    Two path segments are stripped: ``mcp_starter/registry/auto_loader.py``
    resolves to ``mcp_starter``, the common parent of tools/, resources/
    and prompts/.
    """
    return Path(location).resolve().parent.parent


def get_module_patterns(root_dir: Union[str, Path]) -> List[str]:
    """Glob patterns for module discovery, one per module directory."""
    return [
        os.path.join(str(root_dir), directory, f"*{MODULE_EXTENSION}")
        for directory in MODULE_DIRECTORIES
    ]


def find_module_files(root_dir: Union[str, Path], logger: Logger) -> List[str]:
    """
    Find all candidate module files under the standard module directories.

    Args:
        root_dir: Directory holding tools/, resources/ and prompts/
        logger: Logger for discovery diagnostics

    Returns:
        Absolute, de-duplicated file paths. Files starting with "_" (package
        markers, private helpers) are skipped.

    Raises:
        OSError: If the root directory itself cannot be listed. There is no
        partial discovery.
    """
    # Fails loudly on a missing or unreadable root; a missing category
    # directory below it simply matches nothing.
    os.listdir(root_dir)

    patterns = get_module_patterns(root_dir)
    logger.info(f"Auto-registering modules from: {patterns}")

    # Path.glob only treats the final component as a pattern, so roots
    # containing [, ] or * are matched literally
    found: Dict[str, None] = {}
    for directory in MODULE_DIRECTORIES:
        for match in sorted(Path(root_dir, directory).glob(f"*{MODULE_EXTENSION}")):
            if match.name.startswith("_") or not match.is_file():
                continue
            found.setdefault(os.path.abspath(match), None)

    files = list(found)
    logger.info(f"Found {len(files)} module files to register")
    return files


def load_module(file_path: Union[str, Path]) -> Any:
    """
    Execute a module file and return its MODULE export.

    Each call builds a fresh module object that is never added to
    sys.modules, so loads do not share state. Errors raised while executing
    the file propagate to the caller.

    Returns:
        The value bound to MODULE, or MISSING if the file does not define it.
    """
    path = Path(file_path)
    qualified = f"mcp_starter._discovered.{get_module_type(path)}.{path.stem}"
    spec = importlib.util.spec_from_file_location(qualified, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load module from {path}")

    module: PyModule = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return getattr(module, EXPORT_NAME, MISSING)


def create_success_result(name: str, module_type: str) -> ModuleLoadResult:
    return ModuleLoadResult(success=True, name=name, type=module_type)


def create_error_result(name: str, error: Any) -> ModuleLoadResult:
    return ModuleLoadResult(success=False, name=name, error=error)


def is_successful_result(outcome: Outcome) -> bool:
    if isinstance(outcome, BaseException):
        return False
    return outcome.success


def is_failed_result(outcome: Outcome) -> bool:
    return not is_successful_result(outcome)


def count_results(outcomes: Sequence[Outcome]) -> Dict[str, int]:
    """Count successful and failed outcomes."""
    successful = sum(1 for outcome in outcomes if is_successful_result(outcome))
    return {"successful": successful, "failed": len(outcomes) - successful}


def format_registration_summary(successful: int, failed: int) -> str:
    return f"Registration complete: {successful} successful, {failed} failed"


def describe_error(error: Any) -> str:
    # Exceptions like CancelledError() have an empty message
    text = str(error)
    return text if text else repr(error)


def format_failure(outcome: Outcome) -> str:
    """One failure detail line: "<name>: <error>", or "Error: <reason>" when no module owns it."""
    if isinstance(outcome, BaseException):
        return f"Error: {describe_error(outcome)}"
    return f"{outcome.name}: {describe_error(outcome.error)}"


def log_failed_modules(outcomes: Sequence[Outcome], logger: Logger) -> None:
    """Log details about every failed outcome."""
    logger.error("Failed modules:")
    for outcome in outcomes:
        if is_failed_result(outcome):
            logger.error(f"  - {format_failure(outcome)}")
