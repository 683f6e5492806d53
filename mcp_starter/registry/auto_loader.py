"""
Auto Loader
Automatic module discovery and registration.

Convention over configuration: every ``*.py`` file in tools/, resources/ and
prompts/ that binds a RegisterableModule to ``MODULE`` is registered with the
MCP server. Broken modules are reported and skipped; they never abort the run.

    mcp_starter/
    ├── tools/
    │   ├── echo.py          registered
    │   └── helper.py        no MODULE export, reported as failed
    ├── resources/
    │   └── system_info.py   registered
    └── prompts/
        └── code_analyzer.py registered
"""

import asyncio
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from mcp.server.fastmcp import FastMCP

from mcp_starter.registry.helpers import (
    ModuleLoadResult,
    Outcome,
    count_results,
    find_module_files,
    format_registration_summary,
    get_root_dir,
    log_failed_modules,
)
from mcp_starter.registry.module_processor import process_module
from mcp_starter.utils.logger import Logger


@dataclass
class DiscoveryRun:
    """Outcomes of one discovery pass. Rebuilt on every call, never cached."""
    root_dir: Path
    outcomes: List[Outcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def successful(self) -> int:
        return count_results(self.outcomes)["successful"]

    @property
    def failed(self) -> int:
        return count_results(self.outcomes)["failed"]

    @property
    def results(self) -> List[ModuleLoadResult]:
        """Outcomes produced by the processor (join-level errors excluded)."""
        return [o for o in self.outcomes if isinstance(o, ModuleLoadResult)]

    def registered(self) -> List[Tuple[str, str]]:
        """(type, name) pairs of every module that registered successfully."""
        return [(r.type, r.name) for r in self.results if r.success]

    def duplicates(self) -> List[Tuple[str, str]]:
        """(type, name) pairs registered by more than one file."""
        counts = Counter(self.registered())
        return [pair for pair, count in counts.items() if count > 1]


async def auto_register_modules(
    server: FastMCP,
    root_dir: Optional[Union[str, Path]] = None,
    logger: Optional[Logger] = None,
) -> DiscoveryRun:
    """
    Discover and register all modules under the standard module directories.

    Args:
        server: FastMCP host every module registers itself against
        root_dir: Directory holding tools/, resources/ and prompts/.
            Defaults to the mcp_starter package directory.
        logger: Diagnostics sink. Defaults to the package logger.

    Returns:
        The DiscoveryRun with one outcome per candidate file.

    Raises:
        OSError: If the root directory cannot be read. This is the only way
        a run fails; individual module failures are reported, not raised.
    """
    logger = logger or Logger()
    root = Path(root_dir) if root_dir is not None else get_root_dir(__file__)

    files = find_module_files(root, logger)

    # All files start together; each outcome is captured, none cancels another
    outcomes = await asyncio.gather(
        *(process_module(file_path, server, logger) for file_path in files),
        return_exceptions=True,
    )

    run = DiscoveryRun(root_dir=root, outcomes=list(outcomes))
    logger.info(format_registration_summary(run.successful, run.failed))

    if run.failed > 0:
        log_failed_modules(run.outcomes, logger)

    # Duplicates are left to the host; FastMCP keeps the first registration
    for module_type, name in run.duplicates():
        logger.warning(f"Duplicate {module_type} name '{name}' registered by more than one module")

    return run
