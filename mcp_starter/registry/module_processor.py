"""
Module Processor
Load, validate and register a single module file.
"""

import inspect
from pathlib import Path
from typing import Union

from mcp.server.fastmcp import FastMCP

from mcp_starter.registry.helpers import (
    MISSING,
    ModuleLoadResult,
    create_error_result,
    create_success_result,
    format_module_info,
    get_module_name,
    get_module_type,
    load_module,
)
from mcp_starter.registry.types import parse_registerable_module
from mcp_starter.utils.logger import Logger


async def process_module(file_path: Union[str, Path], server: FastMCP, logger: Logger) -> ModuleLoadResult:
    """
    Process a single module file and register it with the MCP server.

    Every failure, whether the file does not load or calls sys.exit(), has no
    MODULE export, has the wrong shape or its register() raises, comes back as
    a failed ModuleLoadResult. Neither Exception nor SystemExit escapes, so one broken
    module never stops its siblings.
    """
    module_name = get_module_name(file_path)

    try:
        module_type = get_module_type(file_path)
        logger.info(f"Loading {format_module_info(module_type, module_name)}...")

        exported = load_module(file_path)

        if exported is MISSING:
            logger.error(f"✗ Module {module_name} does not have a MODULE export")
            return create_error_result(module_name, "Missing default export")

        parsed = parse_registerable_module(exported)
        if not parsed.valid:
            logger.error(
                f"✗ Module {module_name} does not export a valid RegisterableModule ({parsed.reason})"
            )
            return create_error_result(module_name, "Invalid RegisterableModule format")

        registerable = parsed.module
        outcome = registerable.register(server)
        if inspect.isawaitable(outcome):
            await outcome

        logger.info(f"✓ Registered {registerable.type.value}: {registerable.name}")
        return create_success_result(registerable.name, registerable.type.value)

    # A module calling sys.exit() fails alone; KeyboardInterrupt and
    # CancelledError still propagate
    except (Exception, SystemExit) as error:
        logger.error(f"✗ Failed to load {module_name}: {error!r}")
        return create_error_result(module_name, error)
