"""
Shared pytest fixtures for MCP Server Starter tests

Provides a mock logger, a recording host and a helper that lays out
tools/, resources/ and prompts/ module files under a temporary root.
"""

import sys
import textwrap
from pathlib import Path
import pytest
from unittest.mock import Mock
from typing import Optional

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# ============================================================================
# Module Source Templates
# ============================================================================

def module_source(name: str, module_type: str = "tool", register_body: Optional[str] = None,
                  is_async: bool = False) -> str:
    """
    Source for a well-formed module file.

    By default register() calls ``server.registered(<type>, <name>)`` so tests
    can count invocations on a Mock host.
    """
    body = register_body or f"server.registered({module_type!r}, {name!r})"
    keyword = "async def" if is_async else "def"
    return textwrap.dedent(f"""\
        from mcp_starter.registry.types import ModuleType, RegisterableModule


        {keyword} register(server):
            {body}


        MODULE = RegisterableModule(
            type=ModuleType({module_type!r}),
            name={name!r},
            description="test module {name}",
            register=register,
        )
        """)


# ============================================================================
# Mock Helper Classes
# ============================================================================

class ModuleTree:
    """
    Writes module files under a temporary discovery root.

    Usage:
        tree = ModuleTree(tmp_path)
        tree.add("tools/echo.py", module_source("echo"))
        tree.add("resources/bad.py", 'MODULE = "not a module"')
        run = await auto_register_modules(host, root_dir=tree.root, logger=logger)
    """

    def __init__(self, root: Path):
        self.root = root

    def add(self, relative_path: str, source: str) -> Path:
        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source)
        return path

    def remove(self, relative_path: str) -> None:
        (self.root / relative_path).unlink()


# ============================================================================
# Base Fixtures
# ============================================================================

@pytest.fixture
def logger():
    """
    Standard mock logger for all tests.
    """
    from mcp_starter.utils.logger import Logger
    return Mock(spec=Logger)


@pytest.fixture
def host():
    """
    Opaque host double: modules call ``server.registered(type, name)`` on it.
    """
    return Mock()


@pytest.fixture
def module_tree(tmp_path):
    """Empty discovery root; use .add() to populate it."""
    return ModuleTree(tmp_path)


@pytest.fixture
def fastmcp():
    """Fresh FastMCP host for registering the bundled modules."""
    from mcp.server.fastmcp import FastMCP
    return FastMCP("test")


def logged(mock_method) -> list:
    """Messages passed to a mocked logger method, in call order."""
    return [call.args[0] for call in mock_method.call_args_list]
