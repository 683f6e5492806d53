"""
Registry Module
Filesystem discovery and registration of tools, resources and prompts.
"""

from .types import (
    ModuleType,
    RegisterableModule,
    ModuleParseResult,
    parse_registerable_module,
    is_registerable_module,
)
from .helpers import ModuleLoadResult, MISSING, EXPORT_NAME
from .module_processor import process_module
from .auto_loader import DiscoveryRun, auto_register_modules

__all__ = [
    # Module contract
    "ModuleType",
    "RegisterableModule",
    "ModuleParseResult",
    "parse_registerable_module",
    "is_registerable_module",
    
    # Results
    "ModuleLoadResult",
    "DiscoveryRun",
    "MISSING",
    "EXPORT_NAME",
    
    # Discovery
    "process_module",
    "auto_register_modules",
]
