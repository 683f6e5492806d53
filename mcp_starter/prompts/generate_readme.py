"""
Generate README Prompt
"""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from mcp_starter.registry.types import ModuleType, RegisterableModule

DESCRIPTION = "Generate a README file for a project"

SECTIONS = (
    "Project title and description",
    "Installation instructions",
    "Usage examples",
    "Features list",
    "Contributing guidelines",
    "License information",
)


def generate_readme(
    project_type: Annotated[str, Field(description="Type of project, e.g. python or cli-tool")],
    style: Annotated[str, Field(description="README style: minimal, standard, comprehensive or detailed")] = "standard",
) -> str:
    sections = "\n".join(f"- {section}" for section in SECTIONS)
    return (
        f"Generate a professional README.md file for a {project_type} project with {style} style.\n\n"
        f"Provide a comprehensive README with the following sections:\n{sections}"
    )


def register(server: FastMCP) -> None:
    server.prompt(name="generate-readme", description=DESCRIPTION)(generate_readme)


MODULE = RegisterableModule(
    type=ModuleType.PROMPT,
    name="generate-readme",
    description=DESCRIPTION,
    register=register,
)
