"""
Code Analyzer Prompt
Asks the model to review code for security, performance, style or bugs.
"""

from typing import Annotated, Literal

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from mcp_starter.registry.types import ModuleType, RegisterableModule

DESCRIPTION = "Analyze code for security, performance, style issues, and bugs"

Language = Literal["typescript", "javascript", "python", "rust", "go", "java"]
AnalysisType = Literal["security", "performance", "style", "bugs", "all"]


def code_analyzer(
    code: Annotated[str, Field(description="Code to analyze")],
    language: Annotated[Language, Field(description="Programming language")],
    analysis_type: Annotated[AnalysisType, Field(description="Type of analysis")] = "all",
    verbose: Annotated[str, Field(description="Include detailed explanations (yes/no)")] = "no",
) -> str:
    code = code.strip()
    if not code:
        raise ValueError("Code cannot be empty")

    if analysis_type == "all":
        analysis = "Analyze this code for security issues, performance problems, style violations, and bugs"
    else:
        analysis = f"Analyze this code specifically for {analysis_type} issues"

    expanded = verbose.strip().lower() == "yes"
    lines = [
        f"{analysis}.",
        "",
        f"Language: {language}",
        f"Verbose: {'Yes, provide detailed explanations' if expanded else 'No, be concise'}",
        "",
        "Code to analyze:",
        f"```{language}",
        code,
        "```",
        "",
        "Please provide:",
        "1. Issues found (if any)",
        "2. Severity level for each issue",
        "3. Recommended fixes",
    ]
    if expanded:
        lines.append("4. Detailed explanation of why each issue matters")
    return "\n".join(lines)


def register(server: FastMCP) -> None:
    server.prompt(name="code-analyzer", description=DESCRIPTION)(code_analyzer)


MODULE = RegisterableModule(
    type=ModuleType.PROMPT,
    name="code-analyzer",
    description="Analyze code for issues and improvements",
    register=register,
)
