"""Prompt templates shipped with the server."""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from lancedb_mcp.errors import PromptError


@dataclass
class PromptArgument:
    """Argument accepted by a prompt template."""

    name: str
    description: str = ""
    required: bool = True


@dataclass
class PromptTemplate:
    """A named prompt with ``{argument}`` placeholders."""

    name: str
    description: str
    template: str
    arguments: list[PromptArgument] = field(default_factory=list)

    def render(self, arguments: dict[str, str] | None = None) -> str:
        """Fill the template's placeholders.

        Args:
            arguments: Values for the prompt arguments

        Returns:
            Rendered prompt text

        Raises:
            PromptError: If a required argument is missing
        """
        values = dict(arguments or {})
        for arg in self.arguments:
            if arg.name not in values:
                if arg.required:
                    raise PromptError(f"Missing required argument '{arg.name}' for prompt {self.name}")
                values[arg.name] = ""
        return self.template.format_map(values)


def load_prompts(path: str | Path | None = None) -> dict[str, PromptTemplate]:
    """Load prompt templates from YAML.

    Args:
        path: YAML file to read; defaults to the packaged ``prompts.yml``

    Returns:
        Dictionary mapping prompt names to templates
    """
    if path is None:
        text = resources.files("lancedb_mcp.mcp").joinpath("prompts.yml").read_text(encoding="utf-8")
    else:
        text = Path(path).read_text(encoding="utf-8")

    data: dict[str, Any] = yaml.safe_load(text) or {}

    prompts: dict[str, PromptTemplate] = {}
    for name, entry in data.items():
        prompts[name] = PromptTemplate(
            name=name,
            description=entry.get("description", ""),
            template=entry["template"],
            arguments=[PromptArgument(**arg) for arg in entry.get("arguments", [])],
        )
    return prompts


def render_prompt(
    prompts: dict[str, PromptTemplate],
    name: str,
    arguments: dict[str, str] | None = None,
) -> str:
    """Render a prompt by name.

    Raises:
        PromptError: If the prompt is unknown or an argument is missing
    """
    if name not in prompts:
        raise PromptError(f"Unknown prompt: {name}")
    return prompts[name].render(arguments)
