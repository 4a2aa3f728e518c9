"""
Utility to load and format prompt templates from markdown files

This keeps prompts clean and separated from code logic.
"""

from pathlib import Path
from typing import Any

PROMPT_MODES = ("agents", "shared")


class PromptLoader:
    """Load and format prompt templates"""

    def __init__(self, prompts_dir: str = "prompts"):
        """
        Initialize prompt loader

        Args:
            prompts_dir: Root directory containing prompt templates
        """
        # Get absolute path to prompts directory
        self.prompts_dir = Path(__file__).parent.parent / prompts_dir

    def load(
        self,
        template_name: str,
        mode: str = "shared",
        **kwargs: Any
    ) -> str:
        """
        Load and format a prompt template

        Args:
            template_name: Name of template file (without .md extension)
            mode: "agents" (per-agent system prompts) or "shared"
            **kwargs: Variables to substitute in template

        Returns:
            Formatted prompt string

        Examples:
            loader = PromptLoader()

            # Vazir system prompt focused on one quadrant
            prompt = loader.load(
                "vazir",
                mode="agents",
                focus="Focus specifically on threats analysis."
            )

            # SWOT request
            prompt = loader.load(
                "swot_analysis",
                mode="shared",
                question="Should I move into product management?",
                current_role="Senior Software Engineer",
                target_role="Product Manager"
            )
        """
        # Build path to template file
        template_path = self.prompts_dir / mode / f"{template_name}.md"

        if not template_path.exists():
            raise FileNotFoundError(
                f"Prompt template not found: {template_path}\n"
                f"Available modes: {', '.join(PROMPT_MODES)}"
            )

        # Read template
        with open(template_path, "r", encoding="utf-8") as f:
            template = f.read()

        # Format template with provided variables
        try:
            formatted = template.format(**kwargs)
            return formatted
        except KeyError as e:
            raise ValueError(
                f"Missing required variable '{e.args[0]}' for template '{template_name}' in mode '{mode}'"
            )
