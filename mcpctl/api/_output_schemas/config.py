"""Output schemas for config commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")
    git_sha: str = Field(..., description="Git commit SHA (short), empty string if not available")
    full_version: str = Field(..., description="Full version string (version + git_sha if available)")


register_output_schema("config", "version", ConfigVersionOutput)
