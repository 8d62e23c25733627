"""Input models for Kairos MCP tools."""

from pydantic import BaseModel, ConfigDict, Field

from kairos_mcp.enums import BankruptcyOption, ResponseFormat


class PlanInput(BaseModel):
    """Input model for generating today's plan."""

    model_config = ConfigDict(str_strip_whitespace=True)

    user_id: int = Field(..., description="ID of the user to plan for", ge=1)
    energy: int | None = Field(
        default=None,
        description="Current energy level 1-5; defaults to the level stored on the user profile",
        ge=1,
        le=5,
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class LoadInput(BaseModel):
    """Input model for the load/overload status."""

    model_config = ConfigDict(str_strip_whitespace=True)

    user_id: int = Field(..., description="ID of the user to check", ge=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )


class BankruptcyInput(BaseModel):
    """Input model for executing a bankruptcy strategy."""

    model_config = ConfigDict(str_strip_whitespace=True)

    user_id: int = Field(..., description="ID of the overloaded user", ge=1)
    option: BankruptcyOption = Field(
        ...,
        description="HARD archives low-value tasks, SOFT clears unfixed schedules, MANUAL only explains",
    )


class StatsInput(BaseModel):
    """Input model for weekly analytics."""

    model_config = ConfigDict(str_strip_whitespace=True)

    user_id: int = Field(..., description="ID of the user", ge=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise' or 'json'",
    )
