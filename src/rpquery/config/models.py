"""Pydantic models for rpquery configuration."""

from pydantic import BaseModel, Field


class ConnectionConfig(BaseModel):
    """Connection settings for a ReportPortal server.

    Attributes:
        url: Base URL of the server (e.g. "https://rp.example.com").
        project: Project name, used as a path segment in every request.
        token: User API token (see the user profile page), sent as a
            bearer credential.
        timeout: Timeout in seconds for each request.
    """

    url: str = Field(min_length=1)
    project: str = Field(min_length=1)
    token: str = Field(min_length=1)
    timeout: float = Field(default=30.0, ge=1.0)

    @property
    def base_url(self) -> str:
        return self.url.rstrip("/")
