"""Configuration management for Broadcastt."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, SecretStr, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

AUTH_VERSION = "1.0"
CLUSTER_DOMAIN_SUFFIX = ".broadcastt.xyz"
MAX_CHANNELS_PER_EVENT = 100
DEFAULT_HTTP_PORT = 80
DEFAULT_HTTPS_PORT = 443


class BroadcasttConfig(BaseSettings):
    """
    Configuration for Broadcastt client.

    Values are loaded from (in order of precedence):
    1. Constructor arguments
    2. Environment variables (prefixed with BROADCASTT_)
    3. .env file
    4. Default values

    Credentials are frozen once the config is built. Endpoint settings may be
    changed afterwards and are validated on assignment.
    """

    model_config = SettingsConfigDict(
        env_prefix="BROADCASTT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    # Credentials
    app_id: str = Field(..., frozen=True, description="Application ID")
    app_key: str = Field(..., frozen=True, description="Application key")
    app_secret: SecretStr = Field(..., frozen=True, description="Application secret")

    # Endpoint settings
    cluster: str = Field(default="eu", description="Cluster name")
    host: str = Field(
        default=None,
        validate_default=True,
        description="API hostname without scheme (default: {cluster}.broadcastt.xyz)",
    )
    scheme: Literal["http", "https"] = Field(default="http", description="HTTP scheme")
    port: int = Field(default=DEFAULT_HTTP_PORT, ge=1, le=65535, description="HTTP port")
    base_path: str = Field(
        default="/apps/{appId}",
        description="Base path of API calls, '{appId}' is replaced with the app ID",
    )
    timeout: float = Field(default=30, gt=0, description="HTTP timeout (seconds)")

    # Library identification
    client_name: str = Field(default="broadcastt-python", description="Client identifier")
    client_version: str = Field(default="0.1.0", description="Client version")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("app_id", mode="before")
    @classmethod
    def _app_id_to_str(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("host", mode="before")
    @classmethod
    def _default_host(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return f"{info.data.get('cluster', 'eu')}{CLUSTER_DOMAIN_SUFFIX}"
        return value

    def use_cluster(self, cluster: str) -> None:
        """Point the host at the given cluster."""
        self.cluster = cluster
        self.host = f"{cluster}{CLUSTER_DOMAIN_SUFFIX}"

    def use_tls(self) -> None:
        """Switch to https, moving the port to 443 unless it was customised."""
        self.scheme = "https"
        if self.port == DEFAULT_HTTP_PORT:
            self.port = DEFAULT_HTTPS_PORT

    def build_url(self) -> str:
        """Construct the base HTTP URL, without path."""
        return f"{self.scheme}://{self.host}:{self.port}"
