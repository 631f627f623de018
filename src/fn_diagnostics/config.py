"""Runtime configuration for fn-diagnostics."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fn_diagnostics.models import HostInfo


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="FN_DIAGNOSTICS_", env_file=".env", extra="ignore")

    app_name: str = "fn-diagnostics"
    log_level: str = "WARNING"
    sink_backend: str = Field(
        default="console",
        description="Where encoded lines go: 'console' (stdout) or 'file' (per-category logs).",
    )
    log_dir: str = Field(
        default="/var/log/functionsLogs",
        description="Directory holding one <category>.log file per event category.",
    )
    host_name: str = ""
    host_version: str = ""

    def host_info(self) -> HostInfo:
        return HostInfo(host_name=self.host_name, host_version=self.host_version)


settings = Settings()
