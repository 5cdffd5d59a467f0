from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GHISSUES_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_scheme: str = "http"
    api_host: str = "github.com"
    api_version: str = "v2"
    timeout_seconds: float = 5.0
    # Percent-escape user/repo/label/term segments before building URLs.
    escape_path_segments: bool = True

    @property
    def api_root(self) -> str:
        return f"{self.api_scheme}://{self.api_host}/api/{self.api_version}/json"


settings = Settings()
