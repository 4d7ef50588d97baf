from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from ISTHMUS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ISTHMUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Solver Limits
    max_grid_cells: int = Field(
        default=1_000_000, gt=0, description="Largest grid (width * height) the API will solve"
    )


# Instantiate singleton settings object
settings = Settings()
