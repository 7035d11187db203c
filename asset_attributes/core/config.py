import json
from typing import Annotated, List
from pydantic_settings import BaseSettings, NoDecode
from pydantic import field_validator

class Settings(BaseSettings):
    # API Settings
    PROJECT_NAME: str = "Asset Attributes"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # Database Settings (only the preference table lives here)
    SQLALCHEMY_DATABASE_URI: str = "sqlite:///./asset_attributes.db"

    # CORS Settings; NoDecode hands the raw env string to the validator
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = ["*"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, str):
            return json.loads(v)
        elif isinstance(v, list):
            return v
        raise ValueError(v)

    # Logging Settings
    LOG_LEVEL: str = "INFO"

    @property
    def DATABASE_URL(self) -> str:
        """Get full database URL."""
        return self.SQLALCHEMY_DATABASE_URI

    model_config = {
        "case_sensitive": True,
        "env_file": ".env",
    }

settings = Settings()
