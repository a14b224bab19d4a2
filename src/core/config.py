import os
from typing import Self
from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class ServerSettings(BaseModel):
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0").strip())
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "3000")))


class InstagramSettings(BaseModel):
    access_token: str = Field(default_factory=lambda: os.getenv("ACCESS_TOKEN", "").strip())
    graph_url: str = Field(
        default_factory=lambda: os.getenv("INSTAGRAM_GRAPH_URL", "https://graph.instagram.com").strip()
    )
    # Empty means the unversioned Graph endpoint
    api_version: str = Field(default_factory=lambda: os.getenv("INSTAGRAM_API_VERSION", "").strip())

    @property
    def base_url(self) -> str:
        root = self.graph_url.rstrip("/")
        return f"{root}/{self.api_version}" if self.api_version else root

    @model_validator(mode="after")
    def _validate(self) -> Self:
        if not self.access_token:
            raise ValueError("ACCESS_TOKEN environment variable must be set.")
        return self


class ForwardingSettings(BaseModel):
    webhook_url: str = Field(default_factory=lambda: os.getenv("ZAPIER_WEBHOOK_URL", "").strip())

    @model_validator(mode="after")
    def _validate(self) -> Self:
        if not self.webhook_url:
            raise ValueError("ZAPIER_WEBHOOK_URL environment variable must be set.")
        return self


class Settings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore", frozen=True)
    app_secret: str = Field(default_factory=lambda: os.getenv("APP_SECRET", "").strip())
    verify_token: str = Field(default_factory=lambda: os.getenv("VERIFY_TOKEN", "").strip())
    http_timeout_seconds: float = Field(default_factory=lambda: float(os.getenv("HTTP_TIMEOUT_SECONDS", "10")))
    server: ServerSettings = Field(default_factory=ServerSettings)
    instagram: InstagramSettings = Field(default_factory=InstagramSettings)
    forwarding: ForwardingSettings = Field(default_factory=ForwardingSettings)

    @model_validator(mode="after")
    def _validate(self) -> Self:
        if not self.app_secret:
            raise ValueError("APP_SECRET environment variable must be set.")
        if not self.verify_token:
            raise ValueError("VERIFY_TOKEN environment variable must be set.")
        if self.http_timeout_seconds <= 0:
            raise ValueError("HTTP_TIMEOUT_SECONDS must be a positive number.")
        return self


settings = Settings()
