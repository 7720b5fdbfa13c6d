from pydantic import BaseModel, Field, validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class ResolverConfig(BaseModel):
    api_url: str = Field(default="https://www.tikwm.com/api/", description="Upstream metadata API endpoint")
    timeout_seconds: float = Field(default=15.0, gt=0, description="Upstream metadata request timeout")
    default_title: str = Field(default="TikTok Video", description="Title used when upstream title is empty")

class RelayConfig(BaseModel):
    timeout_seconds: float = Field(default=60.0, gt=0, description="Media fetch timeout in seconds")
    default_filename: str = Field(default="tiktok_video.mp4", description="Filename used when none is given")
    media_type: str = Field(default="video/mp4", description="Content type of relayed media")
    cache_max_age: int = Field(default=3600, ge=0, description="Cache-Control max-age for relayed media")
    max_concurrent: int = Field(default=10, ge=1, le=100, description="Max concurrent relay transfers")
    stream_passthrough: bool = Field(default=False, description="Stream media chunks instead of buffering")

class SecurityConfig(BaseModel):
    enable_ssrf_protection: bool = Field(default=True, description="Enable SSRF protection on relay targets")
    allow_private_ips: bool = Field(default=False, description="Allow private IP ranges")
    allow_localhost: bool = Field(default=False, description="Allow localhost access")

class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="[%(request_id)s] %(message)s", description="Log format")
    enable_rich: bool = Field(default=True, description="Enable rich console logging")

    @validator('level')
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

class I18nConfig(BaseModel):
    default_locale: str = Field(default="en", description="Default locale")
    supported_locales: list = Field(default=["en", "pt"], description="Supported locales")

class ApiConfig(BaseModel):
    title: str = Field(default="TikTok Download API", description="API title")
    description: str = Field(default="Resolve TikTok links and relay video downloads", description="API description")
    version: str = Field(default="1.0.0", description="API version")
    cors_origins: list = Field(default=["*"], description="CORS allowed origins")
    debug: bool = Field(default=False, description="Enable debug mode")
    user_agent: Optional[str] = Field(default=None, description="Override browser User-Agent sent upstream")

class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TIKDL_", env_nested_delimiter="__")

    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    relay: RelayConfig = Field(default_factory=RelayConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    i18n: I18nConfig = Field(default_factory=I18nConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

config = Config()
