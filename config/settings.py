from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Hosted backend (REST)
    supabase_url: str = ""
    supabase_anon_key: str = ""
    request_timeout_seconds: float = 10.0

    # Plan My Move defaults
    default_commute_max: int = 30
    browse_commute_max: int = 60
    top_hub_count: int = 5
    include_demo_listings: bool = True

    # Logging
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def is_backend_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)
