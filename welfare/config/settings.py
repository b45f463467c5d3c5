from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "welfare"
    db_username: str = "welfare"
    db_password: str = "secret"

    storage_backend: str = "local"
    storage_root: str = "/app/files"
    storage_cache_control: str = "3600"
    storage_max_document_bytes: int = 10 * 1024 * 1024
    application_documents_bucket: str = "application-documents"
    grievance_documents_bucket: str = "grievance-documents"

    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_timeout_seconds: int = 30

    store_max_records: int = 200

    assistant_provider: str = "rules"
    assistant_language: str = "en"
    assistant_openai_api_key: str = ""
    assistant_openai_model_name: str = ""
    assistant_openai_base_url: str | None = None
    assistant_openai_timeout_seconds: int = 30
    assistant_openai_temperature: float = 0.3
