from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Central configuration for the JWT inspector.
    Values can be overridden via JWT_INSPECTOR_* environment variables or a .env file.
    """

    app_name: str = "JWT Inspector – Decode & Verify"
    environment: str = "dev"

    log_level: str = "INFO"

    # Imported public keys kept per PEM text
    key_cache_size: int = 128

    # Tokens longer than this are refused by the HTTP layer
    max_token_length: int = 16_384

    class Config:
        env_file = ".env"  # if a .env file exists, it will be read automatically
        env_prefix = "JWT_INSPECTOR_"


# create a single settings instance we can import everywhere
settings = Settings()
