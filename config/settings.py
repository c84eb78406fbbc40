from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Global configuration for MoneyBuddy."""

    ANTHROPIC_API_KEY: str = ""
    MODEL_CHAT: str = "claude-sonnet-4-20250514"
    MAX_TOKENS: int = 1000

    # Completion retries (rate limit / timeout only)
    MAX_RETRIES: int = 3
    RETRY_BASE_DELAY: float = 1.0  # seconds, doubled per attempt

    # Assistant turns required before the feedback panel may appear
    FEEDBACK_MIN_ASSISTANT_TURNS: int = 3

    LOG_PATH: str = "data/moneybuddy.log"
    LOG_LEVEL: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }
