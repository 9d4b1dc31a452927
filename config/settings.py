from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	FIRST_API_BASE_URL: str = 'https://api1.example.com'
	SECOND_API_BASE_URL: str = 'https://api2.example.com'
	THIRD_API_BASE_URL: str = 'https://api3.example.com'

	# Seconds, applied per provider HTTP call
	PROVIDER_TIMEOUT: float = 10.0

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_DIRECTORY: str | None = None

	# Application
	APP_NAME: str = 'Exchange Rate Comparator API'
	DEBUG: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
