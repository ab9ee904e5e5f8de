from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class GeneralSettings(BaseSettings):
    """Configuracion general"""

    ENVIRONMENT: str = Field(
        default="development",
        description="Entorno: development, staging, production"
    )
    DEBUG: bool = Field(
        default=True,
        description="Modo debug (verbose logging)"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Nivel de logging: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class InventarioAPISettings(BaseSettings):
    """Configuracion del cliente de la API de inventario"""

    INVENTARIO_BASE_URL: str = Field(
        default="http://127.0.0.1:4010",
        description="URL base de la API de productos"
    )
    INVENTARIO_TIMEOUT: float = Field(
        default=5.0,
        gt=0,
        description="Timeout total en segundos para cada request"
    )

    @field_validator("INVENTARIO_BASE_URL")
    @classmethod
    def validate_base_url(cls, v):
        """Remover trailing slash de la URL"""
        if v.endswith("/"):
            return v.rstrip("/")
        return v

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class MockServerSettings(BaseSettings):
    """Configuracion del servidor mock de productos"""

    MOCK_HOST: str = Field(
        default="127.0.0.1",
        description="Host del servidor mock"
    )
    MOCK_PORT: int = Field(
        default=4010,
        description="Puerto del servidor mock"
    )
    MOCK_SEED_DATA: bool = Field(
        default=True,
        description="Cargar productos de ejemplo al iniciar"
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class LoggingSettings(BaseSettings):
    """Configuracion de logging"""

    LOG_TO_FILE: bool = Field(
        default=False,
        description="Escribir logs tambien en logs/<servicio>.log"
    )
    LOG_RETENTION_DAYS: int = Field(
        default=1,
        ge=1,
        description="Dias de logs rotados a mantener"
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class Settings(BaseSettings):
    """
    Clase principal que agrupa todas las configuraciones
    Uso: from config.settings import settings
         settings.inventario.INVENTARIO_BASE_URL, settings.LOG_LEVEL, etc
    """

    # Subconfigurations
    general: GeneralSettings = GeneralSettings()
    inventario: InventarioAPISettings = InventarioAPISettings()
    mock_server: MockServerSettings = MockServerSettings()
    logging: LoggingSettings = LoggingSettings()

    # Shortcuts para acceso directo
    @property
    def ENVIRONMENT(self) -> str:
        return self.general.ENVIRONMENT

    @property
    def DEBUG(self) -> bool:
        return self.general.DEBUG

    @property
    def LOG_LEVEL(self) -> str:
        return self.general.LOG_LEVEL

    @property
    def INVENTARIO_BASE_URL(self) -> str:
        return self.inventario.INVENTARIO_BASE_URL

    @property
    def INVENTARIO_TIMEOUT(self) -> float:
        return self.inventario.INVENTARIO_TIMEOUT

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Singleton instance
@lru_cache()
def get_settings() -> Settings:
    """
    Obtener instancia singleton de Settings
    Uso: from config.settings import get_settings
         settings = get_settings()
    """
    return Settings()


# Instancia global (para imports directos)
settings = get_settings()
