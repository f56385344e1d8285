"""
Configuración compartida del proyecto.
Centraliza todas las variables de entorno y configuraciones.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        extra='ignore'  # Ignorar campos extra del .env
    )

    PROJECT_NAME: str = "Newsdesk"
    API_V1_STR: str = "/api/v1"
    DATABASE_URL: str = "sqlite:///./newsdesk.db"  # Fallback por defecto

    # Fichero JSON para la importación masiva inicial
    NEWS_SEED_FILE: str = "converted_news_data.json"
    SEED_ON_STARTUP: bool = False

    # Cuenta de administrador inicial (vacío = usar valores por defecto)
    ADMIN_EMAIL: str = ""
    ADMIN_USERNAME: str = ""
    ADMIN_PASSWORD: str = ""

# Instancia global compartida
settings = Settings()
