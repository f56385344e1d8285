import logging
import sys
from pathlib import Path

def setup_logging():
    """
    Configura el sistema de logging para toda la aplicación.
    Logs se mostrarán en consola y se guardarán en archivo.
    """
    # Crear directorio de logs si no existe
    logs_dir = Path("logs")
    logs_dir.mkdir(exist_ok=True)

    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=logging.INFO,
        format=log_format,
        datefmt=date_format,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(
                logs_dir / "newsdesk.log",
                mode='a',
                encoding='utf-8'
            )
        ]
    )

    logger = logging.getLogger("newsdesk")
    logger.setLevel(logging.INFO)

    return logger

def get_logger(name: str):
    """
    Obtiene un logger con el nombre especificado.

    Args:
        name: Nombre del logger (generalmente __name__)

    Returns:
        Logger configurado
    """
    return logging.getLogger(f"newsdesk.{name}")
