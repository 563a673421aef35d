# skycast/config/logging_config.py
import logging
import logging.handlers
from pathlib import Path

LOGS_DIR = Path(__file__).parent.parent.parent / "logs"

def setup_logging(log_level: str = "INFO", log_dir: Path = LOGS_DIR):
    """Настраивает глобальное логирование с ротацией."""
    log_dir.mkdir(exist_ok=True)
    log_file = log_dir / "app.log"

    # Корневой логгер
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)-18s | %(funcName)-20s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Файл с ротацией: 10 МБ, 5 файлов
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

    # Подавляем шум сторонних библиотек: Telegram, requests, Gemini SDK
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("telegram").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("google.generativeai").setLevel(logging.WARNING)
    logging.getLogger("google.api_core").setLevel(logging.WARNING)
    logging.getLogger("grpc").setLevel(logging.ERROR)

    logging.info("🔧 Логирование инициализировано")
    return log_file
