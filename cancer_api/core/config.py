# cancer_api/core/config.py
import os
from dotenv import load_dotenv

# Load .env sekali di awal aplikasi
load_dotenv()


class Config:
    # =========================
    # APP / SERVER
    # =========================
    HOST = os.environ.get("HOST", "localhost")
    PORT = int(os.environ.get("PORT", 3000))

    # Origin yang diizinkan (default semua, sama seperti server lama)
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # BASE_DIR = root project (folder yang berisi cancer_api/)
    BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))

    # =========================
    # MODEL
    # =========================
    # Path lokal (file .keras / .h5 atau folder SavedModel) atau URL http(s) ke file .keras / .h5
    MODEL_URL = os.environ.get("MODEL_URL", "")

    # Folder cache kalau MODEL_URL berupa URL
    MODEL_CACHE_DIR = os.environ.get(
        "MODEL_CACHE_DIR",
        os.path.join(BASE_DIR, "models"),
    )

    # =========================
    # DATABASE (MySQL default)
    # =========================
    DATABASE_URL = os.environ.get("DATABASE_URL", "")

    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = os.environ.get("DB_PORT", "3306")  # default MySQL
    DB_NAME = os.environ.get("DB_NAME", "cancer_db")
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")

    @classmethod
    def database_url(cls) -> str:
        """
        SQLAlchemy connection string.
        DATABASE_URL menang kalau diset, selain itu dirakit dari DB_*.
        """
        if cls.DATABASE_URL:
            return cls.DATABASE_URL
        return (
            f"mysql+pymysql://{cls.DB_USER}:{cls.DB_PASSWORD}"
            f"@{cls.DB_HOST}:{cls.DB_PORT}/{cls.DB_NAME}"
        )
