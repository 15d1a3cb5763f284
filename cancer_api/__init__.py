# cancer_api/__init__.py
import logging
from dataclasses import dataclass
from typing import Any

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge

from .core.config import Config
from .api.predict_routes import predict_bp, MESSAGE_TOO_LARGE
from .api.health_routes import health_bp
from .services.save_service import PredictionStore
from .core.errors import PersistenceError
from .utils.image_io import MAX_IMAGE_BYTES

log = logging.getLogger(__name__)

# Ruang untuk boundary + header multipart di atas batas gambar
MULTIPART_OVERHEAD_BYTES = 64 * 1024


@dataclass(frozen=True)
class AppContext:
    """Dependency yang dishare semua request. Dibuat sekali, read-only."""

    model: Any
    store: PredictionStore


def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(model=None, store=None):
    """
    Bangun Flask app.
    - model: kalau None, di-load dari Config.MODEL_URL (ModelLoadError kalau gagal)
    - store: kalau None, PredictionStore dari Config.database_url()
      (database mati saat startup hanya di-log, tidak fatal)
    Model di-load SEBELUM app dikembalikan, jadi server tidak pernah jalan tanpa model.
    """
    setup_logging(Config.LOG_LEVEL)

    if model is None:
        from .ml.classification.model_loader import load_classification_model
        model = load_classification_model()

    if store is None:
        store = PredictionStore()
        try:
            store.create_tables()
        except PersistenceError as e:
            # bukan fatal: request /predict akan gagal 400 sampai database bisa dihubungi
            log.warning("Database not reachable at startup, tables not created: %s", e)

    app = Flask(__name__)
    app.config.from_object(Config)
    app.config["MAX_CONTENT_LENGTH"] = MAX_IMAGE_BYTES + MULTIPART_OVERHEAD_BYTES
    app.extensions["cancer_api"] = AppContext(model=model, store=store)

    CORS(app, resources={r"/*": {"origins": Config.CORS_ORIGINS}})

    @app.errorhandler(RequestEntityTooLarge)
    def _too_large(_e):
        return jsonify({"status": "fail", "message": MESSAGE_TOO_LARGE}), 413

    app.register_blueprint(predict_bp)
    app.register_blueprint(health_bp)

    return app
