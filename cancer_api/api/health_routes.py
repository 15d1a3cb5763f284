# cancer_api/api/health_routes.py
from flask import Blueprint, jsonify

health_bp = Blueprint("health", __name__)


@health_bp.route("/health", methods=["GET"])
def health():
    # App hanya bisa dibuat kalau model sudah ter-load, jadi cukup "ok"
    return jsonify({"status": "ok"}), 200
