# cancer_api/api/predict_routes.py
import logging

from flask import Blueprint, request, jsonify, current_app

from cancer_api.core.errors import ValidationError
from cancer_api.services.prediction_service import predict_and_save
from cancer_api.utils.image_io import MAX_IMAGE_BYTES

log = logging.getLogger(__name__)

predict_bp = Blueprint("predict", __name__)

MESSAGE_TOO_LARGE = f"Payload content length greater than maximum allowed: {MAX_IMAGE_BYTES}"
MESSAGE_MISSING_IMAGE = "Missing image file"
MESSAGE_PREDICTION_FAILED = "An error occurred while making the prediction"


def fail(message: str, status_code: int):
    return jsonify({"status": "fail", "message": message}), status_code


def _read_image_bytes() -> bytes:
    """
    Ambil bytes dari field "image" (multipart/form-data).
    Baca maksimal MAX_IMAGE_BYTES + 1 supaya file kebesaran ketahuan tanpa baca semuanya.
    """
    file = request.files.get("image")
    if file is None:
        raise ValidationError(MESSAGE_MISSING_IMAGE, 400)

    image_bytes = file.read(MAX_IMAGE_BYTES + 1)
    if len(image_bytes) > MAX_IMAGE_BYTES:
        raise ValidationError(MESSAGE_TOO_LARGE, 413)
    return image_bytes


@predict_bp.route("/predict", methods=["POST"])
def predict():
    """
    Endpoint prediksi:
    - menerima file "image" (multipart/form-data, maks 1.000.000 bytes)
    - 201 + record kalau sukses, 413 kalau kebesaran, 400 kalau gagal
    """
    try:
        image_bytes = _read_image_bytes()
    except ValidationError as e:
        log.info("POST /predict rejected: %s", e.message)
        return fail(e.message, e.status_code)

    ctx = current_app.extensions["cancer_api"]
    try:
        outcome = predict_and_save(image_bytes, ctx.model, ctx.store)
    except Exception:
        log.exception("POST /predict failed with unexpected error")
        return fail(MESSAGE_PREDICTION_FAILED, 400)

    if not outcome.ok:
        # detail error hanya di log, client cukup pesan generik
        log.error("POST /predict failed: %r", outcome.error, exc_info=outcome.error)
        return fail(MESSAGE_PREDICTION_FAILED, 400)

    log.info("POST /predict success id=%s result=%s", outcome.record.id, outcome.record.result)
    return jsonify({
        "status": "success",
        "message": outcome.message,
        "data": outcome.record.to_dict(),
    }), 201
