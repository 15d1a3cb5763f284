# cancer_api/services/prediction_service.py
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from cancer_api.core.errors import PredictionError
from cancer_api.models.prediction import PredictionRecord
from cancer_api.ml.classification.predict import predict_cancer_class
from cancer_api.services.result_policy import apply_policy
from cancer_api.utils.image_io import load_image_from_bytes


@dataclass(frozen=True)
class PredictionOutcome:
    """
    Hasil pipeline: sukses (record + message) atau gagal (error).
    Route yang menerjemahkan ini ke response HTTP.
    """

    record: PredictionRecord | None = None
    message: str | None = None
    error: PredictionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def new_prediction_id() -> str:
    # UUID4 = 128-bit random, tidak pernah dari input client
    return str(uuid.uuid4())


def predict_and_save(image_bytes: bytes, model, store) -> PredictionOutcome:
    """
    Dipanggil oleh endpoint /predict setelah validasi ukuran:
    - preprocess image
    - panggil model klasifikasi
    - tentukan suggestion + message
    - simpan ke database
    """
    try:
        batch = load_image_from_bytes(image_bytes)
        result = predict_cancer_class(model, batch)
        suggestion, message = apply_policy(result)

        record = PredictionRecord(
            id=new_prediction_id(),
            result=result.label,
            suggestion=suggestion,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        store.save(record)
    except PredictionError as e:
        return PredictionOutcome(error=e)

    return PredictionOutcome(record=record, message=message)
