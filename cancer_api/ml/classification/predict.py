# cancer_api/ml/classification/predict.py
from dataclasses import dataclass

import numpy as np

from cancer_api.core.errors import InferenceError

# Urutan harus sama dengan urutan output model
CLASSES = ("Cancer", "Non Cancer")


@dataclass(frozen=True)
class ClassificationResult:
    label: str
    confidence_score: float  # persen, 0..100


def predict_cancer_class(model, preprocessed_batch: np.ndarray) -> ClassificationResult:
    """
    preprocessed_batch:
        numpy array shape (1, 224, 224, 3) float32.

    return:
        ClassificationResult(label, confidence_score)
        - label = CLASSES[argmax], kalau seri index terkecil yang menang
        - confidence_score = max(prob) * 100
    """
    try:
        preds = model.predict(preprocessed_batch, verbose=0)
    except Exception as e:
        raise InferenceError(f"Model prediction failed: {e}") from e

    probs = np.asarray(preds, dtype=np.float64).reshape(-1)
    if probs.shape[0] != len(CLASSES):
        raise InferenceError(
            f"Expected {len(CLASSES)} class probabilities, got shape {np.shape(preds)}"
        )
    if not np.all(np.isfinite(probs)):
        raise InferenceError("Model returned non-finite probabilities")

    idx = int(np.argmax(probs))
    confidence = float(np.clip(probs[idx] * 100.0, 0.0, 100.0))

    return ClassificationResult(label=CLASSES[idx], confidence_score=confidence)
