# cancer_api/services/result_policy.py
from cancer_api.core.errors import InferenceError
from cancer_api.ml.classification.predict import ClassificationResult

# Confidence (persen) harus LEBIH DARI nilai ini supaya dianggap yakin
CONFIDENCE_THRESHOLD = 99

SUGGESTIONS = {
    "Cancer": "Immediate medical consultation advised.",
    "Non Cancer": "Medical consultation not necessary.",
}

MESSAGE_SUCCESS = "Model is predicted successfully."
MESSAGE_UNDER_THRESHOLD = (
    "Model is predicted successfully but under threshold. Please use the correct picture"
)


def suggestion_for(label: str) -> str:
    try:
        return SUGGESTIONS[label]
    except KeyError as e:
        raise InferenceError(f"Unknown label: {label!r}") from e


def message_for(confidence_score: float) -> str:
    # 99.0 pas masih dianggap di bawah threshold
    if confidence_score > CONFIDENCE_THRESHOLD:
        return MESSAGE_SUCCESS
    return MESSAGE_UNDER_THRESHOLD


def apply_policy(result: ClassificationResult) -> tuple[str, str]:
    """return (suggestion, message)"""
    return suggestion_for(result.label), message_for(result.confidence_score)
