# cancer_api/core/errors.py


class PredictionError(Exception):
    """Base semua error di pipeline prediksi."""


class ValidationError(PredictionError):
    """
    Payload tidak valid (tidak ada file / kebesaran).
    Satu-satunya error yang alasannya boleh dikirim ke client.
    """

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DecodeError(PredictionError):
    """Bytes bukan gambar JPEG yang bisa didecode."""


class InferenceError(PredictionError):
    """Model gagal dijalankan atau output-nya tidak sesuai."""


class PersistenceError(PredictionError):
    """Gagal menulis / membaca hasil prediksi ke database."""


class ModelLoadError(Exception):
    """Model tidak bisa di-load saat startup. Fatal."""
