import unittest
import uuid
from datetime import datetime

from cancer_api.core.errors import DecodeError, InferenceError, PersistenceError
from cancer_api.services.prediction_service import new_prediction_id, predict_and_save
from cancer_api.services.result_policy import MESSAGE_SUCCESS, MESSAGE_UNDER_THRESHOLD
from tests.helpers import BrokenModel, FakeModel, jpeg_bytes, memory_store


class FailingStore:
    def save(self, record):
        raise PersistenceError("store unavailable")


class TestPredictAndSave(unittest.TestCase):
    def setUp(self):
        self.store = memory_store()

    def test_success_is_persisted(self):
        outcome = predict_and_save(jpeg_bytes(), FakeModel((0.995, 0.005)), self.store)
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.message, MESSAGE_SUCCESS)
        self.assertEqual(outcome.record.result, "Cancer")
        self.assertEqual(outcome.record.suggestion, "Immediate medical consultation advised.")
        self.assertEqual(self.store.get(outcome.record.id), outcome.record)

    def test_under_threshold(self):
        outcome = predict_and_save(jpeg_bytes(), FakeModel((0.3, 0.7)), self.store)
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.record.result, "Non Cancer")
        self.assertEqual(outcome.message, MESSAGE_UNDER_THRESHOLD)

    def test_record_fields(self):
        outcome = predict_and_save(jpeg_bytes(), FakeModel(), self.store)
        self.assertEqual(uuid.UUID(outcome.record.id).version, 4)
        created = datetime.fromisoformat(outcome.record.created_at)
        self.assertIsNotNone(created.tzinfo)

    def test_decode_error(self):
        model = FakeModel()
        outcome = predict_and_save(b"garbage", model, self.store)
        self.assertFalse(outcome.ok)
        self.assertIsInstance(outcome.error, DecodeError)
        self.assertIsNone(outcome.record)
        self.assertEqual(model.calls, 0)

    def test_inference_error(self):
        outcome = predict_and_save(jpeg_bytes(), BrokenModel(), self.store)
        self.assertIsInstance(outcome.error, InferenceError)

    def test_persistence_error(self):
        outcome = predict_and_save(jpeg_bytes(), FakeModel(), FailingStore())
        self.assertFalse(outcome.ok)
        self.assertIsInstance(outcome.error, PersistenceError)
        self.assertIsNone(outcome.record)


class TestPredictionId(unittest.TestCase):
    def test_unique_over_10000(self):
        ids = {new_prediction_id() for _ in range(10_000)}
        self.assertEqual(len(ids), 10_000)

    def test_uuid4_format(self):
        self.assertEqual(uuid.UUID(new_prediction_id()).version, 4)


if __name__ == "__main__":
    unittest.main()
