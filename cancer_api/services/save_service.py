# cancer_api/services/save_service.py
import logging

from sqlalchemy.exc import SQLAlchemyError

from cancer_api.core.errors import PersistenceError
from cancer_api.database.db import Base, create_db_engine, create_session_factory
from cancer_api.models.prediction import Prediction, PredictionRecord

log = logging.getLogger(__name__)


class PredictionStore:
    """
    Penyimpanan hasil prediksi di tabel "predictions", key = id.
    Satu session per operasi, jadi aman dipakai banyak request sekaligus.
    """

    def __init__(self, engine=None):
        self.engine = engine if engine is not None else create_db_engine()
        self.SessionLocal = create_session_factory(self.engine)

    def create_tables(self):
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            raise PersistenceError(f"DB error: {e}") from e

    def save(self, record: PredictionRecord) -> None:
        """
        Upsert record (merge): kalau id sudah ada, ditimpa.
        Record baru dianggap tersimpan hanya kalau commit berhasil.
        """
        db = self.SessionLocal()
        try:
            db.merge(
                Prediction(
                    id=record.id,
                    result=record.result,
                    suggestion=record.suggestion,
                    created_at=record.created_at,
                )
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise PersistenceError(f"DB error: {e}") from e
        finally:
            db.close()

        log.debug("Prediction %s saved", record.id)

    def get(self, prediction_id: str) -> PredictionRecord | None:
        db = self.SessionLocal()
        try:
            row = db.get(Prediction, prediction_id)
            if row is None:
                return None
            return PredictionRecord(
                id=row.id,
                result=row.result,
                suggestion=row.suggestion,
                created_at=row.created_at,
            )
        except SQLAlchemyError as e:
            raise PersistenceError(f"DB error: {e}") from e
        finally:
            db.close()
