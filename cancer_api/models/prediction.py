# cancer_api/models/prediction.py
from dataclasses import dataclass

from sqlalchemy import Column, String, Text
from cancer_api.database.db import Base


class Prediction(Base):
    __tablename__ = "predictions"

    # id = key dokumen, sisanya = isi record
    id = Column(String(36), primary_key=True, index=True)
    result = Column(String(32), nullable=False)
    suggestion = Column(Text, nullable=False)
    # ISO-8601 disimpan apa adanya supaya round-trip persis
    created_at = Column(String(40), nullable=False)


@dataclass(frozen=True)
class PredictionRecord:
    id: str
    result: str
    suggestion: str
    created_at: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "result": self.result,
            "suggestion": self.suggestion,
            "createdAt": self.created_at,
        }
