from flask_sqlalchemy import SQLAlchemy
from datetime import datetime, timezone
from sqlalchemy.exc import SQLAlchemyError

from tiers.storage import StorageError

db = SQLAlchemy()


class SavedPuzzle(db.Model):
    """One player's persisted record for one puzzle day."""
    __tablename__ = "saved_puzzles"
    id = db.Column(db.Integer, primary_key=True)
    player_id = db.Column(db.String(64), nullable=False, index=True)
    storage_key = db.Column(db.String(80), nullable=False)  # e.g. "dailyTiersAttempt_2025-11-16"
    payload = db.Column(db.Text, nullable=False)
    updated_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))
    __table_args__ = (db.UniqueConstraint("player_id", "storage_key"),)


class SqlStore:
    """Key-value view of ``SavedPuzzle`` rows for a single player."""

    def __init__(self, player_id: str):
        self.player_id = player_id

    def _row(self, key):
        return SavedPuzzle.query.filter_by(player_id=self.player_id, storage_key=key).first()

    def get(self, key):
        try:
            row = self._row(key)
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError(str(e)) from e
        return row.payload if row else None

    def set(self, key, value):
        try:
            row = self._row(key)
            if row is None:
                row = SavedPuzzle(player_id=self.player_id, storage_key=key, payload=value)
                db.session.add(row)
            else:
                row.payload = value
                row.updated_at = datetime.now(timezone.utc)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError(str(e)) from e
