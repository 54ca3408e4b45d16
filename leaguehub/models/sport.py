from leaguehub.extensions import db
from datetime import datetime, timezone


class Sport(db.Model):
    __tablename__ = "sports"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text, nullable=True)
    players_per_team = db.Column(db.Integer, nullable=False)
    created_at = db.Column(
        db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    # Relationships
    leagues = db.relationship(
        "League", back_populates="sport", lazy="dynamic", passive_deletes="all"
    )

    def __repr__(self):
        return f"<Sport {self.name}>"
