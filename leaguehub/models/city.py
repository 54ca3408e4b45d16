from leaguehub.extensions import db
from datetime import datetime, timezone


class City(db.Model):
    __tablename__ = "cities"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    state = db.Column(db.String(100), nullable=True)
    country = db.Column(db.String(100), nullable=True)
    created_at = db.Column(
        db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    # Relationships
    leagues = db.relationship(
        "League", back_populates="city", lazy="dynamic", passive_deletes="all"
    )

    def __repr__(self):
        return f"<City {self.name}>"
