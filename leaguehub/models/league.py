from leaguehub.extensions import db
from datetime import datetime, timezone
import enum


class LeagueStatus(enum.Enum):
    UPCOMING = "upcoming"
    CURRENT = "current"
    PAST = "past"


DEFAULT_LEAGUE_IMAGE = "https://i.imgur.com/rq0aY15.png"

# Older rows and clients use these spellings for the same states
STATUS_ALIASES = {
    "active": LeagueStatus.CURRENT.value,
    "completed": LeagueStatus.PAST.value,
}


def normalize_status(value):
    if not isinstance(value, str):
        return value
    value = value.strip().lower()
    return STATUS_ALIASES.get(value, value)


class League(db.Model):
    __tablename__ = "leagues"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    city_id = db.Column(db.Integer, db.ForeignKey("cities.id"), nullable=False)
    sport_id = db.Column(db.Integer, db.ForeignKey("sports.id"), nullable=False)
    max_teams = db.Column(db.Integer, nullable=False)
    start_date = db.Column(db.DateTime, nullable=False)
    end_date = db.Column(db.DateTime, nullable=False)
    registration_deadline = db.Column(db.DateTime, nullable=False)
    status = db.Column(
        db.String(20), nullable=False, default=LeagueStatus.UPCOMING.value
    )
    image = db.Column(db.String(500), nullable=True)
    created_at = db.Column(
        db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    # Relationships
    city = db.relationship("City", back_populates="leagues")
    sport = db.relationship("Sport", back_populates="leagues")

    def __repr__(self):
        return f"<League {self.name}>"
