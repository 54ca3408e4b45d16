from datetime import datetime

CITIES = [
    ("Los Angeles", "CA", "USA"),
    ("Chicago", "IL", "USA"),
    ("Miami", "FL", "USA"),
    ("Toronto", "ON", "Canada"),
    ("San Diego", "CA", "USA"),
    ("New York", "NY", "USA"),
    ("Aspen", "CO", "USA"),
    ("Phoenix", "AZ", "USA"),
    ("Boston", "MA", "USA"),
]

SPORTS = [
    ("Soccer", "Eleven-a-side association football", 11),
    ("Basketball", "Five-a-side indoor basketball", 5),
    ("Ice Hockey", "Six skaters per side including the goaltender", 6),
    ("Tennis", "Singles draw", 1),
    ("Beach Volleyball", "Two-person beach volleyball", 2),
    ("Football", "Eleven-a-side gridiron football", 11),
    ("Skiing", "Individual alpine events", 1),
    ("Baseball", "Nine-a-side baseball", 9),
    ("Rugby", "Fifteen-a-side rugby union", 15),
]

# (name, city, sport, max_teams, registration_deadline, start, end, status)
LEAGUES = [
    ("Summer Soccer Championship", "Los Angeles", "Soccer", 16,
     datetime(2026, 7, 1), datetime(2026, 7, 15), datetime(2026, 9, 15), "upcoming"),
    ("Fall Basketball Tournament", "Chicago", "Basketball", 32,
     datetime(2026, 8, 15), datetime(2026, 9, 1), datetime(2026, 11, 30), "upcoming"),
    ("Winter Ice Hockey League", "Toronto", "Ice Hockey", 12,
     datetime(2026, 11, 1), datetime(2026, 11, 15), datetime(2027, 3, 1), "upcoming"),
    ("Spring Tennis Open", "Miami", "Tennis", 64,
     datetime(2026, 3, 15), datetime(2026, 4, 1), datetime(2026, 6, 30), "current"),
    ("Volleyball Beach Series", "San Diego", "Beach Volleyball", 24,
     datetime(2026, 4, 15), datetime(2026, 5, 1), datetime(2026, 8, 15), "current"),
    ("City Football League", "New York", "Football", 20,
     datetime(2026, 3, 1), datetime(2026, 3, 20), datetime(2026, 7, 31), "current"),
    ("Winter Ski Championship", "Aspen", "Skiing", 50,
     datetime(2025, 12, 1), datetime(2026, 1, 10), datetime(2026, 3, 15), "past"),
    ("Spring Baseball Classic", "Phoenix", "Baseball", 30,
     datetime(2026, 2, 1), datetime(2026, 3, 1), datetime(2026, 5, 1), "past"),
    ("National Rugby Tournament", "Boston", "Rugby", 16,
     datetime(2026, 1, 15), datetime(2026, 2, 1), datetime(2026, 4, 30), "past"),
]

DEFAULT_ADMIN = {
    "email": "admin@leaguehub.local",
    "first_name": "League",
    "last_name": "Admin",
    "password": "Admin@2026",
}
