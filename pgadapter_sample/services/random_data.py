"""Random values for the sample data."""

from __future__ import annotations

import random
from datetime import date, timedelta
from decimal import Decimal
from typing import List, Optional

FIRST_NAMES = (
    "Aaliyah", "Alice", "Amelia", "Ben", "Caleb", "Charlotte", "Daniel", "David", "Elena", "Emma",
    "Ethan", "Gabriel", "Grace", "Hannah", "Isabella", "Jack", "James", "Kai", "Laura", "Liam",
    "Lucas", "Mason", "Mia", "Noah", "Olivia", "Quinn", "Ruby", "Sophia", "Theo", "Victoria",
    "William", "Yara", "Zoe",
)

LAST_NAMES = (
    "Adams", "Anderson", "Baker", "Brown", "Clark", "Collins", "Davis", "Edwards", "Evans", "Fischer",
    "Garcia", "Green", "Hall", "Harris", "Irwin", "Jackson", "Johnson", "King", "Lee", "Lopez",
    "Martin", "Miller", "Nelson", "Owens", "Parker", "Quinn", "Roberts", "Smith", "Taylor", "Turner",
    "Underwood", "Vance", "Walker", "White", "Wilson", "Young", "Zimmerman",
)

ADJECTIVES = (
    "ancient", "bitter", "bright", "broken", "calm", "crimson", "dark", "electric", "endless", "faded",
    "fierce", "golden", "hidden", "hollow", "silent", "lonely", "lost", "midnight", "restless", "silver",
    "sweet", "velvet", "wild", "young",
)

NOUNS = (
    "angel", "city", "dream", "echo", "fire", "garden", "heart", "highway", "island", "journey",
    "light", "moon", "mountain", "ocean", "river", "road", "shadow", "sky", "storm", "summer",
    "sun", "thunder", "voice", "winter",
)

VENUE_TYPES = ("arena", "club", "hall", "stadium", "theater", "open air")

VENUE_LOCATIONS = ("Amsterdam", "Berlin", "Chicago", "London", "Madrid", "New York", "Paris", "Tokyo")

SAMPLE_RATES = (44.1, 48.0, 88.2, 96.0, 192.0)


class RandomDataService:
    """Generates random names, titles and values for the sample entities.

    A seeded ``random.Random`` can be passed in to make the data reproducible.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def random_first_name(self) -> str:
        return self.rng.choice(FIRST_NAMES)

    def random_last_name(self) -> str:
        return self.rng.choice(LAST_NAMES)

    def random_title(self) -> str:
        """Two to four words, e.g. ``Golden river of the silent moon``."""
        words = [self.rng.choice(ADJECTIVES), self.rng.choice(NOUNS)]
        if self.rng.random() < 0.5:
            words += ["of the", self.rng.choice(ADJECTIVES), self.rng.choice(NOUNS)]
        return " ".join(words).capitalize()

    def random_venue_name(self) -> str:
        return f"The {self.rng.choice(ADJECTIVES).capitalize()} {self.rng.choice(NOUNS).capitalize()}"

    def random_venue_description(self) -> dict:
        return {
            "capacity": self.rng.randint(100, 50_000),
            "type": self.rng.choice(VENUE_TYPES),
            "location": self.rng.choice(VENUE_LOCATIONS),
        }

    def random_bool(self) -> bool:
        return self.rng.random() < 0.5

    def random_amount(self, low: int, high: int) -> Decimal:
        """A random amount with two decimals between ``low`` and ``high``."""
        return Decimal(self.rng.randint(low * 100, high * 100)) / Decimal(100)

    def random_date(self, start: date, end: date) -> date:
        return start + timedelta(days=self.rng.randint(0, (end - start).days))

    def random_bytes(self, length: int) -> bytes:
        return bytes(self.rng.getrandbits(8) for _ in range(length))

    def random_sample_rate(self) -> float:
        return self.rng.choice(SAMPLE_RATES)

    def random_seats(self, max_seats: int = 4) -> List[str]:
        row = self.rng.choice("ABCDEFGHJKLMNOPQRSTUVWXYZ")
        first = self.rng.randint(1, 40)
        return [f"{row}{first + n}" for n in range(self.rng.randint(1, max_seats))]
