"""Known job locations in Cyprus."""

from __future__ import annotations

from typing import Optional

DISTRICTS: dict[str, tuple[str, ...]] = {
    "NICOSIA": (
        "Nicosia", "Strovolos", "Lakatamia", "Latsia", "Engomi", "Aglandjia",
        "Dali", "Geri", "Tseri", "Deftera", "Kaimakli",
    ),
    "LIMASSOL": (
        "Limassol", "Mesa Geitonia", "Yermasoyia", "Agios Athanasios", "Limassol Marina",
        "Germasogeia", "Zakaki", "Kolossi", "Erimi", "Ypsonas", "Parekklisia",
    ),
    "LARNACA": (
        "Larnaca", "Aradippou", "Livadia", "Dromolaxia", "Kiti", "Pervolia",
        "Mazotos", "Kofinou", "Vavatsinia", "Lefkara", "Skarinou",
    ),
    "PAPHOS": (
        "Paphos", "Geroskipou", "Peyia", "Chloraka", "Kissonerga", "Tala",
        "Polis Chrysochous", "Latchi", "Neo Chorio", "Droushia", "Kathikas",
    ),
    "FAMAGUSTA": (
        "Ayia Napa", "Paralimni", "Deryneia", "Sotira", "Frenaros", "Liopetri",
        "Xylofagou", "Avgorou", "Vrysoulles", "Achna", "Dherynia",
    ),
}

_OTHER_LOCATIONS = (
    # Mountains
    "Troodos Mountains", "Platres", "Kakopetria", "Pedoulas", "Kykkos", "Omodos",
    # Coast
    "Protaras", "Cape Greco", "Coral Bay", "Governor's Beach", "Lady's Mile",
    "Akamas Peninsula", "Pissouri", "Zygi", "Agios Tychonas",
    # Industrial areas
    "Larnaca Industrial Area", "Limassol Industrial Area", "Nicosia Industrial Area",
    "Ypsonas Industrial Area", "Dali Industrial Area",
    # Universities
    "University of Cyprus", "Cyprus University of Technology", "European University Cyprus",
    "University of Nicosia", "Frederick University",
)

# Major cities first, then districts in declaration order, de-duplicated.
CYPRUS_CITIES: tuple[str, ...] = tuple(
    dict.fromkeys(
        ("Nicosia", "Limassol", "Larnaca", "Paphos", "Ayia Napa")
        + tuple(city for cities in DISTRICTS.values() for city in cities)
        + _OTHER_LOCATIONS
    )
)


def district_for(city: str) -> Optional[str]:
    for district, cities in DISTRICTS.items():
        if city in cities:
            return district
    return None


def match_locations(text: str, limit: int = 10) -> list[str]:
    """Known locations containing ``text`` (case-insensitive); prefix matches first."""
    needle = text.strip().lower()
    if not needle:
        return []
    prefix = [city for city in CYPRUS_CITIES if city.lower().startswith(needle)]
    infix = [city for city in CYPRUS_CITIES if needle in city.lower() and city not in prefix]
    return (prefix + infix)[:limit]
