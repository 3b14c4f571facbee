"""Build the startup data set from the static attractions JSON document."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from wanderly.application.services.catalog_store import SeedData
from wanderly.core.security import hash_password
from wanderly.domain.entities.attraction import Attraction, BestTravelOption, TravelInfo, TravelOption
from wanderly.domain.entities.review import Review
from wanderly.domain.entities.user import User
from wanderly.domain.value_objects.coordinates import Location
from wanderly.domain.value_objects.enums import Role

logger = logging.getLogger(__name__)

# Used when the seed document cannot be read
FALLBACK_ATTRACTIONS: List[Dict[str, Any]] = [
    {
        "name": "Red Fort (Lal Qila)",
        "category": "historic",
        "description": "UNESCO World Heritage Site - Mughal emperor's residence and symbol of India's independence.",
        "location": {
            "lat": 28.6562,
            "lng": 77.2410,
            "address": "Netaji Subhash Marg, Lal Qila, Chandni Chowk, New Delhi",
        },
        "images": [
            "https://images.unsplash.com/photo-1603261206756-3ea0f3f94a5a?auto=format&fit=crop&w=800&h=600&q=60"
        ],
        "price": "$$",
        "distance": 0,
        "hours": "Tue-Sun: 9:30 AM - 4:30 PM",
        "phone": "+91-11-23277705",
        "website": "www.redfort.gov.in",
        "amenities": ["Museum", "Guided Tours", "Parking", "Audio Guide"],
        "travelInfo": {
            "fromLocation": "New Delhi Railway Station",
            "options": [
                {
                    "mode": "Metro",
                    "duration": "25 minutes",
                    "cost": "₹20-40",
                    "companies": ["Delhi Metro"],
                    "recommended": True,
                    "pros": "Fast and efficient",
                    "cons": "Walking required from station",
                }
            ],
            "bestOption": {
                "mode": "Metro",
                "reason": "Best balance of cost, time, and convenience",
                "estimatedCost": "₹30",
            },
        },
        "rating": 4.3,
        "reviewCount": 12500,
    }
]

SAMPLE_REVIEWS = [
    (5.0, "Absolutely stunning! The architecture is magnificent and the history is fascinating. "
          "Perfect for a day trip with family."),
    (4.5, "Beautiful monument with amazing photo opportunities. The guided tour was very informative."),
]


def parse_travel_info(data: Optional[Dict[str, Any]]) -> Optional[TravelInfo]:
    """Convert the camelCase travel info block of the seed document."""
    if not data:
        return None
    options = [
        TravelOption(
            mode=opt["mode"],
            duration=opt["duration"],
            cost=opt["cost"],
            recommended=opt.get("recommended"),
            pros=opt.get("pros"),
            cons=opt.get("cons"),
            booking_links=opt.get("bookingLinks") or [],
            companies=opt.get("companies") or [],
            available=opt.get("available"),
            note=opt.get("note"),
        )
        for opt in data.get("options", [])
    ]
    best = data.get("bestOption") or {}
    return TravelInfo(
        from_location=data.get("fromLocation", ""),
        options=options,
        best_option=BestTravelOption(
            mode=best.get("mode", ""),
            reason=best.get("reason", ""),
            estimated_cost=best.get("estimatedCost"),
        ),
    )


def parse_attraction(data: Dict[str, Any]) -> Attraction:
    """Convert one seed record into an entity, keeping its recorded rating."""
    location = data["location"]
    return Attraction(
        id=data.get("id"),
        name=data["name"],
        category=data["category"],
        description=data["description"],
        location=Location(
            lat=float(location["lat"]),
            lng=float(location["lng"]),
            address=location.get("address", ""),
        ),
        price=data["price"],
        images=data.get("images") or [],
        distance=float(data.get("distance", 0)),
        hours=data.get("hours"),
        phone=data.get("phone"),
        website=data.get("website"),
        amenities=data.get("amenities") or [],
        travel_info=parse_travel_info(data.get("travelInfo")),
        average_rating=float(data.get("rating", 0.0)),
        review_count=int(data.get("reviewCount", 0)),
    )


def read_attraction_records(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Read attraction records from the seed document, or the fallback set."""
    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
        records = document["attractions"]
        logger.info(f"Loaded {len(records)} attractions from {path}")
        return records
    except (OSError, ValueError, KeyError) as e:
        logger.error(f"Error loading seed data from {path}: {e}")
        logger.warning(f"Falling back to {len(FALLBACK_ATTRACTIONS)} built-in attractions")
        return FALLBACK_ATTRACTIONS


def build_seed(
    path: Union[str, Path],
    admin_username: str,
    admin_email: str,
    admin_password: str,
    hash_iterations: int = 120000,
) -> SeedData:
    """Assemble attractions, the admin account and a couple of sample reviews.

    Entity ids are fixed here so the sample reviews can point at the first
    attraction before anything is stored.
    """
    attractions = []
    for position, record in enumerate(read_attraction_records(path), start=1):
        try:
            attraction = parse_attraction(record)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Skipping seed record {position}: {e!r}")
            continue
        if not attraction.is_valid():
            logger.error(f"Skipping seed record {position}: invalid attraction")
            continue
        attractions.append(attraction)
    for index, attraction in enumerate(attractions, start=1):
        if attraction.id is None:
            attraction.id = f"attr-{index:03d}"

    admin = User(
        id="user-admin",
        username=admin_username,
        email=admin_email.lower(),
        password_hash=hash_password(admin_password, hash_iterations),
        role=Role.ADMIN,
    )

    reviews = []
    if attractions:
        reviews = [
            Review(id=None, user_id=admin.id, attraction_id=attractions[0].id, rating=rating, comment=comment)
            for rating, comment in SAMPLE_REVIEWS
        ]

    return SeedData(attractions=attractions, users=[admin], reviews=reviews)
