"""Built-in job sites, hubs, and showcase listings.

Served when no backend is configured, and merged into every Plan My Move
response so there is always something with photos to look at.
"""

from datetime import date

# slug → (name, city, state)
DEMO_JOBSITES: dict[str, tuple[str, str, str]] = {
    "tsmc-arizona": ("TSMC Arizona", "Phoenix", "AZ"),
    "intel-ocotillo": ("Intel Ocotillo", "Chandler", "AZ"),
    "samsung-taylor": ("Samsung Taylor", "Taylor", "TX"),
    "intel-ohio": ("Intel Ohio", "New Albany", "OH"),
    "micron-boise": ("Micron Boise", "Boise", "ID"),
}

# slug → [(hub name, commute_min, commute_max)], nearest first
DEMO_HUBS: dict[str, list[tuple[str, int, int]]] = {
    "tsmc-arizona": [
        ("North Phoenix", 10, 20),
        ("Deer Valley", 15, 25),
        ("Glendale", 20, 35),
        ("Peoria", 25, 40),
        ("Scottsdale", 30, 45),
    ],
    "intel-ocotillo": [
        ("Chandler", 5, 15),
        ("Gilbert", 10, 20),
        ("Mesa", 15, 25),
        ("Tempe", 15, 30),
        ("Queen Creek", 20, 35),
    ],
    "samsung-taylor": [
        ("Taylor", 0, 15),
        ("Hutto", 15, 25),
        ("Round Rock", 20, 35),
        ("Pflugerville", 20, 35),
        ("Georgetown", 30, 45),
    ],
    "intel-ohio": [
        ("New Albany", 5, 15),
        ("Johnstown", 10, 20),
        ("Westerville", 15, 30),
        ("Gahanna", 15, 25),
        ("Columbus - Easton", 20, 35),
    ],
    "micron-boise": [
        ("Boise - Downtown", 5, 15),
        ("Boise - Bench", 10, 20),
        ("Garden City", 10, 20),
        ("Meridian", 15, 30),
        ("Eagle", 20, 35),
    ],
}

# Showcase listings. Entries with a jobsite slug and hub name also show up
# as regular inventory for that hub.
DEMO_LISTINGS: list[dict] = [
    {
        "id": "demo-1",
        "user_id": "demo-user-1",
        "title": "Sunny Room near Data Center",
        "city": "Ashburn",
        "area": "Loudoun County",
        "rent_min": 800,
        "rent_max": 950,
        "move_in": date(2026, 1, 5),
        "room_type": "private_room",
        "commute_area": "Data Center Alley",
        "details": "Spacious private room in a quiet townhouse. Shared kitchen and bath.",
        "poster_name": "Sarah M.",
        "cover_photo_url": "/demo/listings/1.jpg",
        "photo_urls": ["/demo/listings/1.jpg", "/demo/listings/1b.jpg"],
    },
    {
        "id": "demo-2",
        "user_id": "demo-user-2",
        "title": "Shared Room - Weekly Rates",
        "city": "Phoenix",
        "area": "Chandler",
        "rent_min": 400,
        "rent_max": 500,
        "move_in": date(2026, 1, 12),
        "room_type": "shared_room",
        "shift": "day",
        "commute_area": "Intel Ocotillo",
        "details": "Shared room in a 4-bedroom house with other trades workers.",
        "poster_name": "Maria R.",
        "cover_photo_url": "/demo/listings/2.jpg",
        "photo_urls": ["/demo/listings/2.jpg"],
        "jobsite_slug": "intel-ocotillo",
        "hub_name": "Chandler",
    },
    {
        "id": "demo-3",
        "user_id": "demo-user-3",
        "title": "Entire Basement Apartment",
        "city": "Columbus",
        "area": "New Albany",
        "rent_min": 1200,
        "rent_max": 1200,
        "move_in": date(2026, 2, 1),
        "room_type": "entire_place",
        "shift": "night",
        "commute_area": "Intel Ohio",
        "details": "Private entrance, kitchenette, and a quiet street for day sleepers.",
        "poster_name": "Jessica T.",
        "cover_photo_url": "/demo/listings/3.jpg",
        "photo_urls": ["/demo/listings/3.jpg"],
        "jobsite_slug": "intel-ohio",
        "hub_name": "New Albany",
    },
    {
        "id": "demo-4",
        "user_id": "demo-user-4",
        "title": "Room in quiet house",
        "city": "Prineville",
        "area": "Crook County",
        "rent_min": 750,
        "rent_max": 750,
        "move_in": date(2026, 1, 20),
        "room_type": "private_room",
        "commute_area": "Meta Data Center",
        "poster_name": "Ashley K.",
        "cover_photo_url": "/demo/listings/4.jpg",
    },
    {
        "id": "demo-5",
        "user_id": "demo-user-5",
        "title": "Master Bedroom with Bath",
        "city": "San Antonio",
        "area": "Westover Hills",
        "rent_min": 1000,
        "rent_max": 1100,
        "move_in": date(2026, 3, 1),
        "room_type": "private_room",
        "commute_area": "Microsoft Data Center",
        "poster_name": "Elena G.",
        "cover_photo_url": "/demo/listings/5.jpg",
    },
    {
        "id": "demo-6",
        "user_id": "demo-user-6",
        "title": "Cozy Room - Female Only",
        "city": "Huntsville",
        "area": "Madison",
        "rent_min": 600,
        "rent_max": 600,
        "move_in": date(2026, 1, 15),
        "room_type": "private_room",
        "commute_area": "Meta Huntsville",
        "poster_name": "Lisa M.",
        "cover_photo_url": "/demo/listings/6.jpg",
    },
]
