"""Premade packing templates.

Items reference their category by its position in the template's
``categories`` list.
"""

PREMADE_TEMPLATES = [
    {
        "name": "Beach Vacation",
        "description": "Essential items for a relaxing beach getaway",
        "categories": [
            {"name": "Clothing", "description": "Beach and casual wear"},
            {"name": "Beach Gear", "description": "Items for beach activities"},
            {"name": "Toiletries", "description": "Personal care items"},
            {"name": "Electronics", "description": "Gadgets and entertainment"},
            {"name": "Documents", "description": "Important papers and IDs"}
        ],
        "items": [
            {"name": "Swimsuits", "category": 0, "description": "At least 2-3 swimsuits"},
            {"name": "Sunglasses", "category": 0},
            {"name": "Beach Towels", "category": 1},
            {"name": "Sunscreen", "category": 2, "description": "SPF 30 or higher"},
            {"name": "Beach Umbrella", "category": 1},
            {"name": "Flip Flops", "category": 0},
            {"name": "Beach Bag", "category": 1},
            {"name": "Camera", "category": 3},
            {"name": "Passport/ID", "category": 4},
            {"name": "Travel Insurance", "category": 4}
        ]
    },
    {
        "name": "Business Trip",
        "description": "Professional travel essentials",
        "categories": [
            {"name": "Business Attire", "description": "Professional clothing"},
            {"name": "Work Essentials", "description": "Office and work items"},
            {"name": "Electronics", "description": "Work devices and accessories"},
            {"name": "Personal Care", "description": "Grooming and hygiene"},
            {"name": "Documents", "description": "Business papers and IDs"}
        ],
        "items": [
            {"name": "Business Suit", "category": 0},
            {"name": "Dress Shoes", "category": 0},
            {"name": "Laptop", "category": 2},
            {"name": "Business Cards", "category": 4},
            {"name": "Presentation Materials", "category": 1},
            {"name": "Travel Adapter", "category": 2},
            {"name": "Portfolio", "category": 1},
            {"name": "Toiletries", "category": 3},
            {"name": "ID/Passport", "category": 4},
            {"name": "Meeting Notes", "category": 1}
        ]
    },
    {
        "name": "Camping Trip",
        "description": "Outdoor adventure essentials",
        "categories": [
            {"name": "Shelter", "description": "Camping equipment"},
            {"name": "Cooking", "description": "Food preparation items"},
            {"name": "Clothing", "description": "Outdoor wear"},
            {"name": "Safety", "description": "First aid and emergency items"},
            {"name": "Personal Items", "description": "Comfort and hygiene"}
        ],
        "items": [
            {"name": "Tent", "category": 0},
            {"name": "Sleeping Bag", "category": 0},
            {"name": "Camping Stove", "category": 1},
            {"name": "First Aid Kit", "category": 3},
            {"name": "Hiking Boots", "category": 2},
            {"name": "Water Bottle", "category": 1},
            {"name": "Flashlight", "category": 3},
            {"name": "Bug Spray", "category": 3},
            {"name": "Map/Compass", "category": 3},
            {"name": "Toilet Paper", "category": 4}
        ]
    },
    {
        "name": "Ski Trip",
        "description": "Winter sports vacation essentials",
        "categories": [
            {"name": "Ski Gear", "description": "Equipment for skiing"},
            {"name": "Winter Clothing", "description": "Cold weather wear"},
            {"name": "Accessories", "description": "Additional winter items"},
            {"name": "Personal Care", "description": "Cold weather care"},
            {"name": "Documents", "description": "Important papers"}
        ],
        "items": [
            {"name": "Ski Jacket", "category": 1},
            {"name": "Ski Pants", "category": 1},
            {"name": "Ski Goggles", "category": 2},
            {"name": "Gloves", "category": 2},
            {"name": "Thermal Underwear", "category": 1},
            {"name": "Ski Pass", "category": 4},
            {"name": "Lip Balm", "category": 3},
            {"name": "Sunscreen", "category": 3},
            {"name": "Ski Boots", "category": 0},
            {"name": "Helmet", "category": 0}
        ]
    },
    {
        "name": "Road Trip",
        "description": "Essential items for a long drive",
        "categories": [
            {"name": "Car Essentials", "description": "Vehicle items"},
            {"name": "Navigation", "description": "Maps and guides"},
            {"name": "Comfort", "description": "Travel comfort items"},
            {"name": "Entertainment", "description": "Fun for the road"},
            {"name": "Emergency", "description": "Safety items"}
        ],
        "items": [
            {"name": "Car Documents", "category": 0},
            {"name": "GPS Device", "category": 1},
            {"name": "Road Atlas", "category": 1},
            {"name": "Pillows", "category": 2},
            {"name": "Snacks", "category": 2},
            {"name": "Music Playlist", "category": 3},
            {"name": "First Aid Kit", "category": 4},
            {"name": "Jumper Cables", "category": 4},
            {"name": "Blanket", "category": 2},
            {"name": "Water Bottles", "category": 2}
        ]
    },
    {
        "name": "Music Festival",
        "description": "Essentials for a music festival",
        "categories": [
            {"name": "Camping Gear", "description": "Festival camping items"},
            {"name": "Clothing", "description": "Festival wear"},
            {"name": "Accessories", "description": "Festival essentials"},
            {"name": "Personal Care", "description": "Hygiene items"},
            {"name": "Documents", "description": "Tickets and IDs"}
        ],
        "items": [
            {"name": "Tent", "category": 0},
            {"name": "Sleeping Bag", "category": 0},
            {"name": "Rain Poncho", "category": 1},
            {"name": "Festival Tickets", "category": 4},
            {"name": "ID", "category": 4},
            {"name": "Portable Charger", "category": 2},
            {"name": "Sunscreen", "category": 3},
            {"name": "Wet Wipes", "category": 3},
            {"name": "Ear Plugs", "category": 2},
            {"name": "Water Bottle", "category": 2}
        ]
    },
    {
        "name": "Honeymoon",
        "description": "Romantic getaway essentials",
        "categories": [
            {"name": "Clothing", "description": "Romantic outfits"},
            {"name": "Accessories", "description": "Special items"},
            {"name": "Toiletries", "description": "Personal care"},
            {"name": "Documents", "description": "Important papers"},
            {"name": "Romantic Items", "description": "Special touches"}
        ],
        "items": [
            {"name": "Dressy Outfits", "category": 0},
            {"name": "Swimwear", "category": 0},
            {"name": "Passport", "category": 3},
            {"name": "Travel Documents", "category": 3},
            {"name": "Camera", "category": 1},
            {"name": "Romantic Music", "category": 4},
            {"name": "Special Perfume", "category": 2},
            {"name": "Jewelry", "category": 1},
            {"name": "Massage Oil", "category": 4},
            {"name": "Champagne", "category": 4}
        ]
    },
    {
        "name": "Backpacking",
        "description": "Lightweight travel essentials",
        "categories": [
            {"name": "Shelter", "description": "Sleeping equipment"},
            {"name": "Cooking", "description": "Food preparation"},
            {"name": "Clothing", "description": "Lightweight wear"},
            {"name": "Navigation", "description": "Maps and guides"},
            {"name": "Safety", "description": "Emergency items"}
        ],
        "items": [
            {"name": "Backpack", "category": 0},
            {"name": "Sleeping Bag", "category": 0},
            {"name": "Tent", "category": 0},
            {"name": "Water Filter", "category": 1},
            {"name": "Hiking Boots", "category": 2},
            {"name": "Map", "category": 3},
            {"name": "Compass", "category": 3},
            {"name": "First Aid Kit", "category": 4},
            {"name": "Headlamp", "category": 4},
            {"name": "Multi-tool", "category": 4}
        ]
    },
    {
        "name": "Cruise Vacation",
        "description": "Ocean voyage essentials",
        "categories": [
            {"name": "Clothing", "description": "Cruise wear"},
            {"name": "Formal Wear", "description": "Dinner attire"},
            {"name": "Toiletries", "description": "Personal care"},
            {"name": "Documents", "description": "Cruise papers"},
            {"name": "Accessories", "description": "Additional items"}
        ],
        "items": [
            {"name": "Cruise Documents", "category": 3},
            {"name": "Passport", "category": 3},
            {"name": "Formal Attire", "category": 1},
            {"name": "Swimwear", "category": 0},
            {"name": "Sunscreen", "category": 2},
            {"name": "Binoculars", "category": 4},
            {"name": "Sea Sickness Pills", "category": 2},
            {"name": "Evening Gown/Suit", "category": 1},
            {"name": "Water Shoes", "category": 0},
            {"name": "Camera", "category": 4}
        ]
    },
    {
        "name": "Golf Trip",
        "description": "Golf vacation essentials",
        "categories": [
            {"name": "Golf Equipment", "description": "Golf gear"},
            {"name": "Clothing", "description": "Golf attire"},
            {"name": "Accessories", "description": "Additional items"},
            {"name": "Personal Care", "description": "Grooming items"},
            {"name": "Documents", "description": "Important papers"}
        ],
        "items": [
            {"name": "Golf Clubs", "category": 0},
            {"name": "Golf Balls", "category": 0},
            {"name": "Golf Shoes", "category": 1},
            {"name": "Golf Gloves", "category": 1},
            {"name": "Golf Tees", "category": 0},
            {"name": "Golf Cap", "category": 1},
            {"name": "Sunscreen", "category": 3},
            {"name": "Tee Times", "category": 4},
            {"name": "Golf Towel", "category": 2},
            {"name": "Scorecard", "category": 4}
        ]
    },
    {
        "name": "Photography Trip",
        "description": "Photo expedition essentials",
        "categories": [
            {"name": "Camera Gear", "description": "Photography equipment"},
            {"name": "Accessories", "description": "Additional gear"},
            {"name": "Storage", "description": "Data storage"},
            {"name": "Protection", "description": "Equipment safety"},
            {"name": "Personal Items", "description": "Comfort items"}
        ],
        "items": [
            {"name": "Camera Body", "category": 0},
            {"name": "Lenses", "category": 0},
            {"name": "Tripod", "category": 1},
            {"name": "Memory Cards", "category": 2},
            {"name": "Camera Bag", "category": 3},
            {"name": "Lens Cleaner", "category": 1},
            {"name": "Extra Batteries", "category": 0},
            {"name": "Laptop", "category": 2},
            {"name": "Rain Cover", "category": 3},
            {"name": "Comfortable Shoes", "category": 4}
        ]
    },
    {
        "name": "Family Vacation",
        "description": "Family trip essentials",
        "categories": [
            {"name": "Kids Items", "description": "Children's needs"},
            {"name": "Entertainment", "description": "Fun activities"},
            {"name": "Snacks", "description": "Food items"},
            {"name": "Safety", "description": "Child safety items"},
            {"name": "Documents", "description": "Family papers"}
        ],
        "items": [
            {"name": "Diapers", "category": 0},
            {"name": "Baby Wipes", "category": 0},
            {"name": "Toys", "category": 1},
            {"name": "Books", "category": 1},
            {"name": "Snacks", "category": 2},
            {"name": "First Aid Kit", "category": 3},
            {"name": "Child ID Tags", "category": 3},
            {"name": "Stroller", "category": 0},
            {"name": "Car Seats", "category": 3},
            {"name": "Family Documents", "category": 4}
        ]
    },
    {
        "name": "Business Conference",
        "description": "Conference essentials",
        "categories": [
            {"name": "Business Items", "description": "Work materials"},
            {"name": "Electronics", "description": "Tech devices"},
            {"name": "Networking", "description": "Meeting items"},
            {"name": "Personal Care", "description": "Grooming items"},
            {"name": "Documents", "description": "Conference papers"}
        ],
        "items": [
            {"name": "Business Cards", "category": 2},
            {"name": "Laptop", "category": 1},
            {"name": "Notebook", "category": 0},
            {"name": "Conference Schedule", "category": 4},
            {"name": "Name Badge", "category": 2},
            {"name": "Portfolio", "category": 0},
            {"name": "Chargers", "category": 1},
            {"name": "Professional Attire", "category": 0},
            {"name": "Breath Mints", "category": 3},
            {"name": "Conference Tickets", "category": 4}
        ]
    },
    {
        "name": "Safari Trip",
        "description": "Wildlife adventure essentials",
        "categories": [
            {"name": "Clothing", "description": "Safari wear"},
            {"name": "Equipment", "description": "Safari gear"},
            {"name": "Health", "description": "Medical items"},
            {"name": "Documents", "description": "Travel papers"},
            {"name": "Accessories", "description": "Additional items"}
        ],
        "items": [
            {"name": "Neutral Clothing", "category": 0},
            {"name": "Safari Hat", "category": 0},
            {"name": "Binoculars", "category": 1},
            {"name": "Camera", "category": 1},
            {"name": "Malaria Pills", "category": 2},
            {"name": "Vaccination Records", "category": 3},
            {"name": "Passport", "category": 3},
            {"name": "Sunscreen", "category": 2},
            {"name": "Insect Repellent", "category": 2},
            {"name": "Water Bottle", "category": 4}
        ]
    },
    {
        "name": "Ski Weekend",
        "description": "Short ski trip essentials",
        "categories": [
            {"name": "Ski Gear", "description": "Skiing equipment"},
            {"name": "Clothing", "description": "Winter wear"},
            {"name": "Accessories", "description": "Additional items"},
            {"name": "Personal Care", "description": "Cold weather care"},
            {"name": "Documents", "description": "Important papers"}
        ],
        "items": [
            {"name": "Ski Jacket", "category": 1},
            {"name": "Ski Pants", "category": 1},
            {"name": "Ski Goggles", "category": 2},
            {"name": "Gloves", "category": 2},
            {"name": "Ski Pass", "category": 4},
            {"name": "Lip Balm", "category": 3},
            {"name": "Sunscreen", "category": 3},
            {"name": "Ski Boots", "category": 0},
            {"name": "Helmet", "category": 0},
            {"name": "Thermal Underwear", "category": 1}
        ]
    },
    {
        "name": "Music Tour",
        "description": "Concert tour essentials",
        "categories": [
            {"name": "Equipment", "description": "Music gear"},
            {"name": "Clothing", "description": "Stage wear"},
            {"name": "Accessories", "description": "Additional items"},
            {"name": "Personal Care", "description": "Grooming items"},
            {"name": "Documents", "description": "Tour papers"}
        ],
        "items": [
            {"name": "Instruments", "category": 0},
            {"name": "Stage Clothes", "category": 1},
            {"name": "Ear Plugs", "category": 2},
            {"name": "Set Lists", "category": 4},
            {"name": "Touring Schedule", "category": 4},
            {"name": "Spare Strings", "category": 0},
            {"name": "Tuner", "category": 0},
            {"name": "Stage Makeup", "category": 3},
            {"name": "Merchandise", "category": 2},
            {"name": "Tour Passes", "category": 4}
        ]
    },
    {
        "name": "Yoga Retreat",
        "description": "Wellness getaway essentials",
        "categories": [
            {"name": "Yoga Gear", "description": "Yoga equipment"},
            {"name": "Clothing", "description": "Comfortable wear"},
            {"name": "Personal Care", "description": "Wellness items"},
            {"name": "Accessories", "description": "Additional items"},
            {"name": "Documents", "description": "Retreat papers"}
        ],
        "items": [
            {"name": "Yoga Mat", "category": 0},
            {"name": "Yoga Blocks", "category": 0},
            {"name": "Comfortable Clothes", "category": 1},
            {"name": "Water Bottle", "category": 2},
            {"name": "Meditation Cushion", "category": 0},
            {"name": "Essential Oils", "category": 2},
            {"name": "Journal", "category": 4},
            {"name": "Retreat Schedule", "category": 4},
            {"name": "Comfortable Shoes", "category": 1},
            {"name": "Eye Pillow", "category": 2}
        ]
    },
    {
        "name": "Food Tour",
        "description": "Culinary adventure essentials",
        "categories": [
            {"name": "Cooking Gear", "description": "Kitchen equipment"},
            {"name": "Clothing", "description": "Comfortable wear"},
            {"name": "Accessories", "description": "Additional items"},
            {"name": "Personal Care", "description": "Hygiene items"},
            {"name": "Documents", "description": "Tour papers"}
        ],
        "items": [
            {"name": "Chef's Knife", "category": 0},
            {"name": "Apron", "category": 1},
            {"name": "Recipe Book", "category": 4},
            {"name": "Food Journal", "category": 4},
            {"name": "Comfortable Shoes", "category": 1},
            {"name": "Hand Sanitizer", "category": 3},
            {"name": "Food Containers", "category": 0},
            {"name": "Tour Schedule", "category": 4},
            {"name": "Camera", "category": 2},
            {"name": "Tasting Notes", "category": 4}
        ]
    },
    {
        "name": "Art Tour",
        "description": "Art exploration essentials",
        "categories": [
            {"name": "Art Supplies", "description": "Creative materials"},
            {"name": "Clothing", "description": "Comfortable wear"},
            {"name": "Accessories", "description": "Additional items"},
            {"name": "Personal Care", "description": "Hygiene items"},
            {"name": "Documents", "description": "Tour papers"}
        ],
        "items": [
            {"name": "Sketchbook", "category": 0},
            {"name": "Pencils", "category": 0},
            {"name": "Camera", "category": 2},
            {"name": "Museum Pass", "category": 4},
            {"name": "Comfortable Shoes", "category": 1},
            {"name": "Art Guide", "category": 4},
            {"name": "Water Bottle", "category": 2},
            {"name": "Tour Schedule", "category": 4},
            {"name": "Notebook", "category": 0},
            {"name": "Gallery Map", "category": 4}
        ]
    },
    {
        "name": "Sports Event",
        "description": "Game day essentials",
        "categories": [
            {"name": "Team Gear", "description": "Fan items"},
            {"name": "Clothing", "description": "Game day wear"},
            {"name": "Accessories", "description": "Additional items"},
            {"name": "Personal Care", "description": "Comfort items"},
            {"name": "Documents", "description": "Tickets and IDs"}
        ],
        "items": [
            {"name": "Team Jersey", "category": 0},
            {"name": "Tickets", "category": 4},
            {"name": "Team Hat", "category": 0},
            {"name": "Sunscreen", "category": 3},
            {"name": "Binoculars", "category": 2},
            {"name": "Team Colors", "category": 1},
            {"name": "Stadium Map", "category": 4},
            {"name": "Camera", "category": 2},
            {"name": "Team Flag", "category": 0},
            {"name": "ID", "category": 4}
        ]
    }
]
