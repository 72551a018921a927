"""
Application constants.
"""

API_DESCRIPTION = """
    ## WaterWise API

    Backend for the WaterWise water-conservation application:

    * **Education**: Articles and video tutorials with search and categories
    * **Water Map**: Water-scarcity zones across India with live weather
    * **Community**: Stories, likes, shares and moderated comments
    * **Calculator**: Rainwater harvesting and water quality tools
    * **Profiles**: Member profiles, avatars and follows

    ### Authentication
    Sign in through the hosted auth service. Use the **Authorize** button to authenticate.
    """

# Home page feature highlights
FEATURES = [
    {
        "title": "Smart Irrigation",
        "description": "AI-driven recommendations",
        "icon": "droplets",
    },
    {
        "title": "Soil Analysis",
        "description": "Optimize water usage",
        "icon": "plant",
    },
    {
        "title": "Rainwater Harvesting",
        "description": "Sustainable solutions",
        "icon": "cloud-rain",
    },
]

# Filter sentinel meaning "no category/state/city restriction"
ALL = "all"

ARTICLE_CATEGORIES = ["conservation", "technology", "research"]
VIDEO_CATEGORIES = ["tutorials", "demonstrations", "lectures"]

# Rainwater harvesting
RUNOFF_SURFACES = {
    0.8: "Pitched Roof",
    0.6: "Flat Roof",
    0.4: "Unpaved Area",
}
DEFAULT_RUNOFF_COEFFICIENT = 0.8
SAVINGS_PER_GALLON = 0.01

# Reading
WORDS_PER_MINUTE = 200

# Profiles
ROLES = ("admin", "moderator", "member")
CONTENT_EDITOR_ROLES = ("admin", "moderator")
USERNAME_PATTERN = r"^[a-zA-Z0-9_]+$"

# Map
MAP_CENTER = (20.5937, 78.9629)
MAP_ZOOM = 5
SEVERITY_COLORS = {
    "high": "#ef4444",
    "medium": "#f59e0b",
    "low": "#10b981",
}
TIME_RANGES = {
    "7days": 7,
    "30days": 30,
    "90days": 90,
    "all": None,
}
DEFAULT_TIME_RANGE = "7days"

INDIAN_STATES = [
    "Andhra Pradesh", "Arunachal Pradesh", "Assam", "Bihar", "Chhattisgarh",
    "Delhi", "Goa", "Gujarat", "Haryana", "Himachal Pradesh", "Jharkhand",
    "Karnataka", "Kerala", "Madhya Pradesh", "Maharashtra", "Manipur",
    "Meghalaya", "Mizoram", "Nagaland", "Odisha", "Punjab", "Rajasthan",
    "Sikkim", "Tamil Nadu", "Telangana", "Tripura", "Uttar Pradesh",
    "Uttarakhand", "West Bengal",
]

INDIAN_CITIES = {
    "Maharashtra": [
        "Mumbai", "Pune", "Nagpur", "Nashik", "Aurangabad", "Solapur", "Thane",
        "Navi Mumbai",
    ],
    "Delhi": [
        "New Delhi", "North Delhi", "South Delhi", "East Delhi", "West Delhi",
        "Central Delhi",
    ],
    "Karnataka": [
        "Bangalore", "Mysore", "Hubli", "Mangalore", "Belgaum", "Gulbarga", "Dharwad",
    ],
    "Tamil Nadu": [
        "Chennai", "Coimbatore", "Madurai", "Salem", "Tiruchirappalli", "Tiruppur",
        "Vellore",
    ],
    "West Bengal": [
        "Kolkata", "Howrah", "Durgapur", "Asansol", "Siliguri", "Bardhaman", "Malda",
    ],
    "Gujarat": [
        "Ahmedabad", "Surat", "Vadodara", "Rajkot", "Bhavnagar", "Jamnagar",
        "Gandhinagar",
    ],
    "Uttar Pradesh": [
        "Lucknow", "Kanpur", "Varanasi", "Agra", "Prayagraj", "Meerut", "Noida",
        "Ghaziabad",
    ],
}

# Moderation prompt
MODERATION_SYSTEM_PROMPT = (
    "You are an assistant that verifies if comments are related to a specific project."
)
MODERATION_USER_PROMPT = (
    'Is this comment relevant to the project? "{comment}" '
    "Reply with just 'YES' or 'NO'."
)
OFF_TOPIC_COMMENT_MESSAGE = "Comment must be related to the project."
