"""
Canonical Pirate's Quest data: stations, timetable, crews and programmes.

Each timed slot sends two groups to each of the eight stations, so every
group plays seven stations before the free-for-all finale.
"""

ACTIVITIES = [
    {
        "id": "mermaids-lagoon",
        "theme": "Mermaid's Lagoon",
        "description": (
            "Dive into the mystical waters where mermaids once sang their enchanting songs. "
            "Decipher the ancient rebus puzzles left by the sea maidens to unlock the secrets "
            "hidden beneath the waves. Only those who can read the symbolic language of the "
            "deep will discover the treasure."
        ),
        "location": "Arc TR",
        "order": 1,
    },
    {
        "id": "krakens-wrath",
        "theme": "Kraken's Wrath",
        "description": (
            "Face the legendary sea monster in this thrilling Ddjaki challenge. Test your "
            "courage and precision as you battle against the mighty tentacles of the deep. "
            "Master the ancient throwing technique to defeat the kraken and claim victory "
            "over the seas."
        ),
        "location": "LWN",
        "order": 2,
    },
    {
        "id": "cursed-compass",
        "theme": "Cursed Compass",
        "description": (
            "Follow the cursed compass through the explosive Splat! challenge. Navigate "
            "through twisted paths where one wrong move could spell disaster. Only pirates "
            "with quick reflexes and steady nerves can break the ancient curse and find the "
            "hidden treasure."
        ),
        "location": "AIA",
        "order": 3,
    },
    {
        "id": "plank-duel",
        "theme": "Plank Duel",
        "description": (
            "Walk the plank in this nerve-wracking Eraser Game challenge. Test your steady "
            "hand and unwavering focus as you balance on the edge of defeat. One false move "
            "and you'll be swimming with the fishes - only the most precise pirates survive "
            "this deadly duel."
        ),
        "location": "Outside Audi",
        "order": 4,
    },
    {
        "id": "isle-of-echoes",
        "theme": "Isle of Echoes",
        "description": (
            "On this mysterious island, every melody holds a secret message. Listen "
            "carefully to the songs of old pirates in this musical challenge. Use your keen "
            "ear and knowledge of sea shanties to identify the tunes that will guide you to "
            "the legendary treasure."
        ),
        "location": "Hive",
        "order": 5,
    },
    {
        "id": "cannonball-clash",
        "theme": "Cannonball Clash",
        "description": (
            "Load the cannons and prepare for the Frog Game battle! This high-energy "
            "challenge tests your aim and timing as you launch attacks against rival crews. "
            "Master the art of precision warfare to dominate the seas in this epic pirate "
            "showdown."
        ),
        "location": "GAIA",
        "order": 6,
    },
    {
        "id": "tropical-trickery",
        "theme": "Tropical Trickery",
        "description": (
            "Navigate through a maze of tropical traps and tricky Yes or No decisions. What "
            "seems obvious may be a trap, and what appears impossible might be your "
            "salvation. Trust your instincts and choose wisely in this mind-bending pirate "
            "puzzle."
        ),
        "location": "HSS",
        "order": 7,
    },
    {
        "id": "blazing-buccaneers",
        "theme": "Blazing Buccaneers",
        "description": (
            "The final challenge where legends are born! Master the ancient art of Chapteh "
            "in this blazing finale. Show off your footwork and coordination skills as you "
            "compete for the ultimate pirate glory. Only true buccaneers can conquer this "
            "legendary test."
        ),
        "location": "CHC/Outside Can B",
        "order": 8,
    },
]

# station order -> groups, per slot
TIME_SLOTS = [
    {
        "start_time": "8:45",
        "end_time": "9:05",
        "activities": {
            1: [1, 2], 2: [3, 4], 3: [5, 6], 4: [7, 8], 5: [9, 10], 6: [11, 12], 7: [13, 14], 8: [15, 16]
        },
    },
    {
        "start_time": "9:05",
        "end_time": "9:25",
        "activities": {
            1: [3, 5], 2: [1, 6], 3: [7, 2], 4: [9, 4], 5: [11, 8], 6: [13, 15], 7: [10, 16], 8: [14, 12]
        },
    },
    {
        "start_time": "9:25",
        "end_time": "9:45",
        "activities": {
            1: [8, 4], 2: [10, 2], 3: [12, 1], 4: [5, 11], 5: [13, 16], 6: [3, 14], 7: [6, 15], 8: [7, 9]
        },
    },
    {
        "start_time": "9:45",
        "end_time": "10:05",
        "activities": {
            1: [13, 6], 2: [11, 14], 3: [4, 16], 4: [1, 10], 5: [7, 15], 6: [2, 9], 7: [3, 12], 8: [8, 5]
        },
    },
    {
        "start_time": "10:05",
        "end_time": "10:25",
        "activities": {
            1: [7, 16], 2: [15, 5], 3: [14, 9], 4: [6, 12], 5: [2, 3], 6: [1, 8], 7: [4, 11], 8: [10, 13]
        },
    },
    {
        "start_time": "10:25",
        "end_time": "10:45",
        "activities": {
            1: [14, 10], 2: [7, 12], 3: [8, 15], 4: [2, 13], 5: [6, 4], 6: [5, 16], 7: [1, 9], 8: [3, 11]
        },
    },
    {
        "start_time": "10:45",
        "end_time": "11:05",
        "activities": {
            1: [11, 15], 2: [13, 9], 3: [10, 3], 4: [14, 16], 5: [12, 5], 6: [6, 7], 7: [2, 8], 8: [4, 1]
        },
    },
    {
        "start_time": "11:05",
        "end_time": "11:25",
        "activities": {1: [], 2: [], 3: [], 4: [], 5: [], 6: [], 7: [], 8: []},
        "free_for_all": True,
    },
]

GROUPS = {
    1: "The Wave Warriors",
    2: "The Tidal Titans",
    3: "The Freewind Pirates",
    4: "The Treasure Trackers",
    5: "The Storm Riders",
    6: "The Moonlit Mariners",
    7: "The Seafaring Legends",
    8: "The Compass Crusaders",
    9: "The Rising Tide",
    10: "The Majestic Raiders",
    11: "The Horizon Hopper",
    12: "The Infinite Navigators",
    13: "The Gallant Privateers",
    14: "The Celestial Sailors",
    15: "The Admiral's Pride",
    16: "The Silver Shark",
}

PROGRAMMES = ["ASEAN Summer", "INSPIRASI"]

TIMED_STATION_COUNT = 7
