BRAND_DATABASE: dict[str, dict] = {
    # Tech / Electronics
    "apple": {"category": "Electronics", "aliases": ["apple"]},
    "samsung": {"category": "Electronics", "aliases": ["samsung", "galaxy"]},
    "sony": {"category": "Electronics", "aliases": ["sony"]},
    "google": {"category": "Electronics", "aliases": ["google", "pixel", "nest"]},
    "microsoft": {"category": "Electronics", "aliases": ["microsoft", "surface"]},
    "amazon": {"category": "Electronics", "aliases": ["amazon", "echo", "kindle", "fire", "ring", "blink", "eero"]},
    "bose": {"category": "Audio", "aliases": ["bose"]},
    "jbl": {"category": "Audio", "aliases": ["jbl"]},
    "beats": {"category": "Audio", "aliases": ["beats"]},
    "sennheiser": {"category": "Audio", "aliases": ["sennheiser"]},
    "audio-technica": {"category": "Audio", "aliases": ["audio-technica", "audio technica"]},
    "logitech": {"category": "Peripherals", "aliases": ["logitech", "logi"]},
    "razer": {"category": "Peripherals", "aliases": ["razer"]},
    "corsair": {"category": "Peripherals", "aliases": ["corsair"]},
    "steelseries": {"category": "Peripherals", "aliases": ["steelseries"]},
    "hyperx": {"category": "Peripherals", "aliases": ["hyperx"]},
    # Fitness
    "fitbit": {"category": "Fitness", "aliases": ["fitbit"]},
    "garmin": {"category": "Fitness", "aliases": ["garmin"]},
    "polar": {"category": "Fitness", "aliases": ["polar"]},
    "suunto": {"category": "Fitness", "aliases": ["suunto"]},
    "coros": {"category": "Fitness", "aliases": ["coros"]},
    "amazfit": {"category": "Fitness", "aliases": ["amazfit"]},
    "whoop": {"category": "Fitness", "aliases": ["whoop"]},
    "oura": {"category": "Fitness", "aliases": ["oura"]},
    "theragun": {"category": "Fitness", "aliases": ["theragun", "therabody"]},
    "hyperice": {"category": "Fitness", "aliases": ["hyperice", "hypervolt"]},
    "peloton": {"category": "Fitness", "aliases": ["peloton"]},
    "nordictrack": {"category": "Fitness", "aliases": ["nordictrack"]},
    "bowflex": {"category": "Fitness", "aliases": ["bowflex"]},
    # Footwear
    "nike": {"category": "Footwear", "aliases": ["nike"]},
    "adidas": {"category": "Footwear", "aliases": ["adidas"]},
    "under armour": {"category": "Footwear", "aliases": ["under armour", "ua"]},
    "asics": {"category": "Footwear", "aliases": ["asics"]},
    "brooks": {"category": "Footwear", "aliases": ["brooks"]},
    "new balance": {"category": "Footwear", "aliases": ["new balance", "nb"]},
    "hoka": {"category": "Footwear", "aliases": ["hoka", "hoka one one"]},
    "saucony": {"category": "Footwear", "aliases": ["saucony"]},
    "on": {"category": "Footwear", "aliases": ["on cloud", "on running"]},
    # Kitchen
    "ninja": {"category": "Kitchen", "aliases": ["ninja"]},
    "vitamix": {"category": "Kitchen", "aliases": ["vitamix"]},
    "kitchenaid": {"category": "Kitchen", "aliases": ["kitchenaid", "kitchen aid"]},
    "cuisinart": {"category": "Kitchen", "aliases": ["cuisinart"]},
    "breville": {"category": "Kitchen", "aliases": ["breville"]},
    "instant pot": {"category": "Kitchen", "aliases": ["instant pot", "instantpot"]},
    "nutribullet": {"category": "Kitchen", "aliases": ["nutribullet", "nutri bullet"]},
    "keurig": {"category": "Kitchen", "aliases": ["keurig"]},
    "nespresso": {"category": "Kitchen", "aliases": ["nespresso"]},
    # Home
    "dyson": {"category": "Home", "aliases": ["dyson"]},
    "shark": {"category": "Home", "aliases": ["shark"]},
    "irobot": {"category": "Home", "aliases": ["irobot", "roomba"]},
    "roborock": {"category": "Home", "aliases": ["roborock"]},
    "eufy": {"category": "Home", "aliases": ["eufy"]},
    "ecovacs": {"category": "Home", "aliases": ["ecovacs", "deebot"]},
    "sonos": {"category": "Home", "aliases": ["sonos"]},
    "philips hue": {"category": "Home", "aliases": ["philips hue", "hue"]},
    "nanoleaf": {"category": "Home", "aliases": ["nanoleaf"]},
    "govee": {"category": "Home", "aliases": ["govee"]},
    # Camera / Drone
    "canon": {"category": "Camera", "aliases": ["canon"]},
    "nikon": {"category": "Camera", "aliases": ["nikon"]},
    "gopro": {"category": "Camera", "aliases": ["gopro", "go pro"]},
    "dji": {"category": "Camera", "aliases": ["dji"]},
    "fujifilm": {"category": "Camera", "aliases": ["fujifilm", "fuji"]},
    # Outdoor
    "yeti": {"category": "Outdoor", "aliases": ["yeti"]},
    "hydro flask": {"category": "Outdoor", "aliases": ["hydro flask", "hydroflask"]},
    "stanley": {"category": "Outdoor", "aliases": ["stanley"]},
    "osprey": {"category": "Outdoor", "aliases": ["osprey"]},
    "thule": {"category": "Outdoor", "aliases": ["thule"]},
    "rei": {"category": "Outdoor", "aliases": ["rei"]},
    # Gaming
    "nintendo": {"category": "Gaming", "aliases": ["nintendo"]},
    "playstation": {"category": "Gaming", "aliases": ["playstation", "ps5", "ps4"]},
    "xbox": {"category": "Gaming", "aliases": ["xbox"]},
    "valve": {"category": "Gaming", "aliases": ["valve", "steam deck"]},
    "meta": {"category": "Gaming", "aliases": ["meta", "meta quest", "oculus"]},
    # Supplements
    "optimum nutrition": {"category": "Supplements", "aliases": ["optimum nutrition", "on gold standard"]},
    "myprotein": {"category": "Supplements", "aliases": ["myprotein"]},
    "ghost": {"category": "Supplements", "aliases": ["ghost"]},
    "transparent labs": {"category": "Supplements", "aliases": ["transparent labs"]},
    "lmnt": {"category": "Supplements", "aliases": ["lmnt"]},
    # Power / Charging
    "anker": {"category": "Electronics", "aliases": ["anker"]},
    "belkin": {"category": "Electronics", "aliases": ["belkin"]},
    "ugreen": {"category": "Electronics", "aliases": ["ugreen"]},
    "jackery": {"category": "Electronics", "aliases": ["jackery"]},
    "ecoflow": {"category": "Electronics", "aliases": ["ecoflow"]},
    # Furniture / Office
    "secretlab": {"category": "Furniture", "aliases": ["secretlab"]},
    "herman miller": {"category": "Furniture", "aliases": ["herman miller"]},
    "steelcase": {"category": "Furniture", "aliases": ["steelcase"]},
    "flexispot": {"category": "Furniture", "aliases": ["flexispot"]},
}

BRAND_ALIAS_MAP: dict[str, str] = {
    alias.lower(): brand
    for brand, entry in BRAND_DATABASE.items()
    for alias in entry["aliases"]
}

KNOWN_BRANDS = set(BRAND_DATABASE)
