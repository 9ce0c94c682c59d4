"""Self-identifying product lines that need no brand prefix."""

import re

STANDALONE_PRODUCT_PATTERNS: list[tuple[str, str]] = [
    (r"\b(AirPods(?:\s*(?:Pro|Max))?(?:\s*\(?(?:2nd|3rd|4th)\s*(?:gen(?:eration)?)\)?)?(?:\s*\d)?)\b", "Audio"),
    (r"\b(Galaxy\s*(?:Buds|Watch|Tab|S\d{2}|Z\s*(?:Fold|Flip)|Fit|Ring)(?:\s*\d+)?(?:\s*(?:Pro|Plus|Ultra|FE|SE))?)\b", "Electronics"),
    (r"\b(Pixel\s*(?:\d+[a]?|Buds|Watch|Tablet)(?:\s*(?:Pro|a|XL))?)\b", "Electronics"),
    (r"\b(iPhone\s*(?:\d{2,})?(?:\s*(?:Pro|Max|Plus|SE|mini))*)\b", "Electronics"),
    (r"\b(iPad\s*(?:Pro|Air|Mini)?(?:\s*(?:\d+|M\d))?)\b", "Electronics"),
    (r"\b(MacBook\s*(?:Air|Pro)?(?:\s*(?:\d+|M\d))?)\b", "Electronics"),
    (r"\b(Apple\s*Watch(?:\s*(?:Series|SE|Ultra)\s*\d*)?)\b", "Fitness"),
    (r"\b(Echo\s*(?:Dot|Show|Studio|Pop|Hub)?(?:\s*(?:\d+|Gen\s*\d+))?)\b", "Electronics"),
    (r"\b(Kindle\s*(?:Paperwhite|Oasis|Scribe|Colorsoft|Kids)?)\b", "Electronics"),
    (r"\b(Fire\s*(?:TV|Stick|Tablet|HD|Max)(?:\s*\d+)?(?:\s*(?:Lite|Max|Kids|Plus))?)\b", "Electronics"),
    (r"\b(PlayStation\s*(?:\d|VR\d*)(?:\s*(?:Pro|Slim|Digital))?)\b", "Gaming"),
    (r"\b(Xbox\s*(?:Series\s*[XS]|One(?:\s*[XS])?))\b", "Gaming"),
    (r"\b(Nintendo\s*Switch(?:\s*(?:OLED|Lite|2))?)\b", "Gaming"),
    (r"\b(Steam\s*Deck(?:\s*(?:OLED|LCD))?)\b", "Gaming"),
    (r"\b(Meta\s*Quest\s*\d+(?:\s*S)?)\b", "Gaming"),
    (r"\b(Instant\s*Pot(?:\s*(?:Duo|Pro|Ultra|Vortex|Slim|Plus))?(?:\s*\d+)?)\b", "Kitchen"),
    (r"\b(Roomba\s*(?:[a-z]?\d{3,4}|Combo|j\d+|s\d+|i\d+|e\d+))\b", "Home"),
    (r"\b(Fitbit\s*(?:Charge|Versa|Sense|Luxe|Inspire|Ace)\s*\d*(?:\s*(?:SE|Special))?)\b", "Fitness"),
    (r"\b(Garmin\s*(?:Forerunner|Fenix|Venu|Instinct|Enduro|Lily|Vivomove|Vivoactive|Epix|Descent)\s*\d*(?:\s*[A-Za-z]+)?)\b", "Fitness"),
    (r"\b(Dyson\s*(?:V\d+|Airwrap|Supersonic|Pure|Big\s*Quiet|Zone|Airstrait|Corrale)(?:\s*(?:Absolute|Animal|Motorhead|Detect|Complete|Origin))?)\b", "Home"),
    (r"\b(Sonos\s*(?:One|Beam|Arc|Sub|Move|Roam|Era|Port|Amp|Ray)\s*\d*(?:\s*(?:SL|Gen\s*\d+))?)\b", "Audio"),
    (r"\b(Oura\s*Ring\s*(?:Gen\s*\d+|\d+)?)\b", "Fitness"),
    (r"\b(Ring\s*(?:Doorbell|Camera|Alarm|Floodlight|Spotlight|Stick\s*Up)(?:\s*(?:Pro|Plus|Elite|Wired|\d+))?)\b", "Home"),
    (r"\b(Nest\s*(?:Thermostat|Cam|Doorbell|Hub|Mini|Audio|Wifi|Learning)(?:\s*(?:Pro|Max|Indoor|Outdoor|\d+))?)\b", "Home"),
    (r"\b(Surface\s*(?:Pro|Laptop|Go|Studio|Book|Duo)\s*\d*)\b", "Electronics"),
    (r"\b(ThinkPad\s*[A-Z]\d+(?:\s*(?:Gen\s*\d+|s|i|Carbon))?)\b", "Electronics"),
    (r"\b(YETI\s*(?:Rambler|Tundra|Roadie|Hopper|Panga|LoadOut|Flip)(?:\s*\d+)?)\b", "Outdoor"),
    (r"\b(Hydro\s*Flask\s*(?:\d+\s*oz|Wide|Standard|Trail|Coffee)?)\b", "Outdoor"),
    (r"\b(Stanley\s*(?:Quencher|Classic|IceFlow|Adventure|Quick\s*Flip)(?:\s*\d+\s*oz)?)\b", "Outdoor"),
    (r"\b(WH-1000XM\d)\b", "Audio"),
    (r"\b(QC\s*(?:\d+|Ultra|Earbuds|45))\b", "Audio"),
]

COMPILED_STANDALONE_PATTERNS: list[tuple[re.Pattern, str]] = [
    (re.compile(pattern, re.IGNORECASE), category)
    for pattern, category in STANDALONE_PRODUCT_PATTERNS
]
