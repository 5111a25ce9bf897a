from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from glasscoverage.models import Coordinate

# Approximate centroid per 3-digit ZIP prefix. One point can stand in for a
# prefix spanning tens of miles; good enough for coverage hints only.
_PREFIX_LAT_LNG: dict[str, tuple[float, float]] = {
    # California (900-961)
    "900": (34.05, -118.25),  # Los Angeles
    "901": (34.05, -118.25),
    "902": (34.05, -118.25),  # Beverly Hills
    "903": (33.77, -118.19),  # Long Beach
    "904": (33.77, -118.19),
    "905": (33.77, -118.19),
    "906": (34.05, -118.25),
    "907": (34.05, -118.25),
    "908": (34.05, -118.25),
    "910": (34.18, -118.31),  # Pasadena
    "911": (34.18, -118.31),
    "912": (34.18, -118.31),
    "913": (34.18, -118.31),
    "914": (34.18, -118.31),
    "915": (34.18, -118.31),
    "916": (34.18, -118.31),
    "917": (34.05, -118.25),
    "918": (34.05, -118.25),
    "919": (34.42, -118.54),  # Santa Clarita
    "920": (32.72, -117.16),  # San Diego
    "921": (32.72, -117.16),
    "922": (33.00, -117.27),  # Carlsbad
    "923": (33.95, -117.40),  # Riverside
    "924": (33.95, -117.40),
    "925": (33.95, -117.40),
    "926": (33.68, -117.83),  # Irvine
    "927": (33.68, -117.83),
    "928": (33.68, -117.83),
    "930": (34.95, -120.44),  # Santa Barbara
    "931": (34.95, -120.44),
    "932": (34.27, -119.23),  # Ventura
    "933": (35.37, -119.02),  # Bakersfield
    "934": (34.42, -119.70),  # Santa Barbara
    "935": (36.60, -121.89),  # Monterey
    "936": (36.97, -122.03),  # Santa Cruz
    "937": (36.74, -119.79),  # Fresno
    "938": (36.74, -119.79),
    "939": (36.33, -119.29),  # Visalia
    "940": (37.77, -122.42),  # San Francisco
    "941": (37.77, -122.42),
    "942": (38.58, -121.49),  # Sacramento
    "943": (37.50, -122.25),  # Palo Alto
    "944": (37.55, -122.27),  # San Mateo
    "945": (37.80, -122.27),  # Oakland
    "946": (37.80, -122.27),
    "947": (37.87, -122.27),  # Berkeley
    "948": (37.87, -122.53),  # Richmond
    "949": (37.96, -122.35),  # San Rafael
    "950": (37.34, -121.89),  # San Jose
    "951": (37.34, -121.89),
    "952": (37.50, -121.97),  # Fremont
    "953": (37.50, -121.97),
    "954": (37.50, -121.97),
    "955": (40.80, -124.16),  # Eureka
    "956": (38.58, -121.49),  # Sacramento
    "957": (38.58, -121.49),
    "958": (38.58, -121.49),
    "959": (38.44, -122.71),  # Santa Rosa
    "960": (40.58, -122.39),  # Redding
    "961": (39.53, -119.81),  # Reno area

    # Texas (750-799)
    "750": (32.78, -96.80),  # Dallas
    "751": (32.78, -96.80),
    "752": (32.78, -96.80),
    "753": (32.78, -96.80),
    "754": (33.21, -97.13),  # Denton
    "755": (33.21, -97.13),
    "756": (31.55, -97.15),  # Waco
    "757": (31.55, -97.15),
    "758": (31.76, -106.49),  # El Paso
    "759": (31.76, -106.49),
    "760": (32.76, -97.33),  # Fort Worth
    "761": (32.76, -97.33),
    "762": (32.76, -97.33),
    "763": (33.44, -94.04),  # Texarkana
    "764": (32.35, -95.30),  # Tyler
    "765": (32.35, -95.30),
    "766": (33.64, -95.55),  # Paris
    "767": (33.90, -98.53),  # Wichita Falls
    "768": (32.45, -100.41),  # Abilene
    "769": (31.46, -100.44),  # San Angelo
    "770": (29.76, -95.37),  # Houston
    "771": (29.76, -95.37),
    "772": (29.76, -95.37),
    "773": (29.76, -95.37),
    "774": (29.76, -95.37),
    "775": (29.76, -95.37),
    "776": (30.08, -94.10),  # Beaumont
    "777": (30.08, -94.10),
    "778": (30.27, -97.74),  # Austin
    "779": (30.67, -96.37),  # Bryan
    "780": (29.42, -98.49),  # San Antonio
    "781": (29.42, -98.49),
    "782": (29.42, -98.49),
    "783": (27.80, -97.40),  # Corpus Christi
    "784": (27.80, -97.40),
    "785": (26.20, -98.23),  # McAllen
    "786": (30.27, -97.74),  # Austin
    "787": (30.27, -97.74),
    "788": (29.88, -97.94),  # San Marcos
    "789": (29.88, -97.94),
    "790": (35.22, -101.83),  # Amarillo
    "791": (35.22, -101.83),
    "792": (34.40, -103.20),  # Clovis
    "793": (33.58, -101.85),  # Lubbock
    "794": (33.58, -101.85),
    "795": (31.99, -102.08),  # Midland
    "796": (31.99, -102.08),
    "797": (31.99, -102.08),
    "798": (31.76, -106.49),  # El Paso
    "799": (31.76, -106.49),

    # Florida (320-349)
    "320": (30.33, -81.66),  # Jacksonville
    "321": (28.54, -81.38),  # Orlando
    "322": (30.33, -81.66),
    "323": (28.54, -81.38),
    "324": (29.65, -82.32),  # Gainesville
    "325": (30.44, -84.28),  # Tallahassee
    "326": (29.65, -82.32),
    "327": (28.54, -81.38),
    "328": (28.54, -81.38),
    "329": (28.54, -81.38),
    "330": (25.76, -80.19),  # Miami
    "331": (25.76, -80.19),
    "332": (25.76, -80.19),
    "333": (26.12, -80.14),  # Fort Lauderdale
    "334": (26.71, -80.05),  # West Palm Beach
    "335": (27.95, -82.46),  # Tampa
    "336": (27.95, -82.46),
    "337": (27.95, -82.46),
    "338": (28.04, -82.44),  # Brandon
    "339": (26.64, -81.87),  # Fort Myers
    "340": (18.47, -66.11),  # Puerto Rico
    "341": (26.64, -81.87),
    "342": (27.77, -82.64),  # St. Petersburg
    "343": (27.77, -82.64),
    "344": (29.21, -81.02),  # Daytona Beach
    "346": (27.95, -82.46),
    "347": (28.54, -81.38),
    "349": (26.10, -80.20),  # Pompano Beach

    # Arizona (850-865)
    "850": (33.45, -112.07),  # Phoenix
    "851": (33.45, -112.07),
    "852": (33.45, -112.07),
    "853": (33.45, -112.07),
    "854": (33.42, -111.83),  # Mesa
    "855": (33.42, -111.83),
    "856": (33.42, -111.83),
    "857": (32.22, -110.97),  # Tucson
    "858": (32.22, -110.97),
    "859": (34.54, -112.47),  # Prescott
    "860": (35.20, -111.65),  # Flagstaff
    "863": (36.06, -112.14),  # Grand Canyon
    "864": (34.87, -114.00),  # Lake Havasu
    "865": (32.73, -114.62),  # Yuma

    # Nevada (889-898)
    "889": (36.17, -115.14),  # Las Vegas
    "890": (36.17, -115.14),
    "891": (36.17, -115.14),
    "893": (36.04, -114.98),  # Henderson
    "894": (39.53, -119.81),  # Reno
    "895": (39.53, -119.81),
    "896": (36.17, -115.14),
    "897": (39.16, -119.77),  # Carson City
    "898": (40.84, -115.76),  # Elko

    # Colorado (800-816)
    "800": (39.74, -104.99),  # Denver
    "801": (39.74, -104.99),
    "802": (39.74, -104.99),
    "803": (39.86, -104.67),  # Aurora
    "804": (39.74, -104.99),
    "805": (40.02, -105.27),  # Boulder
    "806": (40.59, -105.08),  # Fort Collins
    "807": (40.59, -105.08),
    "808": (38.83, -104.82),  # Colorado Springs
    "809": (38.83, -104.82),
    "810": (38.83, -104.82),
    "811": (37.27, -107.88),  # Durango
    "812": (38.54, -106.93),  # Gunnison
    "813": (37.27, -107.88),
    "814": (39.06, -108.55),  # Grand Junction
    "815": (39.06, -108.55),
    "816": (40.42, -104.71),  # Greeley

    # New York (100-149)
    "100": (40.71, -74.01),  # New York City
    "101": (40.71, -74.01),
    "102": (40.71, -74.01),
    "103": (40.64, -74.08),  # Staten Island
    "104": (40.64, -74.08),
    "105": (40.93, -73.90),  # Yonkers
    "106": (40.95, -73.73),  # White Plains
    "107": (40.95, -73.73),
    "108": (41.03, -73.63),  # Stamford area
    "109": (41.06, -73.87),  # Suffern
    "110": (40.65, -73.95),  # Brooklyn
    "111": (40.65, -73.95),
    "112": (40.65, -73.95),
    "113": (40.70, -73.85),  # Queens
    "114": (40.70, -73.85),
    "115": (40.79, -73.13),  # Long Island
    "116": (40.79, -73.13),
    "117": (40.79, -73.13),
    "118": (40.79, -73.13),
    "119": (40.79, -73.13),
    "120": (42.65, -73.75),  # Albany
    "121": (42.65, -73.75),
    "122": (42.65, -73.75),
    "123": (42.82, -73.94),  # Schenectady
    "124": (41.70, -73.92),  # Poughkeepsie
    "125": (41.70, -73.92),
    "126": (41.70, -73.92),
    "127": (41.50, -74.01),  # Newburgh
    "128": (44.69, -73.45),  # Plattsburgh
    "129": (44.69, -73.45),
    "130": (43.05, -76.15),  # Syracuse
    "131": (43.05, -76.15),
    "132": (43.05, -76.15),
    "133": (43.10, -75.23),  # Utica
    "134": (43.10, -75.23),
    "135": (43.10, -75.23),
    "136": (44.00, -75.50),  # Watertown
    "137": (42.10, -76.80),  # Binghamton
    "138": (42.10, -76.80),
    "139": (42.10, -76.80),
    "140": (42.89, -78.88),  # Buffalo
    "141": (42.89, -78.88),
    "142": (42.89, -78.88),
    "143": (43.16, -77.61),  # Rochester
    "144": (43.16, -77.61),
    "145": (43.16, -77.61),
    "146": (43.16, -77.61),
    "147": (42.44, -76.50),  # Ithaca
    "148": (42.09, -79.24),  # Jamestown
    "149": (42.09, -79.24),

    # Illinois (600-629)
    "600": (41.88, -87.63),  # Chicago
    "601": (41.88, -87.63),
    "602": (41.88, -87.63),
    "603": (41.88, -87.63),
    "604": (41.88, -87.63),
    "605": (41.88, -87.63),
    "606": (41.88, -87.63),
    "607": (41.88, -87.63),
    "608": (41.88, -87.63),
    "609": (42.04, -87.69),  # Evanston
    "610": (42.28, -89.09),  # Rockford
    "611": (42.28, -89.09),
    "612": (42.28, -89.09),
    "613": (41.51, -90.58),  # Rock Island
    "614": (41.51, -90.58),
    "615": (40.69, -89.59),  # Peoria
    "616": (40.69, -89.59),
    "617": (40.48, -88.99),  # Bloomington
    "618": (38.52, -89.99),  # Belleville
    "619": (38.52, -89.99),
    "620": (39.78, -89.65),  # Springfield
    "622": (38.63, -90.20),  # St. Louis area
    "623": (40.12, -88.24),  # Champaign
    "624": (41.93, -89.07),  # Dixon
    "625": (39.78, -89.65),
    "626": (39.78, -89.65),
    "627": (39.78, -89.65),
    "628": (38.30, -88.93),  # Centralia
    "629": (37.73, -89.22),  # Carbondale

    # Georgia (300-319)
    "300": (33.75, -84.39),  # Atlanta
    "301": (33.75, -84.39),
    "302": (33.75, -84.39),
    "303": (33.75, -84.39),
    "304": (33.65, -84.45),  # College Park
    "305": (33.95, -84.55),  # Marietta
    "306": (33.95, -84.55),
    "307": (34.87, -85.29),  # Chattanooga area
    "308": (33.47, -81.97),  # Augusta
    "309": (33.47, -81.97),
    "310": (32.08, -81.09),  # Savannah
    "311": (33.75, -84.39),
    "312": (32.46, -84.99),  # Columbus
    "313": (32.46, -84.99),
    "314": (32.84, -83.63),  # Macon
    "315": (31.58, -84.16),  # Albany
    "316": (31.21, -81.50),  # Brunswick
    "317": (31.58, -84.16),
    "318": (32.08, -81.09),
    "319": (33.75, -84.39),

    # Pennsylvania (150-196)
    "150": (40.44, -79.99),  # Pittsburgh
    "151": (40.44, -79.99),
    "152": (40.44, -79.99),
    "153": (40.44, -79.99),
    "154": (40.44, -79.99),
    "155": (40.32, -78.92),  # Johnstown
    "156": (40.32, -78.92),
    "157": (40.32, -78.92),
    "158": (40.51, -78.40),  # Altoona
    "159": (40.51, -78.40),
    "160": (41.41, -75.66),  # Scranton
    "161": (41.41, -75.66),
    "162": (41.41, -75.66),
    "163": (42.13, -80.09),  # Erie
    "164": (42.13, -80.09),
    "165": (42.13, -80.09),
    "166": (40.27, -76.88),  # Harrisburg
    "167": (41.24, -77.00),  # Williamsport
    "168": (40.27, -76.88),
    "169": (41.00, -76.45),  # Bloomsburg
    "170": (40.27, -76.88),
    "171": (40.27, -76.88),
    "172": (40.04, -76.31),  # Lancaster
    "173": (39.96, -76.73),  # York
    "174": (39.96, -76.73),
    "175": (40.04, -76.31),
    "176": (40.34, -75.93),  # Reading
    "177": (41.24, -77.00),
    "178": (40.61, -75.49),  # Allentown
    "179": (40.61, -75.49),
    "180": (40.61, -75.49),
    "181": (40.61, -75.49),
    "182": (40.93, -75.07),  # Stroudsburg
    "183": (40.61, -75.49),
    "184": (41.41, -75.66),
    "185": (41.41, -75.66),
    "186": (41.41, -75.66),
    "187": (41.24, -76.92),  # Wilkes-Barre
    "188": (41.24, -76.92),
    "189": (40.00, -75.25),  # Philadelphia area
    "190": (39.95, -75.17),  # Philadelphia
    "191": (39.95, -75.17),
    "192": (39.95, -75.17),
    "193": (39.95, -75.17),
    "194": (40.12, -75.34),  # Norristown
    "195": (40.12, -75.34),
    "196": (39.87, -75.42),  # Chester

    # Ohio (430-458)
    "430": (39.96, -83.00),  # Columbus
    "431": (39.96, -83.00),
    "432": (39.96, -83.00),
    "433": (39.96, -83.00),
    "434": (40.07, -82.43),  # Newark
    "435": (40.77, -82.52),  # Mansfield
    "436": (41.50, -81.69),  # Cleveland
    "437": (41.24, -81.35),  # Akron
    "438": (41.24, -81.35),
    "439": (40.80, -81.38),  # Canton
    "440": (41.50, -81.69),
    "441": (41.50, -81.69),
    "442": (41.50, -81.69),
    "443": (41.50, -81.69),
    "444": (41.10, -81.52),  # Youngstown
    "445": (41.10, -80.65),
    "446": (40.80, -81.38),
    "447": (40.80, -81.38),
    "448": (41.24, -81.35),
    "449": (41.24, -81.35),
    "450": (39.10, -84.51),  # Cincinnati
    "451": (39.10, -84.51),
    "452": (39.10, -84.51),
    "453": (39.76, -84.19),  # Dayton
    "454": (39.76, -84.19),
    "455": (39.93, -84.20),  # Springfield
    "456": (39.33, -82.98),  # Chillicothe
    "457": (39.37, -81.35),  # Parkersburg
    "458": (39.35, -82.10),  # Athens

    # Michigan (480-499)
    "480": (42.33, -83.05),  # Detroit
    "481": (42.33, -83.05),
    "482": (42.33, -83.05),
    "483": (42.33, -83.05),
    "484": (43.01, -83.69),  # Flint
    "485": (43.01, -83.69),
    "486": (43.42, -83.95),  # Saginaw
    "487": (43.42, -83.95),
    "488": (42.73, -84.56),  # Lansing
    "489": (42.73, -84.56),
    "490": (42.29, -85.59),  # Kalamazoo
    "491": (42.29, -85.59),
    "492": (42.24, -84.40),  # Jackson
    "493": (42.96, -85.67),  # Grand Rapids
    "494": (42.96, -85.67),
    "495": (42.96, -85.67),
    "496": (44.76, -85.62),  # Traverse City
    "497": (44.76, -85.62),
    "498": (46.50, -84.35),  # Sault Ste. Marie
    "499": (46.55, -87.40),  # Marquette

    # Washington (980-994)
    "980": (47.61, -122.33),  # Seattle
    "981": (47.61, -122.33),
    "982": (47.61, -122.33),
    "983": (47.61, -122.33),
    "984": (47.25, -122.44),  # Tacoma
    "985": (47.04, -122.90),  # Olympia
    "986": (45.64, -122.67),  # Portland area
    "988": (46.60, -120.51),  # Yakima
    "989": (46.60, -120.51),
    "990": (47.66, -117.43),  # Spokane
    "991": (47.66, -117.43),
    "992": (47.66, -117.43),
    "993": (46.73, -117.00),  # Pullman
    "994": (46.28, -119.28),  # Richland

    # Oregon (970-979)
    "970": (45.52, -122.68),  # Portland
    "971": (45.52, -122.68),
    "972": (45.52, -122.68),
    "973": (44.94, -123.03),  # Salem
    "974": (44.05, -123.09),  # Eugene
    "975": (42.33, -122.87),  # Medford
    "976": (43.22, -123.36),  # Roseburg
    "977": (44.05, -121.32),  # Bend
    "978": (45.85, -119.29),  # Pendleton
    "979": (45.85, -119.29),

    # Tennessee (370-385)
    "370": (36.16, -86.78),  # Nashville
    "371": (36.16, -86.78),
    "372": (36.16, -86.78),
    "373": (35.05, -85.31),  # Chattanooga
    "374": (35.05, -85.31),
    "375": (35.96, -83.92),  # Knoxville
    "376": (36.30, -82.35),  # Johnson City
    "377": (35.96, -83.92),
    "378": (35.96, -83.92),
    "379": (35.96, -83.92),
    "380": (35.15, -90.05),  # Memphis
    "381": (35.15, -90.05),
    "382": (35.60, -88.81),  # Jackson
    "383": (35.60, -88.81),
    "384": (35.75, -86.93),  # Murfreesboro
    "385": (35.04, -85.30),

    # Massachusetts (010-027)
    "010": (42.10, -72.59),  # Springfield
    "011": (42.10, -72.59),
    "012": (42.10, -72.59),
    "013": (42.10, -72.59),
    "014": (42.27, -71.80),  # Worcester
    "015": (42.27, -71.80),
    "016": (42.27, -71.80),
    "017": (42.46, -71.29),  # Lowell
    "018": (42.46, -71.29),
    "019": (42.52, -70.89),  # Lynn
    "020": (42.36, -71.06),  # Boston
    "021": (42.36, -71.06),
    "022": (42.36, -71.06),
    "023": (42.09, -71.02),  # Brockton
    "024": (42.36, -71.06),
    "025": (41.70, -70.30),  # Cape Cod
    "026": (41.70, -70.30),
    "027": (41.64, -70.93),  # New Bedford

    # New Jersey (070-089)
    "070": (40.74, -74.17),  # Newark
    "071": (40.74, -74.17),
    "072": (40.49, -74.45),  # New Brunswick
    "073": (40.72, -74.04),  # Jersey City
    "074": (40.88, -74.04),  # Hackensack
    "075": (40.86, -74.23),  # Paterson
    "076": (40.86, -74.23),
    "077": (40.73, -74.07),  # Red Bank
    "078": (40.73, -74.07),
    "079": (40.73, -74.07),
    "080": (39.95, -75.12),  # Camden
    "081": (39.95, -75.12),
    "082": (39.47, -74.26),  # Atlantic City
    "083": (39.47, -74.26),
    "084": (39.47, -74.26),
    "085": (40.22, -74.76),  # Trenton
    "086": (40.22, -74.76),
    "087": (40.35, -74.07),  # Long Branch
    "088": (39.93, -74.88),  # Moorestown
    "089": (39.93, -74.88),
}

ZIP_PREFIX_COORDINATES: Mapping[str, Coordinate] = MappingProxyType(
    {prefix: Coordinate(lat, lng) for prefix, (lat, lng) in _PREFIX_LAT_LNG.items()}
)


def covered_prefixes() -> list[str]:
    return sorted(ZIP_PREFIX_COORDINATES)
