from __future__ import annotations

from typing import Iterable

from glasscoverage.models import ServiceLocation

DEFAULT_PHONE = "(760) 715-3400"

# (id, name, city, state, zip, lat, lng, service radius in miles)
_MOBILE_SERVICE_CENTERS: list[tuple[str, str, str, str, str, float, float, int]] = [
    # CALIFORNIA
    ("ca-san-diego", "San Diego", "San Diego", "CA", "92101", 32.7157, -117.1611, 50),
    ("ca-los-angeles", "Los Angeles", "Los Angeles", "CA", "90001", 34.0522, -118.2437, 60),
    ("ca-san-francisco", "San Francisco", "San Francisco", "CA", "94102", 37.7749, -122.4194, 40),
    ("ca-sacramento", "Sacramento", "Sacramento", "CA", "95814", 38.5816, -121.4944, 50),
    ("ca-fresno", "Fresno", "Fresno", "CA", "93721", 36.7378, -119.7871, 50),
    ("ca-riverside", "Riverside", "Riverside", "CA", "92501", 33.9533, -117.3962, 40),
    ("ca-oakland", "Oakland", "Oakland", "CA", "94612", 37.8044, -122.2712, 35),
    ("ca-san-jose", "San Jose", "San Jose", "CA", "95113", 37.3382, -121.8863, 40),
    ("ca-irvine", "Irvine", "Irvine", "CA", "92618", 33.6846, -117.8265, 35),
    ("ca-long-beach", "Long Beach", "Long Beach", "CA", "90802", 33.7701, -118.1937, 35),

    # TEXAS
    ("tx-houston", "Houston", "Houston", "TX", "77001", 29.7604, -95.3698, 60),
    ("tx-dallas", "Dallas", "Dallas", "TX", "75201", 32.7767, -96.7970, 50),
    ("tx-san-antonio", "San Antonio", "San Antonio", "TX", "78205", 29.4241, -98.4936, 50),
    ("tx-austin", "Austin", "Austin", "TX", "78701", 30.2672, -97.7431, 50),
    ("tx-fort-worth", "Fort Worth", "Fort Worth", "TX", "76102", 32.7555, -97.3308, 45),
    ("tx-el-paso", "El Paso", "El Paso", "TX", "79901", 31.7619, -106.4850, 50),
    ("tx-the-woodlands", "The Woodlands", "The Woodlands", "TX", "77380", 30.1658, -95.4613, 30),

    # FLORIDA
    ("fl-miami", "Miami", "Miami", "FL", "33101", 25.7617, -80.1918, 50),
    ("fl-tampa", "Tampa", "Tampa", "FL", "33602", 27.9506, -82.4572, 50),
    ("fl-orlando", "Orlando", "Orlando", "FL", "32801", 28.5383, -81.3792, 50),
    ("fl-jacksonville", "Jacksonville", "Jacksonville", "FL", "32202", 30.3322, -81.6557, 50),
    ("fl-fort-lauderdale", "Fort Lauderdale", "Fort Lauderdale", "FL", "33301", 26.1224, -80.1373, 40),

    # ARIZONA
    ("az-phoenix", "Phoenix", "Phoenix", "AZ", "85001", 33.4484, -112.0740, 60),
    ("az-tucson", "Tucson", "Tucson", "AZ", "85701", 32.2226, -110.9747, 50),
    ("az-mesa", "Mesa", "Mesa", "AZ", "85201", 33.4152, -111.8315, 40),
    ("az-scottsdale", "Scottsdale", "Scottsdale", "AZ", "85251", 33.4942, -111.9261, 35),

    # NEVADA
    ("nv-las-vegas", "Las Vegas", "Las Vegas", "NV", "89101", 36.1699, -115.1398, 50),
    ("nv-reno", "Reno", "Reno", "NV", "89501", 39.5296, -119.8138, 50),
    ("nv-henderson", "Henderson", "Henderson", "NV", "89002", 36.0395, -114.9817, 35),

    # COLORADO
    ("co-denver", "Denver", "Denver", "CO", "80202", 39.7392, -104.9903, 50),
    ("co-colorado-springs", "Colorado Springs", "Colorado Springs", "CO", "80903", 38.8339, -104.8214, 45),
    ("co-aurora", "Aurora", "Aurora", "CO", "80012", 39.7294, -104.8319, 35),

    # NEW YORK
    ("ny-new-york", "New York City", "New York", "NY", "10001", 40.7128, -74.0060, 30),
    ("ny-buffalo", "Buffalo", "Buffalo", "NY", "14202", 42.8864, -78.8784, 45),
    ("ny-rochester", "Rochester", "Rochester", "NY", "14604", 43.1566, -77.6088, 40),
    ("ny-long-island", "Long Island", "Long Island", "NY", "11501", 40.7891, -73.1350, 40),

    # ILLINOIS
    ("il-chicago", "Chicago", "Chicago", "IL", "60601", 41.8781, -87.6298, 50),
    ("il-aurora", "Aurora", "Aurora", "IL", "60505", 41.7606, -88.3201, 35),
    ("il-naperville", "Naperville", "Naperville", "IL", "60540", 41.7508, -88.1535, 35),

    # GEORGIA
    ("ga-atlanta", "Atlanta", "Atlanta", "GA", "30303", 33.7490, -84.3880, 50),
    ("ga-savannah", "Savannah", "Savannah", "GA", "31401", 32.0809, -81.0912, 45),
    ("ga-augusta", "Augusta", "Augusta", "GA", "30901", 33.4735, -81.9748, 40),

    # NORTH CAROLINA
    ("nc-charlotte", "Charlotte", "Charlotte", "NC", "28202", 35.2271, -80.8431, 50),
    ("nc-raleigh", "Raleigh", "Raleigh", "NC", "27601", 35.7796, -78.6382, 45),
    ("nc-greensboro", "Greensboro", "Greensboro", "NC", "27401", 36.0726, -79.7920, 40),

    # PENNSYLVANIA
    ("pa-philadelphia", "Philadelphia", "Philadelphia", "PA", "19102", 39.9526, -75.1652, 45),
    ("pa-pittsburgh", "Pittsburgh", "Pittsburgh", "PA", "15222", 40.4406, -79.9959, 45),

    # OHIO
    ("oh-columbus", "Columbus", "Columbus", "OH", "43215", 39.9612, -82.9988, 50),
    ("oh-cleveland", "Cleveland", "Cleveland", "OH", "44113", 41.4993, -81.6944, 45),
    ("oh-cincinnati", "Cincinnati", "Cincinnati", "OH", "45202", 39.1031, -84.5120, 45),

    # MICHIGAN
    ("mi-detroit", "Detroit", "Detroit", "MI", "48226", 42.3314, -83.0458, 50),
    ("mi-grand-rapids", "Grand Rapids", "Grand Rapids", "MI", "49503", 42.9634, -85.6681, 45),

    # NEW JERSEY
    ("nj-newark", "Newark", "Newark", "NJ", "07102", 40.7357, -74.1724, 35),
    ("nj-jersey-city", "Jersey City", "Jersey City", "NJ", "07302", 40.7178, -74.0431, 30),

    # WASHINGTON
    ("wa-seattle", "Seattle", "Seattle", "WA", "98101", 47.6062, -122.3321, 50),
    ("wa-tacoma", "Tacoma", "Tacoma", "WA", "98402", 47.2529, -122.4443, 40),
    ("wa-spokane", "Spokane", "Spokane", "WA", "99201", 47.6588, -117.4260, 50),

    # OREGON
    ("or-portland", "Portland", "Portland", "OR", "97201", 45.5152, -122.6784, 50),
    ("or-eugene", "Eugene", "Eugene", "OR", "97401", 44.0521, -123.0868, 45),

    # TENNESSEE
    ("tn-nashville", "Nashville", "Nashville", "TN", "37203", 36.1627, -86.7816, 50),
    ("tn-memphis", "Memphis", "Memphis", "TN", "38103", 35.1495, -90.0490, 50),
    ("tn-knoxville", "Knoxville", "Knoxville", "TN", "37902", 35.9606, -83.9207, 45),

    # MASSACHUSETTS
    ("ma-boston", "Boston", "Boston", "MA", "02108", 42.3601, -71.0589, 40),
    ("ma-worcester", "Worcester", "Worcester", "MA", "01608", 42.2626, -71.8023, 40),

    # MARYLAND
    ("md-baltimore", "Baltimore", "Baltimore", "MD", "21201", 39.2904, -76.6122, 45),

    # INDIANA
    ("in-indianapolis", "Indianapolis", "Indianapolis", "IN", "46204", 39.7684, -86.1581, 50),
    ("in-fort-wayne", "Fort Wayne", "Fort Wayne", "IN", "46802", 41.0793, -85.1394, 45),

    # MISSOURI
    ("mo-kansas-city", "Kansas City", "Kansas City", "MO", "64106", 39.0997, -94.5786, 50),
    ("mo-st-louis", "St. Louis", "St. Louis", "MO", "63101", 38.6270, -90.1994, 50),

    # MINNESOTA
    ("mn-minneapolis", "Minneapolis", "Minneapolis", "MN", "55401", 44.9778, -93.2650, 50),
    ("mn-st-paul", "St. Paul", "St. Paul", "MN", "55101", 44.9537, -93.0900, 40),

    # WISCONSIN
    ("wi-milwaukee", "Milwaukee", "Milwaukee", "WI", "53202", 43.0389, -87.9065, 45),
    ("wi-madison", "Madison", "Madison", "WI", "53703", 43.0731, -89.4012, 45),

    # SOUTH CAROLINA
    ("sc-charleston", "Charleston", "Charleston", "SC", "29401", 32.7765, -79.9311, 45),
    ("sc-columbia", "Columbia", "Columbia", "SC", "29201", 34.0007, -81.0348, 45),

    # LOUISIANA
    ("la-new-orleans", "New Orleans", "New Orleans", "LA", "70112", 29.9511, -90.0715, 50),
    ("la-baton-rouge", "Baton Rouge", "Baton Rouge", "LA", "70801", 30.4515, -91.1871, 45),

    # ALABAMA
    ("al-birmingham", "Birmingham", "Birmingham", "AL", "35203", 33.5186, -86.8104, 50),
    ("al-huntsville", "Huntsville", "Huntsville", "AL", "35801", 34.7304, -86.5861, 45),

    # KENTUCKY
    ("ky-louisville", "Louisville", "Louisville", "KY", "40202", 38.2527, -85.7585, 50),
    ("ky-lexington", "Lexington", "Lexington", "KY", "40507", 38.0406, -84.5037, 45),

    # OKLAHOMA
    ("ok-oklahoma-city", "Oklahoma City", "Oklahoma City", "OK", "73102", 35.4676, -97.5164, 50),
    ("ok-tulsa", "Tulsa", "Tulsa", "OK", "74103", 36.1540, -95.9928, 50),

    # UTAH
    ("ut-salt-lake-city", "Salt Lake City", "Salt Lake City", "UT", "84101", 40.7608, -111.8910, 50),
    ("ut-provo", "Provo", "Provo", "UT", "84601", 40.2338, -111.6585, 40),

    # NEW MEXICO
    ("nm-albuquerque", "Albuquerque", "Albuquerque", "NM", "87102", 35.0844, -106.6504, 60),
    ("nm-santa-fe", "Santa Fe", "Santa Fe", "NM", "87501", 35.6870, -105.9378, 50),

    # CONNECTICUT
    ("ct-hartford", "Hartford", "Hartford", "CT", "06103", 41.7658, -72.6734, 40),
    ("ct-new-haven", "New Haven", "New Haven", "CT", "06510", 41.3083, -72.9279, 40),

    # HAWAII
    ("hi-honolulu", "Honolulu", "Honolulu", "HI", "96813", 21.3069, -157.8583, 40),

    # VIRGINIA
    ("va-virginia-beach", "Virginia Beach", "Virginia Beach", "VA", "23451", 36.8529, -75.9780, 45),
    ("va-richmond", "Richmond", "Richmond", "VA", "23219", 37.5407, -77.4360, 45),
    ("va-norfolk", "Norfolk", "Norfolk", "VA", "23510", 36.8508, -76.2859, 40),

    # IOWA
    ("ia-des-moines", "Des Moines", "Des Moines", "IA", "50309", 41.5868, -93.6250, 50),
    ("ia-cedar-rapids", "Cedar Rapids", "Cedar Rapids", "IA", "52401", 41.9779, -91.6656, 45),

    # NEBRASKA
    ("ne-omaha", "Omaha", "Omaha", "NE", "68102", 41.2565, -95.9345, 50),
    ("ne-lincoln", "Lincoln", "Lincoln", "NE", "68508", 40.8258, -96.6852, 45),

    # KANSAS
    ("ks-wichita", "Wichita", "Wichita", "KS", "67202", 37.6872, -97.3301, 50),
    ("ks-overland-park", "Overland Park", "Overland Park", "KS", "66210", 38.9822, -94.6708, 40),

    # ARKANSAS
    ("ar-little-rock", "Little Rock", "Little Rock", "AR", "72201", 34.7465, -92.2896, 50),

    # MISSISSIPPI
    ("ms-jackson", "Jackson", "Jackson", "MS", "39201", 32.2988, -90.1848, 50),

    # IDAHO
    ("id-boise", "Boise", "Boise", "ID", "83702", 43.6150, -116.2023, 50),

    # MONTANA
    ("mt-billings", "Billings", "Billings", "MT", "59101", 45.7833, -108.5007, 60),

    # NORTH DAKOTA
    ("nd-fargo", "Fargo", "Fargo", "ND", "58102", 46.8772, -96.7898, 60),

    # SOUTH DAKOTA
    ("sd-sioux-falls", "Sioux Falls", "Sioux Falls", "SD", "57104", 43.5446, -96.7311, 60),

    # WYOMING
    ("wy-cheyenne", "Cheyenne", "Cheyenne", "WY", "82001", 41.1400, -104.8202, 60),

    # WEST VIRGINIA
    ("wv-charleston", "Charleston", "Charleston", "WV", "25301", 38.3498, -81.6326, 50),

    # MAINE
    ("me-portland", "Portland", "Portland", "ME", "04101", 43.6591, -70.2568, 50),

    # NEW HAMPSHIRE
    ("nh-manchester", "Manchester", "Manchester", "NH", "03101", 42.9956, -71.4548, 45),

    # VERMONT
    ("vt-burlington", "Burlington", "Burlington", "VT", "05401", 44.4759, -73.2121, 50),

    # RHODE ISLAND
    ("ri-providence", "Providence", "Providence", "RI", "02903", 41.8240, -71.4128, 35),

    # DELAWARE
    ("de-wilmington", "Wilmington", "Wilmington", "DE", "19801", 39.7391, -75.5398, 40),

    # ALASKA
    ("ak-anchorage", "Anchorage", "Anchorage", "AK", "99501", 61.2181, -149.9003, 60),
]

DEFAULT_SERVICE_LOCATIONS: tuple[ServiceLocation, ...] = tuple(
    ServiceLocation(
        id=location_id,
        name=name,
        city=city,
        state=state,
        zip=zip_code,
        phone=DEFAULT_PHONE,
        lat=lat,
        lng=lng,
        service_radius=radius,
    )
    for location_id, name, city, state, zip_code, lat, lng, radius in _MOBILE_SERVICE_CENTERS
)


def active_locations(locations: Iterable[ServiceLocation]) -> list[ServiceLocation]:
    return [location for location in locations if location.is_active]


def locations_in_state(locations: Iterable[ServiceLocation], state: str) -> list[ServiceLocation]:
    wanted = state.strip().upper()
    return [location for location in locations if location.state == wanted]
