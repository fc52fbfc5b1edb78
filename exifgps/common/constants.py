SUPPORTED_IMAGE_EXTENSIONS = [".jpg", ".jpeg", ".png"]

DEFAULT_CSV_FILENAME = "output.csv"
DEFAULT_HTML_FILENAME = "output.html"

# Path of the GPS IFD within the root IFD
GPS_IFD_PATH = "IFD/GPSInfo"

# Tag IDs within the GPS IFD
GPS_LATITUDE_TAG_ID = 0x0002
GPS_LONGITUDE_TAG_ID = 0x0004

# Number of (numerator, denominator) pairs in a GPS coordinate: D, M & S
GPS_RATIONALS_COUNT = 3

REPORT_HEADER = ["Image File Path", "GPS Latitude", "GPS Longitude"]
