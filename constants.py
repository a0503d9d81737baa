# constants.py - Define constants used throughout the application
from collections import namedtuple

VERSION = "1.0.0"

# --- Resource Rules ---
ResourceRule = namedtuple("ResourceRule", ["tag", "attribute"])

# Tag/attribute pairs whose values may point at a local asset
DEFAULT_RESOURCE_RULES = (
    ResourceRule("img", "src"),
    ResourceRule("link", "href"),
    ResourceRule("script", "src"),
)

# External assets downloaded even though they are not same-origin
ALLOWED_EXTERNAL_ASSETS = frozenset({
    "https://upload.wikimedia.org/wikipedia/commons/6/67/NodeJS.png",
})

# --- File/Directory Names ---
PAGE_EXTENSION = ".html"
ASSETS_FOLDER_SUFFIX = "_files"
NAME_SEPARATOR = "-"
SUPPORTED_SCHEMES = ("http", "https")

# --- Request Defaults ---
DEFAULT_USER_AGENT = None # None keeps the transport's own User-Agent
DEFAULT_REQUEST_TIMEOUT = None # No explicit timeout
DEFAULT_MAX_WORKERS = None # None means one worker per distinct asset
DEFAULT_CHUNK_SIZE = 8192 # Bytes per streamed asset chunk

# --- Logging Defaults ---
DEFAULT_LOG_FILE = None
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# --- Transport Error Codes ---
CODE_CONNECTION_REFUSED = "ECONNREFUSED"
CODE_CONNECTION_RESET = "ECONNRESET"
CODE_DNS_FAILURE = "ENOTFOUND"
CODE_TIMEOUT = "ETIMEDOUT"
CODE_UNKNOWN = "ECONNERROR"
