"""
Configuration settings for VocList.
"""

from pathlib import Path
import os
from dotenv import load_dotenv

VERSION = "1.2.0"

# Directory paths
BASE_DIR = Path(__file__).parent
load_dotenv(BASE_DIR / ".env")

DATA_DIR = Path(os.environ.get("VOCLIST_DATA_DIR", BASE_DIR / "data"))
CACHE_DIR = DATA_DIR / "cache"

# Create directories
DATA_DIR.mkdir(parents=True, exist_ok=True)
CACHE_DIR.mkdir(exist_ok=True)

# Cache expiry (seconds) - 24 hours
CACHE_EXPIRY = 86400

# Service location
PROTOCOL = "https"
HOST = "www.vocabulary.com"
URLBASE = f"{PROTOCOL}://{HOST}"

# Endpoint paths, relative to URLBASE
ENDPOINTS = {
    "autocomplete": "/dictionary/autocomplete",
    "dictionary": "/dictionary",
    "grab": "/lists/vocabgrabber/grab.json",
    "vocabgrabber": "/lists/vocabgrabber",
    "lists_by_profile": "/lists/byprofile.json",
    "list_load": "/lists/load.json",
    "list_save": "/lists/save.json",
    "list_delete": "/lists/delete.json",
    "progress": "/progress/progress.json",
    "set_priority": "/progress/setpriority.json",
    "start_learning": "/progress/startlearning.json",
}

# Seconds before a request to the service is abandoned
HTTP_TIMEOUT = float(os.environ.get("VOCLIST_HTTP_TIMEOUT", "30"))

USER_AGENT = os.environ.get(
    "VOCLIST_USER_AGENT",
    "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0",
)

# Word correction: candidates must score strictly above this
SIMILARITY_THRESHOLD = 0.6

# Annotation mode for saved words: "src-lit" (example source citation) or "comment"
DEFAULT_ANNOTATION_MODE = os.environ.get("VOCLIST_ANNOT_MODE", "src-lit")

# Source id the service shows as an offline citation in lists
LIT_SOURCE_ID = "LIT"
UNTITLED_SOURCE = "Untitled source"

# Language of every word we save
WORD_LANGUAGE = "en"

# Sort key for get_lists(): name, createdate, wordcount, activitydate, modifieddate
DEFAULT_LIST_SORT = "modifieddate"
