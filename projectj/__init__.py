import os

from dotenv import load_dotenv

load_dotenv()

# Get the base directory of the project (the directory containing this file)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Path to the data directory (bundled with the package as package data)
DATA_DIR = os.path.abspath(os.getenv("PROJECTJ_DATA_DIR", os.path.join(BASE_DIR, 'data')))

VOCABULARY_DIR = os.path.join(DATA_DIR, 'vocabulary')

# Static vocabulary files, one per learned language
VOCABULARY_FILES = {"ja": "ja.json", "th": "th.json"}
