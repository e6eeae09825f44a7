from pathlib import Path
import os

from dotenv import load_dotenv
from pymongo import MongoClient

load_dotenv()

MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "talawa-api")
SAMPLE_DATA_DIR = os.getenv(
    "SAMPLE_DATA_DIR", str(Path(__file__).resolve().parent.parent / "sample_data")
)


def get_client(uri=None):
    return MongoClient(uri or MONGO_URI, serverSelectionTimeoutMS=5000)


def get_database(uri=None, name=None, ping=True):
    """Return the target database, pinging the server first unless ping=False."""
    client = get_client(uri)
    if ping:
        client.admin.command("ping")
    return client[name or DB_NAME]
