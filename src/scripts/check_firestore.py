import os
import sys
import logging

from dotenv import load_dotenv
from google.api_core.exceptions import GoogleAPIError
from firebase_admin import firestore

# Add the project root to Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from config import COLLECTIONS
from src.services.firebase_utils import get_firestore_client

logger = logging.getLogger(__name__)


def check_firestore_connection(db):
    """Write, read back and delete a probe document"""
    probe = db.collection("test").document("connection_test")
    try:
        probe.set({
            "timestamp": firestore.SERVER_TIMESTAMP,
            "status": "connected"
        })
        doc = probe.get()
        if not doc.exists:
            logger.error("Failed to read test document")
            return False
        logger.info(f"Connected to Firestore, test document: {doc.to_dict()}")
        probe.delete()
    except GoogleAPIError as e:
        logger.error(f"Error connecting to Firestore: {e}")
        return False
    return True


def check_collections(db):
    """Touch every collection the bot uses"""
    try:
        for collection in COLLECTIONS.values():
            doc = db.collection(collection).document("test")
            doc.set({"created_at": firestore.SERVER_TIMESTAMP})
            doc.delete()
            logger.info(f"Collection ready: {collection}")
    except GoogleAPIError as e:
        logger.error(f"Error creating collections: {e}")
        return False
    return True


if __name__ == "__main__":
    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    db = get_firestore_client()
    if check_firestore_connection(db):
        check_collections(db)
