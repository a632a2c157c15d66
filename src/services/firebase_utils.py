import os
import logging

import firebase_admin
from firebase_admin import credentials, firestore

logger = logging.getLogger(__name__)


def get_firestore_client():
    """Initialize Firebase only once and return a Firestore client"""
    if not firebase_admin._apps:
        cred_path = os.environ.get("GOOGLE_APPLICATION_CREDENTIALS")
        if cred_path and os.path.exists(cred_path):
            firebase_admin.initialize_app(credentials.Certificate(cred_path))
        else:
            logger.info("No service account file, using application default credentials")
            firebase_admin.initialize_app()
    return firestore.client()
