import os
import sys
import logging

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError
from dotenv import load_dotenv

# Add the project root to Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from config import BotConfig
from src.services.firebase_utils import get_firestore_client
from src.services.firestore_store import FirestoreStore

logger = logging.getLogger(__name__)


def sync_users(client, store):
    """Register every human workspace member in the store"""
    synced = 0
    cursor = None
    while True:
        result = client.users_list(cursor=cursor, limit=200)
        for member in result["members"]:
            if member.get("is_bot") or member.get("deleted") or member["id"] == "USLACKBOT":
                continue
            store.ensure_user(member["id"], member.get("name", ""))
            synced += 1
        cursor = result.get("response_metadata", {}).get("next_cursor")
        if not cursor:
            return synced


def sync_channels(client, store):
    """Register every channel the bot is a member of"""
    synced = 0
    cursor = None
    while True:
        result = client.conversations_list(types="public_channel,private_channel", cursor=cursor, limit=200)
        for channel in result["channels"]:
            if not channel.get("is_member"):
                continue
            store.ensure_channel(channel["id"], channel["name"])
            synced += 1
        cursor = result.get("response_metadata", {}).get("next_cursor")
        if not cursor:
            return synced


def main():
    # Load environment variables
    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    config = BotConfig.from_env()
    client = WebClient(token=os.getenv("SLACK_BOT_TOKEN"))
    store = FirestoreStore(get_firestore_client(), config.collections)

    logger.info("Setting up Standup Pulse bot...")
    try:
        logger.info(f"Synced {sync_users(client, store)} users")
        logger.info(f"Synced {sync_channels(client, store)} channels")
    except SlackApiError as e:
        logger.error(f"Slack sync failed: {e.response['error']}")
        raise SystemExit(1)

    if config.manager_id:
        logger.info(f"Manager access granted to {config.manager_id}")
    else:
        logger.warning("MANAGER_SLACK_USER_ID is not set")

    logger.info("Setup complete! Invite the bot to more channels and run setup again to register them.")


if __name__ == "__main__":
    main()
