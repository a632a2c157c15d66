import logging
from datetime import datetime

from flask import Flask, request, jsonify
from slack_bolt import App
from slack_bolt.adapter.flask import SlackRequestHandler
from slack_bolt.adapter.socket_mode import SocketModeHandler

from config import BotConfig, PORT, SLACK_APP_TOKEN, SLACK_BOT_TOKEN, SLACK_SIGNING_SECRET
from src.command_router import create_router
from src.errors import StoreError
from src.message_service import MessageService
from src.services.firebase_utils import get_firestore_client
from src.services.firestore_store import FirestoreStore
from src.utils.parsing import parse_command

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

bot_config = BotConfig.from_env()

# Initialize Firestore
db = get_firestore_client()
store = FirestoreStore(db, bot_config.collections)

# Initialize Flask app
flask_app = Flask(__name__)

# Initialize Slack app
slack_app = App(
    token=SLACK_BOT_TOKEN,
    signing_secret=SLACK_SIGNING_SECRET
)

router = create_router(store, MessageService(slack_app.client), bot_config)


@flask_app.route("/slack/events", methods=["POST"])
def slack_events():
    return SlackRequestHandler(slack_app).handle(request)


@flask_app.route("/health", methods=["GET"])
def health_check():
    return jsonify({"status": "healthy", "timestamp": datetime.now().isoformat()})


@slack_app.middleware
def log_request(body, logger, next):
    logger.debug(f"Incoming request type: {body.get('type', 'unknown')}")
    return next()


@slack_app.command("/standup")
def standup_command(ack, body, respond):
    ack()

    user_id = body["user_id"]
    channel_id = body["channel_id"]
    command, params = parse_command(body.get("text", ""))
    logger.info(f"User {user_id} executed /standup {command} in {channel_id}")

    try:
        store.ensure_user(user_id, body.get("user_name", ""))
        store.ensure_channel(channel_id, body.get("channel_name", ""))
    except StoreError as e:
        respond(str(e))
        return

    respond(router.handle(command, params, user_id, channel_id))


# Error handling
@slack_app.error
def global_error_handler(error, body, logger):
    logger.exception(f"Error: {error}")
    return f"Sorry, something went wrong: {error}"


if __name__ == "__main__":
    logger.info("Starting Standup Pulse bot...")

    required_vars = {"SLACK_BOT_TOKEN": SLACK_BOT_TOKEN, "SLACK_SIGNING_SECRET": SLACK_SIGNING_SECRET}
    missing_vars = [name for name, value in required_vars.items() if not value]
    if missing_vars:
        logger.error(f"Missing environment variables: {', '.join(missing_vars)}")
        raise SystemExit(1)
    if not bot_config.manager_id:
        logger.warning("MANAGER_SLACK_USER_ID is not set, nobody has manager access")

    if SLACK_APP_TOKEN:
        logger.info("Starting in Socket Mode...")
        SocketModeHandler(slack_app, SLACK_APP_TOKEN).start()
    else:
        logger.info(f"Starting in HTTP Mode on port {PORT}...")
        flask_app.run(host="0.0.0.0", port=PORT)
