from slack_sdk.errors import SlackApiError

from src.errors import MessengerError


class MessageService:
    """Sends direct messages through the Slack Web API"""

    def __init__(self, client):
        self.client = client

    def send_user_message(self, user_id, text):
        try:
            result = self.client.conversations_open(users=user_id)
            self.client.chat_postMessage(channel=result["channel"]["id"], text=text)
        except SlackApiError as e:
            raise MessengerError(f"Could not message {user_id}: {e.response['error']}") from e
