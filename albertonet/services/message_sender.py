import json
import logging
from typing import Any, Protocol

from botocore.exceptions import BotoCoreError, ClientError

from albertonet.exceptions import MessageDeliveryError
from albertonet.schemas.contact import ContactMessage

logger = logging.getLogger(__name__)


class MessageSender(Protocol):
    def send_contact_notification(self, message: ContactMessage) -> None: ...


class LambdaMessageSender:
    """
    Hands contact messages to the serverless email function.

    The function answers with {"StatusCode": 200} once the email is sent.
    """

    def __init__(self, client: Any, function_name: str):
        self.client = client
        self.function_name = function_name

    def send_contact_notification(self, message: ContactMessage) -> None:
        if not self.function_name:
            raise MessageDeliveryError("No send message function is configured")

        try:
            response = self.client.invoke(
                FunctionName=self.function_name,
                InvocationType="RequestResponse",
                Payload=message.model_dump_json().encode("utf-8"),
            )
            payload = response["Payload"].read()
            status_code = json.loads(payload)["StatusCode"]
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Invoking {self.function_name} failed: {e}")
            raise MessageDeliveryError("Send message failed while invoking function") from e
        except (ValueError, KeyError, TypeError) as e:
            raise MessageDeliveryError("Send message failed while parsing response") from e

        if status_code != 200:
            raise MessageDeliveryError(
                f"Send message failed with status code: {status_code}"
            )

        logger.info(f"Contact message from {message.email} delivered")
