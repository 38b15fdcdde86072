import json

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from container import Container


logger = Logger()
tracer = Tracer()

container = Container()


def _response(status_code: int, body: dict) -> dict:
    return {"statusCode": status_code, "body": json.dumps(body)}


def parse_slack_payload(event: dict) -> dict:
    """API Gateway proxy events carry the Slack payload as a JSON string in `body`."""
    body = event.get("body")
    if body is None:
        return event
    if isinstance(body, dict):
        return body
    return json.loads(body)


def is_retry(event: dict) -> bool:
    headers = {k.lower(): v for k, v in (event.get("headers") or {}).items()}
    return "x-slack-retry-num" in headers


def handle_slack_payload(payload: dict) -> dict:
    payload_type = payload.get("type")

    if payload_type == "url_verification":
        return _response(200, {"challenge": payload.get("challenge")})

    if payload_type != "event_callback":
        logger.warning("Ignoring unsupported payload type", extra={"type": payload_type})
        return _response(200, {"message": "Ignored"})

    slack_event = payload.get("event", {})
    if slack_event.get("type") != "app_mention":
        logger.info("Ignoring event", extra={"event_type": slack_event.get("type")})
        return _response(200, {"message": "Ignored"})

    channel = slack_event.get("channel", "")
    logger.info("Received mention", extra={"channel": channel})

    reply = container.dispatcher().handle_mention(slack_event.get("text", ""), channel)
    return _response(200, {"message": "Processed", "reply": reply})


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    if is_retry(event):
        logger.info("Skipping Slack retry delivery")
        return _response(200, {"message": "Retry ignored"})

    try:
        payload = parse_slack_payload(event)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Slack payload as JSON", extra={"error": str(e)})
        return _response(400, {"error": "Invalid JSON body"})

    try:
        return handle_slack_payload(payload)
    except Exception as e:
        logger.exception("Error processing event")
        return _response(500, {"error": str(e)})
