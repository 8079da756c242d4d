from firebase_functions import https_fn

from contracts.models import ResponseEnvelope


def json_response(envelope: ResponseEnvelope, headers: dict[str, str]) -> https_fn.Response:
    """Serialize an envelope with its own status code and the given headers."""
    return https_fn.Response(
        envelope.to_json(),
        status=envelope.status_code,
        headers={**headers, "Content-Type": "application/json; charset=utf-8"},
    )
