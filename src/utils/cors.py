"""
CORS gate shared by every HTTPS handler.
"""

from firebase_functions import https_fn

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
}


def cors_headers() -> dict[str, str]:
    return dict(CORS_HEADERS)


def handle_cors(req: https_fn.Request) -> tuple[dict[str, str], https_fn.Response | None]:
    """
    Answer a preflight probe or hand back the headers for the real response.

    Returns:
        (headers, preflight): `preflight` is a finished 204 response when the
        request is an OPTIONS probe and the caller must return it unchanged.
        Otherwise it is None and the caller attaches `headers` to its own reply.
    """
    headers = cors_headers()
    if (req.method or "").upper() == "OPTIONS":
        return headers, https_fn.Response("", status=204, headers=headers)
    return headers, None
