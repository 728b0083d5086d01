"""
Permissive CORS handling.

Every response gets the same cross-origin headers, and any OPTIONS request
is answered with an empty 204 before routing.
"""

from fastapi import Request, Response


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def apply_cors_headers(response: Response) -> Response:
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response


async def cors_middleware(request: Request, call_next):
    """Short-circuit preflight requests, decorate everything else."""
    if request.method == "OPTIONS":
        return apply_cors_headers(Response(status_code=204))

    response = await call_next(request)
    return apply_cors_headers(response)
