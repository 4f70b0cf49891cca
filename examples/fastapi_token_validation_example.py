"""
Example: Validating bearer tokens against a JWKS with FastAPI

This example demonstrates how to hold a KeyStore for the lifetime of the
application, validate incoming tokens with the middleware, and rotate keys.

Note: This is a standalone example that imports from the installed package.
Install dependencies: pip install -e . uvicorn
Run: JWKS_FILE=jwks.json python examples/fastapi_token_validation_example.py
"""

import os
from typing import Any

from fastapi import FastAPI, HTTPException, Request

# Import from the package (these will be available after installing)
try:
    from jwksauthlib import (
        InvalidJwksDocumentException,
        TokenAuthenticator,
        TokenValidatorConfig,
    )
    from jwksauthlib.auth.middleware.token_validator_middleware import (
        TokenValidatorMiddleware,
    )
except ImportError:
    print("Error: jwksauthlib package not installed.")
    print("Install with: pip install -e .")
    import sys
    sys.exit(1)


def read_jwks() -> str:
    with open(os.environ.get("JWKS_FILE", "jwks.json")) as f:
        return f.read()


# The host owns key acquisition; the library never fetches keys itself
authenticator = TokenAuthenticator.from_jwks(
    read_jwks(), config=TokenValidatorConfig.from_environment()
)

app = FastAPI(title="JWKS token validation example")
app.add_middleware(TokenValidatorMiddleware, authenticator=authenticator)


@app.get("/me")
async def me(request: Request) -> dict[str, Any]:
    """Returns the caller's claims, or 401 when the token was missing or rejected."""
    if request.state.claims is None:
        detail = request.state.auth_error.value if request.state.auth_error else "missing_token"
        raise HTTPException(status_code=401, detail=detail)
    return request.state.claims


@app.post("/admin/rotate-keys")
async def rotate_keys() -> dict[str, Any]:
    """Reloads the JWKS file; on a bad document the current keys stay in use."""
    try:
        authenticator.update_keys(read_jwks())
    except InvalidJwksDocumentException as e:
        raise HTTPException(status_code=502, detail=e.message)
    return {"key_ids": authenticator.key_store.key_ids}


if __name__ == "__main__":
    import uvicorn

    print("Starting server on http://localhost:8000")
    print("  curl -H 'Authorization: Bearer <token>' http://localhost:8000/me")
    uvicorn.run(app, host="0.0.0.0", port=8000)
