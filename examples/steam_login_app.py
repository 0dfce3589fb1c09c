# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Example host: Steam sign-in for a FastAPI application.

Session persistence is the host's job; this example just returns the
identity as JSON. Run with:

    STEAM_AUTH_BASE_URL=http://localhost:8000 STEAM_API_KEY=... \
        uvicorn steam_login_app:app --port 8000
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse

from steam_auth import (
    AuthenticationError,
    ProviderError,
    SteamIdentityProvider,
    load_steam_auth_config,
)
from steam_logging import create_logger

logger = create_logger(logger_type="stdout", level="INFO", name="steam_login_app")

provider: SteamIdentityProvider | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the provider once at startup."""
    global provider

    config = load_steam_auth_config()
    provider = SteamIdentityProvider(config=config)
    logger.info("Steam provider ready", return_to=config.return_to_url)

    yield


app = FastAPI(title="Steam sign-in example", lifespan=lifespan)


@app.get("/api/auth/signin/steam")
async def signin() -> RedirectResponse:
    """Redirect the browser to Steam."""
    if provider is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return RedirectResponse(url=provider.get_authorization_url(), status_code=302)


@app.get("/api/auth/callback/steam")
async def callback(request: Request) -> JSONResponse:
    """Complete the login from Steam's redirect."""
    if provider is None:
        raise HTTPException(status_code=503, detail="Service not initialized")

    query: dict[str, list[str]] = {}
    for name, value in request.query_params.multi_items():
        query.setdefault(name, []).append(value)

    try:
        _, identity = await provider.alogin(query)
    except AuthenticationError as e:
        logger.warning("Login rejected", kind=e.kind)
        raise HTTPException(status_code=401, detail="Login failed")
    except ProviderError as e:
        logger.error("Steam unavailable during login", kind=e.kind)
        raise HTTPException(status_code=502, detail="Login failed")

    return JSONResponse(content=identity.to_dict())
