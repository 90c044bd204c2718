"""
FastAPI application serving wrap statistics.

``GET /api/github-stats?username=<login>`` returns the flat statistics
JSON the card renderer consumes, or ``{"error": message}`` with a status
that reflects the upstream failure.
"""

import logging

import httpx
from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from github_wrapped import __version__
from github_wrapped.config import get_config
from github_wrapped.exceptions import (
    GitHubAPIError,
    GitHubRateLimitError,
    GitHubWrappedError,
    RateLimitExceededError,
    UserNotFoundError,
)
from github_wrapped.sdk import GitHubWrapped

logger = logging.getLogger(__name__)

app = FastAPI(
    title="github-wrapped",
    description="Your year on GitHub, wrapped",
    version=__version__,
)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/api/github-stats")
async def github_stats(username: str | None = Query(None)):
    """Fetch and aggregate a user's year on GitHub."""
    if not username or not username.strip():
        return error_response("Username is required", 400)
    username = username.strip()

    try:
        async with GitHubWrapped(config=get_config()) as client:
            stats = await client.wrap(username)
    except UserNotFoundError:
        return error_response("User not found", 404)
    except (GitHubRateLimitError, RateLimitExceededError):
        return error_response(RATE_LIMIT_MESSAGE, 403)
    except GitHubAPIError as e:
        logger.error("Upstream failure for %s: %s", username, e)
        status = e.status_code if e.status_code and e.status_code >= 400 else 502
        return error_response(f"Failed to fetch GitHub data: {e}", status)
    except httpx.HTTPError as e:
        logger.error("Could not reach GitHub for %s: %s", username, e)
        return error_response("Failed to fetch GitHub data", 502)
    except GitHubWrappedError as e:
        logger.error("Error fetching GitHub data for %s: %s", username, e)
        return error_response(str(e) or "Something went wrong", 500)

    return stats.to_json_dict()
