"""Vercel serverless function serving live poll results."""

import json
import sys
from pathlib import Path

# Add the project root to the path so we can import rankpoll modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from rankpoll.config import StoreConfig
from rankpoll.errors import ConfigurationError
from rankpoll.results import ResultsError, load_results
from rankpoll.store import PollStore


def handler(request):
    """Handle incoming requests for a poll's leaderboard.

    Accepts:
    - GET with query string: ?code=7RUVKS[&source=ballots]
    - POST with JSON body: {"code": "7RUVKS", "source": "ballots"}

    Returns JSON with ranked results, tie flags and the ballot count.
    """
    # Handle CORS preflight
    if request.method == "OPTIONS":
        return create_response(
            "",
            status=204,
            headers={
                "Access-Control-Allow-Origin": "*",
                "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
                "Access-Control-Allow-Headers": "Content-Type",
            },
        )

    if request.method not in ("GET", "POST"):
        return create_response(
            {"error": "Method not allowed. Use GET or POST."},
            status=405,
        )

    try:
        if request.method == "GET":
            params = request.args
        else:
            body = request.body.decode("utf-8")
            params = json.loads(body) if body else {}
            if not isinstance(params, dict):
                return create_response(
                    {"error": "Request body must be a JSON object"},
                    status=400,
                )

        code = params.get("code")
        if not code:
            return create_response(
                {"error": "Missing 'code'"},
                status=400,
            )
        raw_ballots = params.get("source") == "ballots"

        with PollStore(StoreConfig.from_env()) as store:
            result = load_results(store, code, raw_ballots=raw_ballots)

        return create_response(result.to_dict())

    except ResultsError as e:
        return create_response(
            {"error": str(e)},
            status=400,
        )
    except json.JSONDecodeError as e:
        return create_response(
            {"error": f"Invalid JSON: {e}"},
            status=400,
        )
    except ConfigurationError as e:
        return create_response(
            {"error": f"Server misconfigured: {e}"},
            status=500,
        )
    except Exception as e:
        return create_response(
            {"error": f"Internal error: {e}"},
            status=500,
        )


def create_response(body, status: int = 200, headers: dict = None):
    """Create a response object for Vercel."""
    response_headers = {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": "*",
    }
    if headers:
        response_headers.update(headers)

    if isinstance(body, dict):
        body = json.dumps(body)

    # Return in format expected by Vercel Python runtime
    return {
        "statusCode": status,
        "headers": response_headers,
        "body": body,
    }
