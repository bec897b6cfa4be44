import json
import logging
import traceback
from aiohttp import web
import sentry_sdk

from social.graze.avatar.app.config import (
    HealthGaugeAppKey,
    MetricsClientAppKey,
    SessionAppKey,
    SettingsAppKey,
)
from social.graze.avatar.resolve.avatar import resolve_avatar

logger = logging.getLogger(__name__)

INDEX_TEXT = (
    "Avatar service. POST /get-image with a JSON body of "
    '{"account_type": "github" | "gravatar" | "mastodon", "identifier": "..."}'
)


async def handle_index(request: web.Request):
    return web.Response(text=INDEX_TEXT)


async def read_json_object(request: web.Request) -> dict:
    """Decode the request body, treating anything but a JSON object as empty."""
    try:
        body = await request.json()
    except ValueError:
        return {}
    if not isinstance(body, dict):
        return {}
    return body


async def handle_get_image(request: web.Request):
    settings = request.app[SettingsAppKey]
    metrics_client = request.app[MetricsClientAppKey]
    try:
        body = await read_json_object(request)

        result = await resolve_avatar(
            request.app[SessionAppKey],
            body.get("account_type"),
            body.get("identifier"),
            github_api_hostname=settings.github_api_hostname,
            mastodon_hostname=settings.mastodon_hostname,
            gravatar_hostname=settings.gravatar_hostname,
            gravatar_size=settings.gravatar_size,
            user_agent=settings.user_agent,
        )

        metrics_client.increment(
            "lookup.count",
            1,
            tag_dict={
                "account_type": (
                    result.account_type.value if result.account_type else "none"
                ),
                "outcome": result.outcome,
            },
        )

        if not result.success:
            return web.json_response(
                {"success": False, "message": result.message}, status=400
            )

        return web.json_response({"success": True, "photo": result.photo})
    except Exception as e:
        logger.error(
            f"Unexpected error in handle_get_image: {type(e).__name__}: {str(e)}\n"
            f"Traceback:\n{traceback.format_exc()}"
        )
        sentry_sdk.capture_exception(e)
        await request.app[HealthGaugeAppKey].womp()

        if settings.debug:
            response_body = json.dumps(
                {
                    "success": False,
                    "message": "Internal Server Error",
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                }
            )
        else:
            response_body = json.dumps(
                {"success": False, "message": "Internal Server Error"}
            )

        raise web.HTTPInternalServerError(
            body=response_body,
            content_type="application/json",
        )
