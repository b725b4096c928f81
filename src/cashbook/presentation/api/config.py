"""API configuration adapter.

The app factory stores its ``Settings`` on ``app.state``; request handlers
read them from there so that a test app and a production app never share
configuration.
"""

from fastapi import Request

from cashbook_config.settings import Settings


def get_api_settings(request: Request) -> Settings:
    """Get the settings the running application was created with."""
    return request.app.state.settings
