# nouasseur_app/routes/__init__.py
"""
Application routes package
"""

from .api_directories import register_directory_api_routes
from .api_events import register_event_api_routes
from .api_health import register_health_routes
from .api_members import register_member_api_routes
from .api_users import register_user_api_routes
from .pages import register_page_routes


def init_routes(app):
    """Initialize all application routes"""
    register_page_routes(app)
    register_user_api_routes(app)
    register_member_api_routes(app)
    register_event_api_routes(app)
    register_directory_api_routes(app)
    register_health_routes(app)
