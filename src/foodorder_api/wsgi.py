"""
WSGI entry point, e.g. `flask --app foodorder_api.wsgi run`.
"""

from foodorder_api.app import create_app

app = create_app()
