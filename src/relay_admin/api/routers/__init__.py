"""
relay_admin.api.routers

HTTP routers mounted by `api.app.create_app`.
"""
