"""
relay_admin.auth

Admin authentication package.

Responsibilities:
- `X-Api-Token` header codec.
- bcrypt-backed administrator credential (`AdminConfig`).
- FastAPI guard dependency producing the `Admin` capability.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing here depends on route modules; routers import `auth.guard`, never the reverse.
