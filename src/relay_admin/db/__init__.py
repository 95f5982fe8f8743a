"""
relay_admin.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, the shared `Db` handle, and repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Admin routes only reach this package through the `Db` handle carried by an
# authenticated `auth.guard.Admin`.
