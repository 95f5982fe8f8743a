"""
relay_admin.db.repositories

Repository classes: thin query wrappers bound to one `AsyncSession`.
"""
