"""
relay_admin.clients

Outbound HTTP clients for the relay administration API.
"""

# Package marker.
