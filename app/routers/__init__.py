# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# - root.py: Public greeting at "/"
# - users.py: User CRUD endpoints under "/users"
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import root
from . import users

__all__ = [
    "root",
    "users",
]
