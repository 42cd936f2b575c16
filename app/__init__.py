# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware pipeline setup, error handlers
# - config.py: Environment variable loading and settings
# - exceptions.py: Error taxonomy and response rendering
# - middleware/: Exception handling, token validation and logging interceptors
# - routers/: API endpoint definitions
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
