# =============================================================================
# app/__main__.py - `python -m app`
# =============================================================================

from app.main import main

main()
