"""Site Builder — application FastAPI autour du page_editor (sites, templates)."""
