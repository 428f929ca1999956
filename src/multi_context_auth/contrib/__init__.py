"""Framework integrations (FastAPI, Django, dependency-injector)."""
