"""
Profile site backend.

Profiles, community events and users behind a FastAPI JSON API, with a
name-card OCR importer, a static site generator and an offline-capable
API client.
"""
