"""
Feature modules for the Mediashare backend.

- auth: registration, login, token issuance and the bearer token gate
- media: JPEG uploads, per-file allow-lists and downloads

Each module keeps its protocols in interfaces.py, its Supabase access in
repository.py and its HTTP surface in routes.py. Other code depends on the
interfaces, not the concrete services.
"""
