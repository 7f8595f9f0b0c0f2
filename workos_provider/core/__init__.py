"""Core logic shared by resources and data sources.

Module Structure:
    - workos/       : WorkOS API client library (transport, errors, entity services)
    - state.py      : Field-survival rules applied when merging responses into state
    - validators.py : Input validation (role slugs, import IDs)

Nothing here depends on the host runtime; handlers in
``workos_provider.resources`` and ``workos_provider.data_sources`` build on it.
"""
