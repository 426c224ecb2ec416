"""
BeerBarBrewery Backend - Application Package
==============================================

Layered REST API for beers, bars and breweries:

    ┌─────────────────────────────────────┐
    │      Routes (HTTP, wire schemas)    │  ← id/range validation, status codes
    ├─────────────────────────────────────┤
    │      Mapping (schema ↔ model)       │
    ├─────────────────────────────────────┤
    │      Services (domain models)       │  ← CRUD + assignment outcomes
    ├─────────────────────────────────────┤
    │      Repositories (ORM entities)    │  ← stage, then save_changes()
    ├─────────────────────────────────────┤
    │      Database (async sessions)      │
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
