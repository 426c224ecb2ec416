"""
BeerBarBrewery Backend - API Routes Package
=============================================

Route Inventory:
    - beer.py:     /api/beer...     (CRUD, ABV range search)
    - brewery.py:  /api/brewery...  (CRUD, brewery ↔ beer assignment)
    - bar.py:      /api/bar...      (CRUD, bar ↔ beer assignment)
    - health.py:   GET /health

Routes stay thin: validate ids, map schemas to domain models, call a
service, and turn None / False / empty results into NotFoundError.
"""
