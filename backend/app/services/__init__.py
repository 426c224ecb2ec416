"""
BeerBarBrewery Backend - Services Layer
=========================================

Business operations, one service per aggregate:
    - BeerService:    CRUD and the alcohol-by-volume range search
    - BreweryService: CRUD and assigning beers to a brewery
    - BarService:     CRUD, beers served at a bar, assigning beers to a bar

Services are built per request (see app.dependencies) around the request's
repositories, so they hold no state between requests.
"""
