"""HTTP helpers shared by the endpoint tests."""


async def create_beer(client, name="Pale Ale", abv=5.2, brewery_id=None):
    payload = {"name": name, "percentageAlcoholByVolume": abv}
    if brewery_id is not None:
        payload["breweryId"] = brewery_id
    response = await client.post("/api/beer", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def create_brewery(client, name="Hop House"):
    response = await client.post("/api/brewery", json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()


async def create_bar(client, name="The Crown", address="1 High Street"):
    response = await client.post("/api/bar", json={"name": name, "address": address})
    assert response.status_code == 201, response.text
    return response.json()
