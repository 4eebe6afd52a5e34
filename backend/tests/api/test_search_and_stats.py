"""Search & Stats - GET /api/products/search and GET /api/products/stats.

Invariants:
    - search without name -> 400, no match -> 404, else {count, results}
    - stats count the whole catalog, ignoring any query filters
    - both literal routes win over /{product_id} (registered first)
"""


async def test_search_requires_name(client):
    res = await client.get("/api/products/search")
    assert res.status_code == 400
    assert res.json() == {
        "status": "error",
        "errorType": "ValidationError",
        "message": "Please provide a search keyword",
    }


async def test_search_empty_name_is_missing(client):
    res = await client.get("/api/products/search", params={"name": ""})
    assert res.status_code == 400


async def test_search_no_match_is_404(client):
    res = await client.get("/api/products/search", params={"name": "tablet"})
    assert res.status_code == 404
    body = res.json()
    assert body["errorType"] == "NotFoundError"
    assert body["message"] == "No products match your search"


async def test_search_is_case_insensitive_substring(client):
    res = await client.get("/api/products/search", params={"name": "BOARD"})
    assert res.status_code == 200
    body = res.json()
    assert body["count"] == 1
    assert body["results"][0]["name"] == "Keyboard"


async def test_search_count_matches_results(client):
    res = await client.get("/api/products/search", params={"name": "o"})
    body = res.json()
    assert body["count"] == len(body["results"]) == 5


async def test_stats_over_seed_catalog(client):
    res = await client.get("/api/products/stats")
    assert res.status_code == 200
    assert res.json() == {
        "totalProducts": 5,
        "countByCategory": {"Electronics": 3, "Accessories": 2},
    }


async def test_stats_ignores_filters(client):
    res = await client.get(
        "/api/products/stats", params={"category": "Accessories", "limit": 1},
    )
    assert res.json()["totalProducts"] == 5


async def test_stats_tracks_new_categories(client, new_product):
    await client.post("/api/products", json={**new_product, "category": "Cameras"})
    res = await client.get("/api/products/stats")
    assert res.json()["countByCategory"]["Cameras"] == 1
    assert res.json()["totalProducts"] == 6
