"""Request Logging - method and path recorded for every request, matched or not."""

import logging


async def test_request_logged_before_auth(anon_client, caplog):
    with caplog.at_level(logging.INFO, logger="catalog_api.api.request_logging"):
        res = await anon_client.get("/api/products", params={"page": 2})

    assert res.status_code == 401
    [record] = [
        r for r in caplog.records if r.name == "catalog_api.api.request_logging"
    ]
    assert record.getMessage() == "GET /api/products?page=2"
    assert record.method == "GET"


async def test_unmatched_route_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="catalog_api.api.request_logging"):
        await client.delete("/api/nowhere")

    messages = [r.getMessage() for r in caplog.records]
    assert "DELETE /api/nowhere" in messages


async def test_rejected_key_logged_without_secret(anon_client, caplog):
    with caplog.at_level(logging.WARNING, logger="catalog_api.api.dependencies"):
        await anon_client.get("/api/products", headers={"x-api-key": "leaked-guess"})

    text = " ".join(r.getMessage() for r in caplog.records)
    assert "API key rejected" in text
    assert "leaked-guess" not in text
