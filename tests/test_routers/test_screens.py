from app.mappers.flow_layout import layout_amenities


async def test_home_screen(client):
    resp = await client.get("/")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "Danube Riverside Hotel" in resp.text
    assert "Budapest, Hungary" in resp.text
    assert "background-color: rgb(27, 58, 75)" in resp.text


async def test_home_screen_without_config(client, resources_dir):
    (resources_dir / "Config.plist").unlink()

    resp = await client.get("/")

    assert resp.status_code == 200
    assert "Default Hotel" in resp.text
    assert "Unknown Location" in resp.text
    assert "background-color: rgb(0, 122, 255)" in resp.text


async def test_info_screen_groups_amenities_by_row(client, hotel_document):
    resp = await client.get("/info", params={"width": 200})

    assert resp.status_code == 200
    rows = layout_amenities(hotel_document["amenities"], 200)
    assert len(rows) > 1
    assert resp.text.count('class="flow-row"') == len(rows)
    assert resp.text.count('class="chip"') == len(hotel_document["amenities"])
    assert "Dismiss" in resp.text


async def test_info_screen_default_width(client, hotel_document):
    resp = await client.get("/info")

    rows = layout_amenities(hotel_document["amenities"], 390)
    assert resp.text.count('class="flow-row"') == len(rows)


async def test_info_screen_rejects_non_positive_width(client):
    resp = await client.get("/info", params={"width": 0})

    assert resp.status_code == 422


async def test_info_screen_without_config(client, resources_dir):
    (resources_dir / "Config.plist").unlink()

    resp = await client.get("/info")

    assert resp.status_code == 200
    assert "Default Hotel" in resp.text
    assert 'class="chip"' not in resp.text


async def test_location_screen(client):
    resp = await client.get("/location")

    assert resp.status_code == 200
    assert "Riverside" in resp.text
    assert "openstreetmap.org" in resp.text


async def test_location_screen_fallback(client, resources_dir):
    (resources_dir / "Config.plist").unlink()

    resp = await client.get("/location")

    assert "Fallback Location" in resp.text
    assert "47.515046" in resp.text


async def test_header_image_missing(client):
    resp = await client.get("/images/header")

    assert resp.status_code == 404
    assert resp.json()["detail"].startswith("Header image not found")


async def test_header_image_served(client, resources_dir):
    (resources_dir / "header.png").write_bytes(b"\x89PNG\r\n\x1a\nfake")

    resp = await client.get("/images/header")

    assert resp.status_code == 200
    assert resp.content == b"\x89PNG\r\n\x1a\nfake"
