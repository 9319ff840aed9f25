"""
API tests for the transport activity data endpoint.
"""
import pytest


@pytest.mark.asyncio
async def test_list_tads_default_limit(test_async_client):
    """Test the first page holds ten records and links to the rest."""
    response = await test_async_client.get("/2/ileap/tad")
    assert response.status_code == 200

    data = response.json()["data"]
    assert [tad["activityId"] for tad in data] == [str(i) for i in range(1, 11)]
    assert response.headers["link"] == (
        '<http://localhost:8000/2/ileap/tad?offset=10&limit=10>; rel="next"'
    )


@pytest.mark.asyncio
async def test_list_tads_last_page(test_async_client):
    """Test the last page has no link header."""
    response = await test_async_client.get("/2/ileap/tad", params={"offset": 10})
    assert response.status_code == 200
    assert [tad["activityId"] for tad in response.json()["data"]] == ["11", "12"]
    assert "link" not in response.headers


@pytest.mark.asyncio
async def test_list_tads_offset_out_of_range(test_async_client):
    """Test an offset past the end is a bad request."""
    response = await test_async_client.get("/2/ileap/tad", params={"offset": 13})
    assert response.status_code == 400
    assert response.json()["code"] == "BadRequest"


@pytest.mark.asyncio
async def test_filter_tads_by_mode(test_async_client, test_app):
    """Test attribute filters select matching records."""
    mode = test_app.state.tads[0].mode.value
    expected = [
        tad.activity_id for tad in test_app.state.tads if tad.mode.value == mode
    ]

    response = await test_async_client.get(
        "/2/ileap/tad", params={"mode": mode.upper(), "limit": 100}
    )
    assert response.status_code == 200
    assert [tad["activityId"] for tad in response.json()["data"]] == expected


@pytest.mark.asyncio
async def test_filter_tads_with_several_values(test_async_client, test_app):
    """Test a filter accepts any of its values."""
    response = await test_async_client.get(
        "/2/ileap/tad?mode=Road&mode=Rail&mode=Air&mode=Sea&mode=InlandWaterway&limit=100"
    )
    assert response.status_code == 200
    assert len(response.json()["data"]) == len(test_app.state.tads)


@pytest.mark.asyncio
async def test_filter_tads_without_match(test_async_client):
    """Test a filter matching nothing gives an empty page."""
    response = await test_async_client.get("/2/ileap/tad", params={"mode": "Teleport"})
    assert response.status_code == 200
    assert response.json() == {"data": []}
    assert "link" not in response.headers


@pytest.mark.asyncio
async def test_filtered_link_keeps_filters(test_async_client):
    """Test the next page of a filtered listing is filtered the same way."""
    modes = "mode=Road&mode=Rail&mode=Air&mode=Sea&mode=InlandWaterway"
    response = await test_async_client.get(f"/2/ileap/tad?{modes}")
    assert response.status_code == 200
    assert response.headers["link"] == (
        f'<http://localhost:8000/2/ileap/tad?offset=10&limit=10&{modes}>; rel="next"'
    )

    response = await test_async_client.get(f"/2/ileap/tad?offset=10&limit=10&{modes}")
    assert [tad["activityId"] for tad in response.json()["data"]] == ["11", "12"]
