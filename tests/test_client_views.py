import pytest

from app.client.api import ApiError, BrandMonitorClient
from app.client.views import ERROR, LOADED, BrandDetailView, DashboardView


@pytest.fixture()
def api(client):
    api_client = BrandMonitorClient(http=client)
    api_client.login("user1@example.com", "password123")
    return api_client


def test_client_login_and_logout(client):
    api_client = BrandMonitorClient(http=client)
    with pytest.raises(ApiError) as excinfo:
        api_client.login("user1@example.com", "nope")
    assert excinfo.value.status_code == 401
    assert excinfo.value.message == "Invalid credentials"

    api_client.login("user1@example.com", "password123")
    assert api_client.verify()["valid"] is True
    api_client.logout()
    assert api_client.token is None
    with pytest.raises(ApiError) as excinfo:
        api_client.verify()
    assert excinfo.value.status_code == 401


def test_dashboard_crud(api):
    alerts = []
    view = DashboardView(api, alert=alerts.append)
    view.load()
    assert view.status == LOADED
    assert view.brands == []
    assert view.render() == "No brands yet. Add your first brand!"

    assert view.add_brand("   ") is None
    nike = view.add_brand("Nike", "shoes")
    adidas = view.add_brand("Adidas")
    assert [brand["name"] for brand in view.brands] == ["Adidas", "Nike"]
    assert view.detail_path(nike) == f"/brands/{nike['id']}"

    view.edit_brand(nike["id"], "Nike Inc", "apparel")
    assert view.brands[1]["name"] == "Nike Inc"
    assert "Nike Inc - apparel" in view.render()

    assert view.delete_brand(adidas["id"], confirm=lambda _q: False) is False
    assert len(view.brands) == 2
    assert view.delete_brand(adidas["id"], confirm=lambda _q: True) is True
    assert [brand["id"] for brand in view.brands] == [nike["id"]]

    assert view.delete_brand(9999, confirm=lambda _q: True) is False
    assert alerts == ["Failed to delete brand"]


def test_dashboard_load_error(client):
    view = DashboardView(BrandMonitorClient(http=client, token="bogus"))
    view.load()
    assert view.status == ERROR
    assert view.error == "Invalid token"


def test_brand_detail_generate_and_rate(api):
    brand = api.create_brand("Nike")
    view = BrandDetailView(api, brand["id"])
    view.load()
    assert view.status == LOADED
    assert view.brand["name"] == "Nike"
    assert view.responses == []

    first = view.generate()
    second = view.generate()
    assert view.generating is False
    assert [row["id"] for row in view.responses] == [second["id"], first["id"]]
    assert view.responses[0]["rating"] is None

    rating = view.rate(first["id"], True)
    assert view.responses[1]["rating"] is True
    assert view.responses[1]["rating_id"] == rating["id"]
    view.rate(first["id"], False)
    assert view.responses[1]["rating"] is False
    assert view.responses[1]["rating_id"] == rating["id"]

    rendered = view.render().splitlines()
    assert rendered[0] == "Nike"
    assert rendered[1].startswith(f"[ ] #{second['id']} ")
    assert rendered[2].startswith(f"[-] #{first['id']} ")


def test_brand_detail_for_unknown_brand(api):
    alerts = []
    view = BrandDetailView(api, 4242, alert=alerts.append)
    view.load()
    assert view.status == ERROR
    assert alerts == ["Failed to load brand data"]
