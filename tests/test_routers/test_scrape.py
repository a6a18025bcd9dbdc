import httpx
import respx
from httpx import Response

CLINIC_URL = "https://clinica.es"

CLINIC_HTML = (
    "<html><head>"
    '<meta property="og:site_name" content="Policlínica Sur">'
    "</head><body>"
    "<p>Teléfono: 954 12 34 56</p>"
    "<p>Servicios de pediatría y fisioterapia.</p>"
    "</body></html>"
)

EMPTY_RESULT = {
    "name": "",
    "phone": "",
    "address": "",
    "specialties": [],
    "schedule": "",
    "doctors": [],
    "opening_hours": {},
    "additional_info": "",
}


@respx.mock
async def test_scrape_clinic(client):
    respx.get(CLINIC_URL).mock(return_value=Response(200, html=CLINIC_HTML))

    resp = await client.post("/scrape-clinic", json={"website_url": "clinica.es"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Policlínica Sur"
    assert data["phone"] == "+34954123456"
    assert data["specialties"] == ["Pediatría", "Fisioterapia"]
    assert data["doctors"] == []
    assert data["opening_hours"] == {}
    assert "error" not in data


async def test_missing_website_url(client):
    resp = await client.post("/scrape-clinic", json={})
    assert resp.status_code == 400
    assert resp.json() == {"error": "website_url is required"}


async def test_blank_website_url(client):
    resp = await client.post("/scrape-clinic", json={"website_url": "   "})
    assert resp.status_code == 400


async def test_missing_body(client):
    resp = await client.post("/scrape-clinic")
    assert resp.status_code == 400


@respx.mock
async def test_unreachable_site_returns_200_with_error(client):
    respx.get(CLINIC_URL).mock(side_effect=httpx.ConnectError("Connection refused"))

    resp = await client.post("/scrape-clinic", json={"website_url": CLINIC_URL})

    assert resp.status_code == 200
    assert resp.json() == {**EMPTY_RESULT, "error": "Connection refused"}


@respx.mock
async def test_http_error_returns_200_with_error(client):
    respx.get(CLINIC_URL).mock(return_value=Response(500))

    resp = await client.post("/scrape-clinic", json={"website_url": CLINIC_URL})

    assert resp.status_code == 200
    assert resp.json() == {**EMPTY_RESULT, "error": "HTTP 500"}


async def test_cors_preflight(client):
    resp = await client.options(
        "/scrape-clinic",
        headers={
            "Origin": "https://app.example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type, Authorization",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"
    assert "POST" in resp.headers["access-control-allow-methods"]


@respx.mock
async def test_cors_header_on_post(client):
    respx.get(CLINIC_URL).mock(return_value=Response(200, html=CLINIC_HTML))

    resp = await client.post(
        "/scrape-clinic",
        json={"website_url": CLINIC_URL},
        headers={"Origin": "https://app.example.com"},
    )
    assert resp.headers["access-control-allow-origin"] == "*"
