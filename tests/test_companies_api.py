"""
Tests for the /companies endpoints.
"""

from api.schemas import CompanyUpdate
from scripts.init_db import SAMPLE_COMPANIES


class TestCreateCompany:
    """POST /companies"""

    new_company = {
        "handle": "new",
        "name": "New",
        "logoUrl": "http://new.img",
        "description": "DescNew",
        "numEmployees": 10,
    }

    def test_ok_for_admin(self, client, admin_headers):
        resp = client.post("/companies", json=self.new_company, headers=admin_headers)

        assert resp.status_code == 201
        assert resp.json() == {"company": self.new_company}

    def test_unauth_for_non_admin(self, client, user_headers):
        resp = client.post("/companies", json=self.new_company, headers=user_headers)

        assert resp.status_code == 401

    def test_duplicate(self, client, admin_headers):
        resp = client.post(
            "/companies", json={**self.new_company, "handle": "c1"}, headers=admin_headers
        )

        assert resp.status_code == 400
        assert resp.json()["detail"] == "Duplicate company: c1"

    def test_bad_request_invalid_logo(self, client, admin_headers):
        resp = client.post(
            "/companies",
            json={**self.new_company, "logoUrl": "not-a-url"},
            headers=admin_headers,
        )

        assert resp.status_code == 400

    def test_bad_request_invalid_handle(self, client, admin_headers):
        resp = client.post(
            "/companies",
            json={**self.new_company, "handle": "Bad Handle"},
            headers=admin_headers,
        )

        assert resp.status_code == 400


class TestListCompanies:
    """GET /companies"""

    def test_ok_for_anon(self, client):
        resp = client.get("/companies")

        assert resp.status_code == 200
        assert [c["handle"] for c in resp.json()["companies"]] == ["c1", "c2"]

    def test_filters(self, client):
        resp = client.get("/companies", params={"minEmployees": 2, "name": "c"})

        assert [c["handle"] for c in resp.json()["companies"]] == ["c2"]

    def test_bad_range(self, client):
        resp = client.get("/companies", params={"minEmployees": 5, "maxEmployees": 1})

        assert resp.status_code == 400

    def test_unknown_filter(self, client):
        resp = client.get("/companies", params={"industry": "tech"})

        assert resp.status_code == 400


class TestGetCompany:
    """GET /companies/{handle}"""

    def test_ok_with_jobs(self, client):
        resp = client.get("/companies/c1")

        assert resp.status_code == 200
        company = resp.json()["company"]
        assert company["handle"] == "c1"
        assert [j["id"] for j in company["jobs"]] == [1, 2, 3]

    def test_not_found(self, client):
        assert client.get("/companies/nope").status_code == 404


class TestUpdateCompany:
    """PATCH /companies/{handle}"""

    def test_ok_for_admin(self, client, admin_headers):
        resp = client.patch(
            "/companies/c1", json={"name": "C1-new", "numEmployees": 5}, headers=admin_headers
        )

        assert resp.status_code == 200
        assert resp.json()["company"]["name"] == "C1-new"
        assert resp.json()["company"]["numEmployees"] == 5

    def test_bad_request_handle_change(self, client, admin_headers):
        resp = client.patch("/companies/c1", json={"handle": "c1-new"}, headers=admin_headers)

        assert resp.status_code == 400

    def test_not_found(self, client, admin_headers):
        resp = client.patch("/companies/nope", json={"name": "x"}, headers=admin_headers)

        assert resp.status_code == 404

    def test_bad_request_null_name(self, client, admin_headers, store):
        resp = client.patch("/companies/c1", json={"name": None}, headers=admin_headers)

        assert resp.status_code == 400
        assert store["companies"]["c1"]["name"] == "C1"

    def test_bad_request_null_description(self, client, admin_headers):
        resp = client.patch(
            "/companies/c1", json={"description": None}, headers=admin_headers
        )

        assert resp.status_code == 400

    def test_ok_null_logo(self, client, admin_headers):
        resp = client.patch("/companies/c1", json={"logoUrl": None}, headers=admin_headers)

        assert resp.status_code == 200
        assert resp.json()["company"]["logoUrl"] is None

    def test_unauth_for_anon(self, client):
        assert client.patch("/companies/c1", json={"name": "x"}).status_code == 401


class TestDeleteCompany:
    """DELETE /companies/{handle}"""

    def test_ok_for_admin(self, client, admin_headers):
        resp = client.delete("/companies/c2", headers=admin_headers)

        assert resp.json() == {"deleted": "c2"}

    def test_not_found(self, client, admin_headers):
        assert client.delete("/companies/nope", headers=admin_headers).status_code == 404


class TestSampleCompanies:
    """Seed companies from scripts/init_db.py"""

    def test_seed_logos_are_accepted_by_update(self):
        for company in SAMPLE_COMPANIES:
            update = CompanyUpdate(logoUrl=company["logo_url"])

            assert update.logo_url == company["logo_url"]
