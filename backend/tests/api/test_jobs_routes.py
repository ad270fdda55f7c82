"""Job Routes — CRUD over /api/v1/jobs, addressed by the job's own id."""


async def _job_id(client, title: str) -> int:
    res = await client.get("/api/v1/jobs", params={"title": title})
    return res.json()["jobs"][0]["id"]


async def test_create_as_admin(client, admin_headers):
    res = await client.post(
        "/api/v1/jobs",
        json={"title": "new", "salary": 50, "equity": 0.25, "companyHandle": "c2"},
        headers=admin_headers,
    )
    assert res.status_code == 201
    job = res.json()["job"]
    assert job["title"] == "new"
    assert job["equity"] == 0.25
    assert job["companyHandle"] == "c2"
    assert isinstance(job["id"], int)


async def test_create_as_non_admin_is_401(client, user_headers):
    res = await client.post(
        "/api/v1/jobs", json={"title": "new", "companyHandle": "c1"}, headers=user_headers,
    )
    assert res.status_code == 401


async def test_create_unknown_company_is_400(client, admin_headers):
    res = await client.post(
        "/api/v1/jobs", json={"title": "new", "companyHandle": "nope"}, headers=admin_headers,
    )
    assert res.status_code == 400


async def test_create_equity_above_one_is_400(client, admin_headers):
    res = await client.post(
        "/api/v1/jobs",
        json={"title": "new", "equity": 1.1, "companyHandle": "c1"},
        headers=admin_headers,
    )
    assert res.status_code == 400


async def test_list_filters(client):
    res = await client.get("/api/v1/jobs", params={"minSalary": 150, "hasEquity": "true"})
    assert [j["title"] for j in res.json()["jobs"]] == ["j2"]


async def test_list_has_equity_false(client):
    res = await client.get("/api/v1/jobs", params={"hasEquity": "false"})
    assert len(res.json()["jobs"]) == 4


async def test_get_by_id(client):
    job_id = await _job_id(client, "j3")
    res = await client.get(f"/api/v1/jobs/{job_id}")
    assert res.status_code == 200
    assert res.json()["job"]["title"] == "j3"


async def test_get_not_found(client):
    res = await client.get("/api/v1/jobs/0")
    assert res.status_code == 404


async def test_update_as_admin(client, admin_headers):
    job_id = await _job_id(client, "j1")
    res = await client.patch(
        f"/api/v1/jobs/{job_id}", json={"title": "j1-new"}, headers=admin_headers,
    )
    assert res.status_code == 200
    assert res.json()["job"] == {
        "id": job_id,
        "title": "j1-new",
        "salary": 100,
        "equity": 0.1,
        "companyHandle": "c1",
    }


async def test_update_company_handle_rejected(client, admin_headers):
    job_id = await _job_id(client, "j1")
    res = await client.patch(
        f"/api/v1/jobs/{job_id}", json={"companyHandle": "c2"}, headers=admin_headers,
    )
    assert res.status_code == 400


async def test_update_not_found(client, admin_headers):
    res = await client.patch("/api/v1/jobs/0", json={"title": "x"}, headers=admin_headers)
    assert res.status_code == 404


async def test_delete(client, admin_headers):
    job_id = await _job_id(client, "j4")
    res = await client.delete(f"/api/v1/jobs/{job_id}", headers=admin_headers)
    assert res.json() == {"deleted": job_id}
    assert (await client.get(f"/api/v1/jobs/{job_id}")).status_code == 404


async def test_delete_as_non_admin_is_401(client, user_headers):
    job_id = await _job_id(client, "j4")
    res = await client.delete(f"/api/v1/jobs/{job_id}", headers=user_headers)
    assert res.status_code == 401
