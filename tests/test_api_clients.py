def test_create_and_get_client(client, make_client):
    created = make_client(email="", services=["gst"])

    assert created["id"] == 1
    assert created["status"] == "active"
    assert created["clientType"] == "business"
    assert created["email"] is None
    assert created["services"] == ["gst"]
    assert created["createdAt"]

    response = client.get(f"/api/clients/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


def test_list_and_search_clients(client, make_client):
    make_client(name="Raj Enterprises")
    make_client(name="Priya Textiles", clientType="partnership", email="info@raj.com")
    make_client(name="Mumbai Motors", clientType="pvtltd", contactNumber="RAJ-0001")

    assert len(client.get("/api/clients").json()) == 3

    found = client.get("/api/clients", params={"search": "raj"}).json()
    assert {c["name"] for c in found} == {"Raj Enterprises", "Priya Textiles"}


def test_update_client(client, make_client):
    created = make_client()
    response = client.put(f"/api/clients/{created['id']}", json={"status": "pending_docs", "notes": "Awaiting PAN"})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "pending_docs"
    assert data["notes"] == "Awaiting PAN"
    assert data["name"] == "Raj Enterprises"


def test_update_client_rejects_null_name(client, make_client):
    created = make_client()
    response = client.put(f"/api/clients/{created['id']}", json={"name": None})
    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "name"


def test_invalid_client_type(client):
    response = client.post("/api/clients", json={"name": "X", "clientType": "trust", "contactNumber": "1"})
    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "clientType"


def test_missing_client_routes_are_404(client):
    assert client.get("/api/clients/42").status_code == 404
    assert client.put("/api/clients/42", json={"name": "X"}).status_code == 404
    assert client.delete("/api/clients/42").status_code == 404


def test_delete_client_keeps_related_records(client, make_client):
    created = make_client()
    cid = created["id"]
    client.post("/api/payments", json={"clientId": cid, "serviceName": "GST Filing", "feeAmount": 1000})
    client.post("/api/reminders", json={"clientId": cid, "serviceName": "GSTR-1", "dueDate": "2030-01-11T00:00:00"})
    client.post(f"/api/clients/{cid}/kyc", json={"pan": "AABCR1234K"})

    response = client.delete(f"/api/clients/{cid}")
    assert response.status_code == 204
    assert response.content == b""

    assert client.get(f"/api/clients/{cid}").status_code == 404
    assert len(client.get(f"/api/clients/{cid}/payments").json()) == 1
    assert len(client.get(f"/api/clients/{cid}/reminders").json()) == 1
    assert client.get(f"/api/clients/{cid}/kyc").json()["pan"] == "AABCR1234K"
