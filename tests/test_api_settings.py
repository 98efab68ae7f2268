FIRM = {
    "firmName": "Mehta & Co",
    "contactPerson": "CA Neha Mehta",
    "contactNumber": "+91 99999 00000",
    "email": "office@mehta.co",
    "gstin": "27AABCM1234K1Z5",
}


def test_default_firm_settings(client):
    data = client.get("/api/settings").json()
    assert data["id"] == 1
    assert data["firmName"] == "Sharma & Associates"
    assert data["logo"] is None


def test_replace_firm_settings(client):
    response = client.put("/api/settings", json=FIRM)
    assert response.status_code == 200

    data = client.get("/api/settings").json()
    assert data["firmName"] == "Mehta & Co"
    assert data["gstin"] == "27AABCM1234K1Z5"
    assert data["address"] is None
    assert data["id"] == 1


def test_firm_settings_require_core_fields(client):
    response = client.put("/api/settings", json={"firmName": "Mehta & Co"})
    assert response.status_code == 400
    fields = {d["field"] for d in response.json()["details"]}
    assert fields == {"contactPerson", "contactNumber", "email"}


def test_invoice_uses_current_firm_profile(client, make_client):
    client.put("/api/settings", json=FIRM)
    raj = make_client()
    payment = client.post("/api/payments", json={"clientId": raj["id"], "serviceName": "GST Filing", "feeAmount": 100}).json()

    page = client.get(f"/api/payments/{payment['id']}/invoice").text
    assert "Mehta &amp; Co" in page
    assert "27 AABCM 1234 K 1Z 5" in page
