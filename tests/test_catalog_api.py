"""Products and stores endpoints."""


class TestProducts:
    def test_create_product(self, client):
        response = client.post("/products", json={"name": "Widget"})
        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Product added successfully"
        assert data["product"]["name"] == "Widget"
        assert isinstance(data["product"]["id"], int)
        assert "createdAt" in data["product"]

    def test_missing_name(self, client):
        response = client.post("/products", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "Product name is required."}

    def test_blank_name(self, client):
        response = client.post("/products", json={"name": "   "})
        assert response.status_code == 400

    def test_duplicate_name_conflicts(self, client, product):
        response = client.post("/products", json={"name": "Widget"})
        assert response.status_code == 409
        assert response.json() == {"error": "Product name already exists."}

        listing = client.get("/products").json()
        assert len(listing) == 1
        assert listing[0]["id"] == product["id"]
        assert listing[0]["name"] == "Widget"

    def test_list_sorted_by_name(self, client):
        for name in ["Gadget", "Bolt", "Widget"]:
            client.post("/products", json={"name": name})
        names = [p["name"] for p in client.get("/products").json()]
        assert names == ["Bolt", "Gadget", "Widget"]

    def test_get_product(self, client, product):
        response = client.get(f"/products/{product['id']}")
        assert response.status_code == 200
        assert response.json()["name"] == "Widget"

    def test_get_unknown_product(self, client):
        response = client.get("/products/404")
        assert response.status_code == 404
        assert response.json() == {"error": "Product with ID 404 not found."}


class TestStores:
    def test_create_store(self, client):
        response = client.post("/stores", json={"name": "Downtown", "location": "Main street 1"})
        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Store added successfully"
        assert data["store"]["name"] == "Downtown"
        assert data["store"]["location"] == "Main street 1"

    def test_location_optional(self, client):
        response = client.post("/stores", json={"name": "Kiosk"})
        assert response.status_code == 201
        assert response.json()["store"]["location"] is None

    def test_missing_name(self, client):
        response = client.post("/stores", json={"location": "Nowhere"})
        assert response.status_code == 400
        assert response.json() == {"error": "Store name is required."}

    def test_duplicate_name_keeps_original(self, client, store):
        response = client.post("/stores", json={"name": "A", "location": "Elsewhere"})
        assert response.status_code == 409
        assert response.json() == {"error": "Store name already exists."}

        original = client.get(f"/stores/{store['id']}").json()
        assert original["location"] == "Main street 1"
        assert len(client.get("/stores").json()) == 1

    def test_list_sorted_by_name(self, client):
        for name in ["Zeta", "Alpha", "Mid"]:
            client.post("/stores", json={"name": name})
        names = [s["name"] for s in client.get("/stores").json()]
        assert names == ["Alpha", "Mid", "Zeta"]

    def test_get_unknown_store(self, client):
        response = client.get("/stores/7")
        assert response.status_code == 404
        assert response.json() == {"error": "Store with ID 7 not found."}


def test_oversized_path_ids_are_not_found(client):
    huge = "99999999999999999999"
    assert client.get(f"/products/{huge}").json() == {"error": f"Product with ID {huge} not found."}
    response = client.get(f"/stores/{huge}")
    assert response.status_code == 404
    assert response.json() == {"error": f"Store with ID {huge} not found."}
