"""HTTP routes: request validation, response shapes and error translation."""


class TestMeta:

    def test_root_and_health(self, client):
        assert client.get("/").json()["status"] == "running"
        assert client.get("/health").json()["status"] == "healthy"
        assert "products" in client.get("/api/v1/").json()["available_endpoints"]


class TestProductRoutes:

    def test_list_products(self, client):
        response = client.get("/api/v1/products")

        assert response.status_code == 200
        body = response.json()
        assert [p["id"] for p in body] == ["P-4", "P-3", "P-2", "P-1"]
        assert body[0]["status"] == "Critical"
        assert set(body[0]) >= {"id", "name", "sku", "warehouse", "stock", "demand", "created_at", "updated_at"}

    def test_list_products_with_filters(self, client):
        response = client.get("/api/v1/products", params={"warehouse": "W1", "status": "Healthy", "search": "wid"})
        assert [p["id"] for p in response.json()] == ["P-1"]

    def test_empty_filters_are_ignored(self, client):
        response = client.get("/api/v1/products", params={"warehouse": "", "status": ""})
        assert len(response.json()) == 4

    def test_get_product(self, client):
        response = client.get("/api/v1/products/P-3")
        assert response.status_code == 200
        assert response.json()["status"] == "Low"

    def test_get_unknown_product(self, client):
        response = client.get("/api/v1/products/P-404")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error_code"] == "not_found"

    def test_update_demand(self, client):
        response = client.patch("/api/v1/products/P-1/demand", json={"demand": 150})

        assert response.status_code == 200
        assert response.json()["demand"] == 150
        assert response.json()["status"] == "Critical"
        assert client.get("/api/v1/products/P-1").json()["demand"] == 150

    def test_update_demand_unknown_product(self, client):
        response = client.patch("/api/v1/products/P-404/demand", json={"demand": 1})
        assert response.status_code == 404

    def test_update_demand_bounds(self, client):
        for demand in (-1, 1_000_000):
            response = client.patch("/api/v1/products/P-1/demand", json={"demand": demand})

            assert response.status_code == 422
            body = response.json()
            assert body["success"] is False
            assert body["error_code"] == "validation_error"
            assert body["details"]["errors"][0]["loc"] == ["body", "demand"]

        assert client.patch("/api/v1/products/P-1/demand", json={"demand": 999_999}).status_code == 200


class TestWarehouseRoutes:

    def test_list_ordered_by_name(self, client):
        response = client.get("/api/v1/warehouses")

        assert response.status_code == 200
        assert [w["code"] for w in response.json()] == ["W3", "W1", "W2"]
        assert response.json()[0] == {"code": "W3", "name": "Annex", "city": "Pune", "country": "India"}

    def test_get_warehouse(self, client):
        response = client.get("/api/v1/warehouses/W2")

        assert response.status_code == 200
        assert response.json()["city"] == "Delhi"

    def test_get_unknown_warehouse(self, client):
        response = client.get("/api/v1/warehouses/W9")

        assert response.status_code == 404
        assert response.json()["error_code"] == "not_found"


class TestKpiRoutes:

    def test_list_kpis_by_range(self, client):
        response = client.get("/api/v1/kpis", params={"range": "14d"})

        assert response.status_code == 200
        dates = [k["date"] for k in response.json()]
        assert len(dates) == 14
        assert dates == sorted(dates)

    def test_invalid_range_rejected(self, client):
        response = client.get("/api/v1/kpis", params={"range": "90d"})

        assert response.status_code == 422
        assert response.json()["error_code"] == "validation_error"

    def test_summary(self, client):
        response = client.get("/api/v1/kpis/summary", params={"range": "7d"})

        assert response.status_code == 200
        body = response.json()
        assert body["range"] == "7d"
        assert body["days"] == 7
        assert body["fill_rate_rating"] == "Excellent"


class TestTransferRoutes:

    def _transfer(self, client, **overrides):
        payload = {"product_id": "P-1", "from_warehouse": "W1", "to_warehouse": "W2", "quantity": 30}
        payload.update(overrides)
        return client.post("/api/v1/transfers", json=payload)

    def test_transfer(self, client):
        response = self._transfer(client)

        assert response.status_code == 200
        body = response.json()
        assert body["stock"] == 70
        assert body["warehouse"] == "W2"

    def test_insufficient_stock_reports_quantities(self, client):
        response = self._transfer(client, product_id="P-2", quantity=15)

        assert response.status_code == 409
        body = response.json()
        assert body["error_code"] == "insufficient_stock"
        assert body["details"] == {"available": 10, "requested": 15}
        assert client.get("/api/v1/products/P-2").json()["stock"] == 10

    def test_not_in_source_warehouse(self, client):
        response = self._transfer(client, from_warehouse="W3")

        assert response.status_code == 409
        assert response.json()["error_code"] == "not_in_source_warehouse"

    def test_unknown_destination(self, client):
        response = self._transfer(client, to_warehouse="W9")
        assert response.status_code == 404

    def test_request_validation(self, client):
        zero = self._transfer(client, quantity=0)
        assert zero.status_code == 422
        assert zero.json()["error_code"] == "validation_error"
        assert zero.json()["details"]["errors"][0]["loc"] == ["body", "quantity"]

        same = self._transfer(client, to_warehouse="W1")
        assert same.status_code == 422
        body = same.json()
        assert body["success"] is False
        assert body["error_code"] == "validation_error"
        assert "must differ" in body["message"]

        assert client.get("/api/v1/products/P-1").json()["stock"] == 100

    def test_history(self, client):
        self._transfer(client)
        self._transfer(client, product_id="P-3", from_warehouse="W2", to_warehouse="W3", quantity=5)

        all_transfers = client.get("/api/v1/transfers").json()
        assert all_transfers["count"] == 2
        assert all_transfers["transfers"][0]["product_id"] == "P-3"

        p1_transfers = client.get("/api/v1/transfers", params={"product_id": "P-1"}).json()
        assert p1_transfers["count"] == 1
        assert p1_transfers["transfers"][0]["quantity_after"] == 70
