"""Marketplace HTTP endpoints end to end (in-memory store)."""

import pytest

MISSING_ID = "65f0000000000000000000ff"

pytestmark = pytest.mark.integration


@pytest.fixture
def create(client, make_payload):
    def _create(**overrides):
        response = client.post("/api/marketplace", json=make_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create


class TestCreateMedicine:
    """POST /api/marketplace"""

    def test_create_copper_fungicide(self, client, medicine_payload) -> None:
        response = client.post("/api/marketplace", json=medicine_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Medicine created successfully"
        data = body["data"]
        assert data["_id"] == data["id"]
        assert data["name"] == "Copper Fungicide Pro"
        assert data["views"] == 0
        assert data["availability"] == "Available"
        assert data["formattedPrice"] == "USD 24.99"
        assert data["formattedPackageSize"] == "500 ml"
        assert data["diseaseSummary"] == "Early Blight, Late Blight"
        assert data["timeAgo"] == "Today"

    @pytest.mark.parametrize("field", ["targetDiseases", "images"])
    def test_empty_required_list_creates_nothing(
        self, client, make_payload, medicine_repository, field
    ) -> None:
        response = client.post("/api/marketplace", json=make_payload(**{field: []}))

        assert response.status_code == 400
        body = response.json()
        assert body == {
            "success": False,
            "message": "Validation error",
            "details": body["details"],
        }
        assert field in [item["field"] for item in body["details"]]
        assert medicine_repository.documents == {}

    def test_unknown_medicine_type(self, client, make_payload) -> None:
        response = client.post("/api/marketplace", json=make_payload(medicineType="Snake Oil"))
        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "medicineType"

    def test_invalid_seller_email(self, client, make_payload) -> None:
        payload = make_payload(seller={"name": "Agro", "email": "not-an-email"})
        response = client.post("/api/marketplace", json=payload)
        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "seller.email"


class TestListMedicines:
    """GET /api/marketplace"""

    def test_default_listing_hides_sold(self, client, create) -> None:
        create(name="On Shelf")
        create(name="Gone", availability="Sold")

        body = client.get("/api/marketplace").json()

        assert body["message"] == "Medicines retrieved successfully"
        assert [m["name"] for m in body["data"]["medicines"]] == ["On Shelf"]
        assert body["data"]["pagination"]["totalItems"] == 1

    def test_inverted_price_range_is_empty(self, client, create) -> None:
        create()

        response = client.get("/api/marketplace", params={"minPrice": 100, "maxPrice": 50})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["medicines"] == []
        assert data["pagination"] == {
            "currentPage": 1,
            "totalPages": 0,
            "totalItems": 0,
            "hasNextPage": False,
            "hasPrevPage": False,
        }

    def test_filters_combine(self, client, create) -> None:
        create(name="Tomato Copper", price=20)
        create(name="Pricey Copper", price=80)
        create(name="Rose Care", targetPlants=["Rose"], price=15)

        response = client.get("/api/marketplace", params={
            "targetPlant": "Tomato",
            "maxPrice": 50,
            "location": "kiga",
        })

        assert [m["name"] for m in response.json()["data"]["medicines"]] == ["Tomato Copper"]

    def test_search_param_narrows_listing(self, client, create) -> None:
        create(name="Copper Shield")
        create(name="Neem Oil", activeIngredient="Azadirachtin", tags=["neem"],
               description="Cold pressed neem oil.")

        response = client.get("/api/marketplace", params={"search": "neem"})

        assert [m["name"] for m in response.json()["data"]["medicines"]] == ["Neem Oil"]

    def test_paging_and_price_sort(self, client, create) -> None:
        for price in (30, 10, 20):
            create(name=f"Medicine {price}", price=price)

        response = client.get("/api/marketplace", params={
            "page": 2, "limit": 2, "sortBy": "price", "sortOrder": "asc",
        })

        data = response.json()["data"]
        assert [m["price"] for m in data["medicines"]] == [30]
        assert data["pagination"]["totalPages"] == 2
        assert data["pagination"]["hasPrevPage"] is True
        assert data["pagination"]["hasNextPage"] is False

    def test_page_past_end_is_empty(self, client, create) -> None:
        create()
        data = client.get("/api/marketplace", params={"page": 5}).json()["data"]
        assert data["medicines"] == []
        assert data["pagination"]["totalItems"] == 1

    @pytest.mark.parametrize("params", [
        {"sortBy": "seller"},
        {"sortOrder": "sideways"},
        {"limit": 101},
        {"limit": 0},
        {"page": 0},
        {"medicineType": "Snake Oil"},
        {"minPrice": -1},
    ])
    def test_invalid_parameters(self, client, params) -> None:
        response = client.get("/api/marketplace", params=params)
        assert response.status_code == 400
        assert response.json()["message"] == "Validation error"


class TestSearchMedicines:
    """GET /api/marketplace/search"""

    def test_search_echoes_query_and_filters(self, client, create) -> None:
        create()

        response = client.get("/api/marketplace/search", params={
            "q": "copper",
            "targetPlant": "Tomato",
        })

        body = response.json()
        assert body["message"] == "Search completed successfully"
        assert body["data"]["searchQuery"] == "copper"
        assert body["data"]["filters"] == {"targetPlant": "Tomato"}
        assert len(body["data"]["medicines"]) == 1

    def test_active_ingredient_filter(self, client, create) -> None:
        create()
        create(name="Copper Sulfate Mix", activeIngredient="Copper sulfate")

        response = client.get("/api/marketplace/search", params={
            "q": "copper",
            "activeIngredient": "HYDROXIDE",
        })

        assert [m["name"] for m in response.json()["data"]["medicines"]] == ["Copper Fungicide Pro"]

    def test_regex_characters_are_literal(self, client, create) -> None:
        create(concentration="50%", description="Contains (50%) copper.")

        response = client.get("/api/marketplace/search", params={"q": "(50%)"})

        assert response.status_code == 200
        assert len(response.json()["data"]["medicines"]) == 1

    @pytest.mark.parametrize("params", [{}, {"q": "   "}])
    def test_blank_query(self, client, params) -> None:
        response = client.get("/api/marketplace/search", params=params)
        assert response.status_code == 400
        assert response.json()["message"] == "Search query is required"


class TestDimensionEndpoints:
    """GET /api/marketplace/{type,disease,plant}/..."""

    def test_by_type(self, client, create) -> None:
        create()
        create(name="Sulfur Dust", medicineType="Sulfur-based")

        body = client.get("/api/marketplace/type/Copper-based").json()

        assert body["message"] == "Medicines of type Copper-based retrieved successfully"
        assert body["data"]["medicineType"] == "Copper-based"
        assert [m["name"] for m in body["data"]["medicines"]] == ["Copper Fungicide Pro"]

    def test_by_disease(self, client, create) -> None:
        create()
        body = client.get("/api/marketplace/disease/Late Blight").json()
        assert body["message"] == "Medicines for Late Blight retrieved successfully"
        assert body["data"]["disease"] == "Late Blight"
        assert len(body["data"]["medicines"]) == 1

    def test_by_plant_excludes_unavailable(self, client, create) -> None:
        create(availability="Reserved")
        body = client.get("/api/marketplace/plant/Potato").json()
        assert body["data"]["plant"] == "Potato"
        assert body["data"]["medicines"] == []

    def test_unknown_vocabulary_value(self, client) -> None:
        response = client.get("/api/marketplace/type/Snake Oil")
        assert response.status_code == 400


class TestFeaturedAndMeta:
    """GET /api/marketplace/featured, /meta"""

    def test_featured_newest_first(self, client, create, medicine_repository) -> None:
        older = create(name="Older Star", featured=True)
        create(name="Newer Star", featured=True)
        create(name="Plain")
        medicine_repository.backdate(older["id"], days=3)

        body = client.get("/api/marketplace/featured", params={"limit": 5}).json()

        assert [m["name"] for m in body["data"]] == ["Newer Star", "Older Star"]

    def test_meta_lists_vocabularies(self, client) -> None:
        data = client.get("/api/marketplace/meta").json()["data"]
        assert "Copper-based" in data["medicineTypes"]
        assert "Late Blight" in data["targetDiseases"]
        assert data["sortFields"][0] == "createdAt"


class TestSingleMedicine:
    """GET / PUT / DELETE /api/marketplace/{id}"""

    def test_get_increments_views(self, client, create) -> None:
        created = create()

        first = client.get(f"/api/marketplace/{created['id']}").json()
        second = client.get(f"/api/marketplace/{created['id']}").json()

        assert first["message"] == "Medicine retrieved successfully"
        assert (first["data"]["views"], second["data"]["views"]) == (1, 2)

    def test_invalid_id(self, client) -> None:
        response = client.get("/api/marketplace/not-an-id")
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid medicine ID format"

    def test_missing_listing(self, client) -> None:
        response = client.get(f"/api/marketplace/{MISSING_ID}")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Medicine not found"}

    def test_partial_update(self, client, create) -> None:
        created = create()

        response = client.put(f"/api/marketplace/{created['id']}", json={"price": 19.5, "featured": True})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["price"] == 19.5
        assert data["featured"] is True
        assert data["name"] == created["name"]
        assert data["updatedAt"] >= created["updatedAt"]
        assert data["createdAt"] == created["createdAt"]

    def test_empty_update_only_touches_timestamp(self, client, create) -> None:
        created = create()
        response = client.put(f"/api/marketplace/{created['id']}", json={})
        assert response.status_code == 200
        assert response.json()["data"]["price"] == created["price"]

    def test_update_rejects_null_and_bad_values(self, client, create) -> None:
        created = create()

        null_response = client.put(f"/api/marketplace/{created['id']}", json={"name": None})
        bad_response = client.put(f"/api/marketplace/{created['id']}", json={"quantity": -3})

        assert null_response.status_code == 400
        assert "name" in null_response.json()["details"][0]["message"]
        assert bad_response.status_code == 400

    def test_update_missing(self, client) -> None:
        response = client.put(f"/api/marketplace/{MISSING_ID}", json={"price": 1})
        assert response.status_code == 404

    def test_delete_returns_receipt(self, client, create) -> None:
        created = create()

        response = client.delete(f"/api/marketplace/{created['id']}")

        assert response.json() == {
            "success": True,
            "message": "Medicine deleted successfully",
            "data": {"deletedMedicine": {"id": created["id"], "name": "Copper Fungicide Pro"}},
        }
        assert client.get(f"/api/marketplace/{created['id']}").status_code == 404

    def test_listing_lifecycle(self, client, medicine_payload) -> None:
        created = client.post("/api/marketplace", json=medicine_payload)
        assert created.status_code == 201
        medicine_id = created.json()["data"]["id"]

        by_disease = client.get("/api/marketplace/disease/Early%20Blight").json()["data"]
        assert medicine_id in [m["id"] for m in by_disease["medicines"]]

        assert client.delete(f"/api/marketplace/{medicine_id}").status_code == 200
        assert client.get(f"/api/marketplace/{medicine_id}").status_code == 404
        assert client.delete(f"/api/marketplace/{medicine_id}").status_code == 404
