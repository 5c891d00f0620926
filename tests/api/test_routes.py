"""Tests for the budget HTTP API."""

from decimal import Decimal
from unittest.mock import patch

from errors import StorageError


class TestAddCategory:
    def test_create_returns_201(self, client):
        response = client.post(
            "/budget/addCategory", json={"categoryName": "Groceries", "originalValue": 300}
        )

        assert response.status_code == 201
        assert response.text == "Budget category 'Groceries' added successfully."

    def test_update_returns_200(self, client):
        client.post("/budget/addCategory", json={"categoryName": "Rent", "originalValue": 500})

        response = client.post(
            "/budget/addCategory", json={"categoryName": "Rent", "originalValue": 550}
        )

        assert response.status_code == 200
        assert response.text == "Budget category 'Rent' updated successfully."

    def test_negative_value_returns_400(self, client, services):
        response = client.post(
            "/budget/addCategory", json={"categoryName": "Rent", "originalValue": -1}
        )

        assert response.status_code == 400
        assert "negative" in response.text
        assert services.categories.find_all(1) == []

    def test_blank_name_returns_400(self, client):
        response = client.post(
            "/budget/addCategory", json={"categoryName": "  ", "originalValue": 10}
        )

        assert response.status_code == 400

    def test_missing_field_returns_400(self, client):
        response = client.post("/budget/addCategory", json={"categoryName": "Rent"})

        assert response.status_code == 400
        assert "originalValue" in response.text

    def test_wrong_type_returns_400(self, client):
        response = client.post(
            "/budget/addCategory",
            json={"categoryName": "Rent", "originalValue": "lots"},
        )

        assert response.status_code == 400


class TestRecordSpend:
    def test_record_spend_reports_new_total(self, client):
        client.post(
            "/budget/addCategory", json={"categoryName": "Groceries", "originalValue": 300}
        )

        client.post(
            "/budget/recordSpend",
            json={"categoryName": "Groceries", "amountSpent": 45.50, "description": "Weekly shop"},
        )
        response = client.post(
            "/budget/recordSpend",
            json={"categoryName": "Groceries", "amountSpent": 12.25, "description": "Snacks"},
        )

        assert response.status_code == 200
        assert response.text == "Spend recorded for 'Groceries'. New spent total: 57.75"

    def test_unknown_category_returns_404(self, client, services):
        response = client.post(
            "/budget/recordSpend",
            json={"categoryName": "Unknown", "amountSpent": 10, "description": "x"},
        )

        assert response.status_code == 404
        assert response.text == "Budget category 'Unknown' not found for user."
        assert services.categories.find_all(1) == []

    def test_zero_amount_returns_400(self, client):
        client.post("/budget/addCategory", json={"categoryName": "Food", "originalValue": 30})

        response = client.post(
            "/budget/recordSpend",
            json={"categoryName": "Food", "amountSpent": 0, "description": "x"},
        )

        assert response.status_code == 400

    def test_empty_description_returns_400(self, client):
        client.post("/budget/addCategory", json={"categoryName": "Food", "originalValue": 30})

        response = client.post(
            "/budget/recordSpend",
            json={"categoryName": "Food", "amountSpent": 3, "description": ""},
        )

        assert response.status_code == 400
        assert response.text == "Description cannot be empty"

    def test_total_beyond_float_range_returns_400(self, client):
        """Test that large spends never leave a total JSON cannot carry."""
        client.post("/budget/addCategory", json={"categoryName": "Big", "originalValue": 1})
        spend = {"categoryName": "Big", "amountSpent": 1.5e308, "description": "x"}

        assert client.post("/budget/recordSpend", json=spend).status_code == 200
        response = client.post("/budget/recordSpend", json=spend)

        assert response.status_code == 400
        details = client.get("/budget/getCategoryDetails/Big").json()
        assert details["spentAmountSoFar"] == 1.5e308
        assert len(details["transactionHistory"]["2025-01-15"]) == 1
        items = client.get("/budget/getAllCategories").json()
        assert items[0]["spentAmountSoFar"] == 1.5e308

    def test_missing_description_returns_400(self, client):
        response = client.post(
            "/budget/recordSpend", json={"categoryName": "Food", "amountSpent": 3}
        )

        assert response.status_code == 400


class TestDeleteCategory:
    def test_delete_returns_200(self, client, services):
        client.post("/budget/addCategory", json={"categoryName": "Food", "originalValue": 30})

        response = client.delete("/budget/deleteCategory/Food")

        assert response.status_code == 200
        assert response.text == "Budget category 'Food' deleted successfully."
        assert services.categories.find(1, "Food") is None

    def test_delete_unknown_returns_404(self, client):
        response = client.delete("/budget/deleteCategory/Nothing")

        assert response.status_code == 404
        assert response.text == "Budget category 'Nothing' not found for user."

    def test_delete_blank_name_returns_400(self, client):
        response = client.delete("/budget/deleteCategory/%20")

        assert response.status_code == 400

    def test_delete_name_with_spaces(self, client):
        client.post(
            "/budget/addCategory", json={"categoryName": "Eating Out", "originalValue": 30}
        )

        response = client.delete("/budget/deleteCategory/Eating%20Out")

        assert response.status_code == 200


class TestGetCategories:
    def test_get_all_empty(self, client):
        response = client.get("/budget/getAllCategories")

        assert response.status_code == 200
        assert response.json() == []

    def test_get_all_returns_items(self, client):
        client.post("/budget/addCategory", json={"categoryName": "Food", "originalValue": 30})
        client.post("/budget/addCategory", json={"categoryName": "Gas", "originalValue": 60.5})
        client.post(
            "/budget/recordSpend",
            json={"categoryName": "Food", "amountSpent": 4.75, "description": "Bagel"},
        )

        response = client.get("/budget/getAllCategories")

        assert response.status_code == 200
        items = {item["category"]: item for item in response.json()}
        assert items["Gas"] == {
            "category": "Gas",
            "originalValue": 60.5,
            "spentAmountSoFar": 0.0,
            "transactionHistory": {},
        }
        assert items["Food"]["spentAmountSoFar"] == 4.75
        assert items["Food"]["transactionHistory"] == {
            "2025-01-15": [{"amount": 4.75, "description": "Bagel"}]
        }

    def test_get_all_excludes_deleted(self, client):
        client.post("/budget/addCategory", json={"categoryName": "Food", "originalValue": 30})
        client.post("/budget/addCategory", json={"categoryName": "Gas", "originalValue": 60})
        client.delete("/budget/deleteCategory/Food")

        names = [item["category"] for item in client.get("/budget/getAllCategories").json()]

        assert names == ["Gas"]

    def test_get_all_storage_failure_returns_500(self, client, services):
        with patch.object(
            services.categories, "find_all", side_effect=StorageError("disk gone")
        ):
            response = client.get("/budget/getAllCategories")

        assert response.status_code == 500
        assert "disk gone" not in response.text

    def test_get_details(self, client, services):
        services.categories.add_or_update(1, "Groceries", 300)
        services.ledger.record_spend(1, "Groceries", Decimal("45.50"), "Weekly shop")

        response = client.get("/budget/getCategoryDetails/Groceries")

        assert response.status_code == 200
        assert response.json() == {
            "category": "Groceries",
            "originalValue": 300.0,
            "spentAmountSoFar": 45.5,
            "transactionHistory": {
                "2025-01-15": [{"amount": 45.5, "description": "Weekly shop"}]
            },
        }

    def test_get_details_not_found(self, client):
        response = client.get("/budget/getCategoryDetails/Nothing")

        assert response.status_code == 404
        assert response.text == "Category 'Nothing' not found for user."

    def test_cors_allows_any_origin(self, client):
        response = client.get(
            "/budget/getAllCategories", headers={"Origin": "http://localhost:3000"}
        )

        assert response.headers["access-control-allow-origin"] == "*"
