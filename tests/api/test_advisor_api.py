"""AI advisor HTTP endpoints with a stubbed Gemini client."""

import pytest

from app.shared.core.exceptions import AIAuthenticationError, AITimeoutError, ExternalAPIError

pytestmark = pytest.mark.integration


class TestAdviceEndpoints:
    """POST /api/ai/*"""

    def test_prompt(self, client, gemini) -> None:
        response = client.post("/api/ai/prompt", json={"prompt": "Why do my roses have black spots?"})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Content generated successfully"
        assert body["data"]["prompt"] == "Why do my roses have black spots?"
        assert body["data"]["response"] == gemini.reply
        assert body["data"]["saved"] is True
        assert body["data"]["id"]
        assert "USER QUESTION: Why do my roses have black spots?" in gemini.prompts[0]

    @pytest.mark.parametrize("path, payload, message, result_key", [
        ("/api/ai/diagnose", {"symptoms": "yellow leaves", "plantType": "Tomato"},
         "Disease diagnosis completed", "diagnosis"),
        ("/api/ai/treatment", {"disease": "Late Blight", "organicOnly": True},
         "Treatment recommendations generated", "recommendations"),
        ("/api/ai/prevention", {"plantType": "Potato", "region": "East Africa"},
         "Prevention strategies generated", "strategies"),
        ("/api/ai/disease-info", {"diseaseName": "Early Blight", "confidence": 91.5},
         "Disease information generated successfully", "diseaseInfo"),
        ("/api/ai/ai-treatment", {"diseaseName": "Rust", "severity": "High"},
         "AI-based treatment recommendations generated", "treatmentPlan"),
    ])
    def test_structured_endpoints(self, client, gemini, path, payload, message, result_key) -> None:
        response = client.post(path, json=payload)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == message
        assert body["data"][result_key] == gemini.reply
        assert body["data"]["saved"] is True

    def test_treatment_echo(self, client) -> None:
        data = client.post("/api/ai/treatment", json={"disease": "Rust"}).json()["data"]
        assert data["disease"] == "Rust"
        assert data["plantType"] is None
        assert data["organicOnly"] is False

    @pytest.mark.parametrize("path, payload, message", [
        ("/api/ai/prompt", {}, "Prompt is required"),
        ("/api/ai/prompt", {"prompt": "   "}, "Prompt is required"),
        ("/api/ai/diagnose", {"plantType": "Tomato"}, "Disease symptoms are required"),
        ("/api/ai/treatment", {}, "Disease name is required"),
        ("/api/ai/prevention", {"region": "Asia"}, "Plant type is required"),
        ("/api/ai/disease-info", {}, "Disease name is required"),
        ("/api/ai/ai-treatment", {"plantType": "Tomato"}, "Disease name is required"),
    ])
    def test_missing_required_input(self, client, gemini, path, payload, message) -> None:
        response = client.post(path, json=payload)

        assert response.status_code == 400
        assert response.json()["message"] == message
        assert gemini.prompts == []

    def test_confidence_out_of_range(self, client) -> None:
        response = client.post("/api/ai/disease-info", json={"diseaseName": "Rust", "confidence": 140})
        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "confidence"

    def test_save_failure_still_answers(self, client, prompt_repository) -> None:
        prompt_repository.fail_saves = True

        response = client.post("/api/ai/prompt", json={"prompt": "hello"})

        assert response.status_code == 200
        assert response.json()["data"]["saved"] is False
        assert response.json()["data"]["id"] is None

    def test_timeout_is_504(self, client, gemini) -> None:
        gemini.error = AITimeoutError(timeout_seconds=30)
        response = client.post("/api/ai/prompt", json={"prompt": "hello"})
        assert response.status_code == 504
        assert response.json()["success"] is False

    def test_bad_key_is_401(self, client, gemini) -> None:
        gemini.error = AIAuthenticationError()
        response = client.post("/api/ai/diagnose", json={"symptoms": "spots"})
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Invalid or missing API key"}

    def test_upstream_failure_hides_details_outside_development(self, client, gemini) -> None:
        gemini.error = ExternalAPIError("Gemini returned an empty response", service="gemini")

        response = client.post("/api/ai/prevention", json={"plantType": "Maize"})

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Failed to generate prevention strategies",
        }


class TestPromptHistory:
    """/api/ai/prompts"""

    def test_list_get_delete(self, client) -> None:
        long_prompt = "How do I stop late blight from spreading across my whole potato field this season?"
        created_id = client.post("/api/ai/prompt", json={"prompt": long_prompt}).json()["data"]["id"]
        client.post("/api/ai/prompt", json={"prompt": "second question"})

        listing = client.get("/api/ai/prompts", params={"limit": 1}).json()
        assert listing["message"] == "Prompts retrieved successfully"
        assert [p["userPrompt"] for p in listing["data"]["prompts"]] == ["second question"]
        assert listing["data"]["pagination"]["totalItems"] == 2

        record = client.get(f"/api/ai/prompts/{created_id}").json()
        assert record["message"] == "Prompt retrieved successfully"
        assert record["data"]["_id"] == record["data"]["id"] == created_id
        assert record["data"]["promptType"] == "general"

        deleted = client.delete(f"/api/ai/prompts/{created_id}").json()
        assert deleted["message"] == "Prompt deleted successfully"
        assert deleted["data"]["deletedPrompt"] == {
            "id": created_id,
            "userPrompt": long_prompt[:50] + "...",
        }
        assert client.get(f"/api/ai/prompts/{created_id}").status_code == 404

    def test_invalid_prompt_id(self, client) -> None:
        response = client.delete("/api/ai/prompts/xyz")
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid prompt ID format"

    def test_default_page_size(self, client) -> None:
        for index in range(12):
            client.post("/api/ai/prompt", json={"prompt": f"question {index}"})

        data = client.get("/api/ai/prompts").json()["data"]

        assert len(data["prompts"]) == 10
        assert data["pagination"]["totalPages"] == 2
