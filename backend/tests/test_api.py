"""Route integration tests (via HTTP client)."""

from wildtrail.api.deps import get_review_service
from wildtrail.services.review_service import ReviewService


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------


async def test_list_events(client):
    resp = await client.get("/api/events")
    assert resp.status_code == 200

    data = resp.json()
    assert data["success"] is True
    assert [event["id"] for event in data["data"]] == [1, 2]
    assert data["data"][1]["scene"] == "river"
    assert len(data["data"][0]["choices"]) == 2


async def test_list_events_by_scene(client):
    resp = await client.get("/api/events", params={"scene": "forest"})
    assert [event["id"] for event in resp.json()["data"]] == [1]


async def test_list_events_unknown_scene(client):
    resp = await client.get("/api/events", params={"scene": "desert"})
    assert resp.status_code == 422


async def test_list_collections_includes_rarity(client):
    resp = await client.get("/api/collections")
    assert resp.status_code == 200

    rarities = {item["id"]: item["rarity"] for item in resp.json()["data"]}
    assert rarities == {3: "common", 17: "rare", 35: "legendary"}


# ---------------------------------------------------------------------------
# Game
# ---------------------------------------------------------------------------


async def test_get_state(client):
    resp = await client.get("/api/game/state")
    assert resp.status_code == 200

    data = resp.json()
    assert data["stamina"] == 5
    assert data["max_stamina"] == 5
    assert data["currency"] == 0
    assert data["can_explore"] is True
    assert data["start_event_id"] == 1
    assert data["collection"] == {"unlocked_ids": [], "count": 0, "total": 3}


async def test_make_choice(client):
    resp = await client.post("/api/game/choice", json={"event_id": 1, "choice_index": 0})
    assert resp.status_code == 200

    data = resp.json()
    assert data["outcome_text"] == "A woodpecker."
    assert data["currency"] == 10
    assert data["stamina"] == 4
    assert data["next_event_id"] == 2
    assert data["unlocked"] == {"collectible_id": 17, "name": "Eurasian Beaver"}

    journey = (await client.get("/api/game/journey")).json()
    assert journey["journey_log"] == [{"encounter": "Trailhead", "choice": "Follow the birds"}]
    assert journey["newly_unlocked"] == [{"collectible_id": 17, "name": "Eurasian Beaver"}]


async def test_make_choice_unknown_event(client):
    resp = await client.post("/api/game/choice", json={"event_id": 99, "choice_index": 0})
    assert resp.status_code == 404
    assert "99" in resp.json()["detail"]


async def test_make_choice_bad_index(client):
    resp = await client.post("/api/game/choice", json={"event_id": 1, "choice_index": 2})
    assert resp.status_code == 400


async def test_make_choice_without_stamina(client):
    event_id = 1
    for _ in range(5):
        resp = await client.post("/api/game/choice", json={"event_id": event_id, "choice_index": 0})
        event_id = resp.json()["next_event_id"]

    resp = await client.post("/api/game/choice", json={"event_id": event_id, "choice_index": 0})
    assert resp.status_code == 409
    assert (await client.get("/api/game/state")).json()["can_explore"] is False


async def test_spend(client):
    await client.post("/api/game/choice", json={"event_id": 1, "choice_index": 0})

    resp = await client.post("/api/game/spend", json={"amount": 30})
    assert resp.json() == {"success": False, "currency": 10}

    resp = await client.post("/api/game/spend", json={"amount": 4})
    assert resp.json() == {"success": True, "currency": 6}


async def test_spend_negative_amount(client):
    resp = await client.post("/api/game/spend", json={"amount": -1})
    assert resp.status_code == 422


async def test_reset_keeps_collection(client):
    await client.post("/api/game/choice", json={"event_id": 1, "choice_index": 0})

    resp = await client.post("/api/game/reset")
    assert resp.status_code == 200

    data = resp.json()
    assert data["stamina"] == 5
    assert data["currency"] == 100
    assert data["journey"] == {"journey_log": [], "newly_unlocked": []}
    assert data["collection"]["unlocked_ids"] == [17]


async def test_erase_clears_collection(client):
    await client.post("/api/game/choice", json={"event_id": 1, "choice_index": 0})

    resp = await client.post("/api/game/erase")
    data = resp.json()
    assert data["collection"]["count"] == 0
    assert data["currency"] == 0

    collection = (await client.get("/api/game/collection")).json()
    assert collection == {"unlocked_ids": [], "count": 0, "total": 3}


# ---------------------------------------------------------------------------
# Review
# ---------------------------------------------------------------------------


class StubReviews(ReviewService):
    def __init__(self, review=None, error=None):
        super().__init__(api_key="k")
        self.review = review
        self.error = error
        self.requests = []

    async def generate_review(self, request):
        self.requests.append(request)
        if self.error:
            raise self.error
        return self.review


REVIEW_BODY = {
    "journeyLog": [{"encounter": "Trailhead", "choice": "Follow the birds"}],
    "unlockedGallery": ["Eurasian Beaver"],
}


async def test_generate_review(client):
    from wildtrail.main import app

    stub = StubReviews(review="A fine walk.")
    app.dependency_overrides[get_review_service] = lambda: stub

    resp = await client.post("/api/generate-review", json=REVIEW_BODY)

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "review": "A fine walk."}
    assert stub.requests[0].unlocked_gallery == ["Eurasian Beaver"]


async def test_generate_review_upstream_failure(client):
    from wildtrail.core.errors import UpstreamUnavailable
    from wildtrail.main import app

    app.dependency_overrides[get_review_service] = lambda: StubReviews(error=UpstreamUnavailable("timeout"))

    resp = await client.post("/api/generate-review", json=REVIEW_BODY)

    assert resp.status_code == 502
    assert "timeout" in resp.json()["detail"]


async def test_generate_review_without_api_key(client):
    from wildtrail.main import app

    app.dependency_overrides[get_review_service] = lambda: ReviewService(api_key="")

    resp = await client.post("/api/generate-review", json=REVIEW_BODY)

    assert resp.status_code == 503
