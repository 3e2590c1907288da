"""
API integration tests for the study endpoints.
"""

from proofmaster.catalog import default_catalog
from proofmaster.catalog.content import FLASHCARD_DECKS, MATCHING_PAIRS


def test_list_sections(client):
    """Test listing sections with exercise counts"""
    response = client.get("/api/sections")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 13
    counts = {s["key"]: s["exercise_count"] for s in data}
    assert counts["1.1"] == 36
    assert counts["1.7"] == 0
    assert data[0]["definitions"]


def test_section_detail(client):
    response = client.get("/api/sections/2.2")
    assert response.status_code == 200
    data = response.json()
    assert data["section"]["key"] == "2.2"
    assert sum(len(items) for items in data["parts"].values()) == 5


def test_section_not_found(client):
    response = client.get("/api/sections/9.9")
    assert response.status_code == 404
    assert response.json() == {"error": "Section '9.9' not found"}


def test_exercise_views_hide_answers(client):
    """Test no exercise listing leaks the book answer"""
    response = client.get("/api/exercises")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == len(default_catalog())
    assert all("answer" not in e for e in data)


def test_search_exercises(client):
    response = client.get("/api/exercises", params={"search": "2.4.A"})
    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == ["2.4.A.1", "2.4.A.2"]


def test_truth_table_view(client):
    """Test truth-table exercises carry assignments but not the result column"""
    response = client.get("/api/exercises/2.2.A.4")
    assert response.status_code == 200
    table = response.json()["truth_table"]
    assert table["variables"] == ["P", "Q"]
    assert table["assignments"] == [["T", "T"], ["T", "F"], ["F", "T"], ["F", "F"]]


def test_exercise_not_found(client):
    response = client.get("/api/exercises/9.9.Z.1")
    assert response.status_code == 404
    assert response.json() == {"error": "Exercise '9.9.Z.1' not found"}


def test_session_lifecycle(client, session_id):
    """Test ending a session discards it"""
    assert client.get(f"/api/sessions/{session_id}/progress").status_code == 200

    response = client.delete(f"/api/sessions/{session_id}")
    assert response.status_code == 204

    response = client.get(f"/api/sessions/{session_id}/progress")
    assert response.status_code == 404
    assert response.json() == {"error": f"Session '{session_id}' not found"}
    assert client.delete(f"/api/sessions/{session_id}").status_code == 404


def test_submit_without_open_exercise(client, session_id):
    response = client.post(f"/api/sessions/{session_id}/submit", json={"answer": "2"})
    assert response.status_code == 409
    assert response.json() == {"error": "No active exercise in this session"}


def test_submit_correct_answer(client, session_id):
    """Test a correct submission is recorded and counted"""
    catalog = default_catalog()
    exercise = catalog.by_id("1.1.A.2")

    opened = client.post(f"/api/sessions/{session_id}/open/1.1.A.2")
    assert opened.status_code == 200
    assert opened.json()["id"] == "1.1.A.2"

    response = client.post(
        f"/api/sessions/{session_id}/submit", json={"answer": exercise.answer}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["correct"] is True
    assert data["correct_answer"] == exercise.answer
    assert data["mastery"] == {"correct": True, "attempts": 1}

    progress = client.get(f"/api/sessions/{session_id}/progress").json()
    assert progress["overall"]["completed"] == 1
    assert progress["overall"]["total"] == len(catalog)
    assert progress["records"]["1.1.A.2"]["attempts"] == 1


def test_submit_wrong_answer(client, session_id):
    client.post(f"/api/sessions/{session_id}/open/1.1.A.2")

    response = client.post(f"/api/sessions/{session_id}/submit", json={"answer": "7"})
    assert response.status_code == 200
    data = response.json()
    assert data["correct"] is False
    assert data["student_answer"] == "7"
    assert data["mastery"] == {"correct": False, "attempts": 1}


def test_submit_blank_answer(client, session_id):
    """Test a blank answer is rejected rather than graded"""
    client.post(f"/api/sessions/{session_id}/open/1.1.A.2")

    response = client.post(f"/api/sessions/{session_id}/submit", json={"answer": "   "})
    assert response.status_code == 422
    assert response.json() == {"error": "Answer must not be blank"}

    progress = client.get(f"/api/sessions/{session_id}/progress").json()
    assert progress["records"] == {}


def test_invalid_request_validation(client, session_id):
    """Test request validation"""
    response = client.post(f"/api/sessions/{session_id}/submit", json={})
    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "Request validation failed"
    assert data["details"]


def test_truth_table_submission(client, session_id):
    client.post(f"/api/sessions/{session_id}/open/2.2.A.4")

    response = client.post(
        f"/api/sessions/{session_id}/truth-table",
        json={"selections": ["t", "F", "F", "F"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["all_correct"] is True
    assert data["summary"] == "Perfect! All 4 rows correct."
    assert data["mastery"]["correct"] is True


def test_truth_table_partial(client, session_id):
    client.post(f"/api/sessions/{session_id}/open/2.2.A.4")

    response = client.post(
        f"/api/sessions/{session_id}/truth-table",
        json={"selections": ["T", "T", "", "F"]},
    )
    data = response.json()
    assert data["correct_count"] == 2
    assert [row["correct"] for row in data["rows"]] == [True, False, False, True]
    assert data["rows"][2]["submitted"] == "?"
    assert data["mastery"] == {"correct": False, "attempts": 1}


def test_truth_table_rejects_free_text(client, session_id):
    """Test a truth table cannot be mastered through the free-text submit"""
    client.post(f"/api/sessions/{session_id}/open/2.2.A.4")

    response = client.post(f"/api/sessions/{session_id}/submit", json={"answer": "T"})
    assert response.status_code == 422
    assert "/truth-table" in response.json()["error"]

    progress = client.get(f"/api/sessions/{session_id}/progress").json()
    assert progress["records"] == {}
    assert progress["overall"]["completed"] == 0


def test_truth_table_bad_selection(client, session_id):
    client.post(f"/api/sessions/{session_id}/open/2.2.A.4")

    response = client.post(
        f"/api/sessions/{session_id}/truth-table", json={"selections": ["yes"]}
    )
    assert response.status_code == 422


def test_truth_table_needs_truth_table_exercise(client, session_id):
    client.post(f"/api/sessions/{session_id}/open/1.1.A.2")

    response = client.post(
        f"/api/sessions/{session_id}/truth-table", json={"selections": ["T"]}
    )
    assert response.status_code == 409


def test_reveal(client, session_id):
    """Test revealing returns the answer and a lookup link without recording"""
    client.post(f"/api/sessions/{session_id}/open/1.1.A.2")

    response = client.post(f"/api/sessions/{session_id}/reveal")
    assert response.status_code == 200
    data = response.json()
    assert data["answer"] == default_catalog().by_id("1.1.A.2").answer
    assert data["web_url"].startswith("https://www.wolframalpha.com/input?i=")

    progress = client.get(f"/api/sessions/{session_id}/progress").json()
    assert progress["records"] == {}


def test_remix(client, session_id):
    """Test remixing keeps the id and flags the variant"""
    client.post(f"/api/sessions/{session_id}/open/1.1.A.1")

    response = client.post(f"/api/sessions/{session_id}/remix")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "1.1.A.1"
    assert data["remixed"] is True
    assert data["remixable"] is True


def test_remix_fixed_exercise(client, session_id):
    client.post(f"/api/sessions/{session_id}/open/1.1.A.2")

    data = client.post(f"/api/sessions/{session_id}/remix").json()
    assert data["remixed"] is False
    assert data["remixable"] is False


def test_remix_without_open_exercise(client, session_id):
    assert client.post(f"/api/sessions/{session_id}/remix").status_code == 409


def test_navigate(client, session_id):
    """Test navigation wraps at both ends"""
    ids = [e.id for e in default_catalog().all()]

    first = client.post(f"/api/sessions/{session_id}/navigate", params={"direction": 1})
    assert first.json()["id"] == ids[0]

    back = client.post(f"/api/sessions/{session_id}/navigate", params={"direction": -1})
    assert back.json()["id"] == ids[-1]

    forward = client.post(f"/api/sessions/{session_id}/navigate", params={"direction": 1})
    assert forward.json()["id"] == ids[0]


def test_navigate_bad_direction(client, session_id):
    response = client.post(f"/api/sessions/{session_id}/navigate", params={"direction": 2})
    assert response.status_code == 422


def test_random_exercise(client, session_id):
    response = client.post(f"/api/sessions/{session_id}/random")
    assert response.status_code == 200
    assert response.json()["id"] in default_catalog()


def test_practice(client):
    """Test practice listing and grading"""
    problems = client.get("/api/practice").json()
    assert len(problems) == 6
    assert problems[2]["index"] == 2

    response = client.post("/api/practice/2/grade", json={"answer": "{3, 4, 5}"})
    assert response.status_code == 200
    data = response.json()
    assert data["classification"] == "correct"
    assert data["explanation"]
    assert data["hint"] is None


def test_practice_wrong_answer_shows_hint(client):
    data = client.post("/api/practice/2/grade", json={"answer": "{9}"}).json()
    assert data["classification"] == "wrong"
    assert data["reveal_hint"] is True
    assert data["hint"]
    assert data["explanation"] is None


def test_practice_not_found(client):
    response = client.post("/api/practice/99/grade", json={"answer": "x"})
    assert response.status_code == 404


def test_flashcards(client, session_id):
    """Test a flashcard run through the API"""
    decks = client.get("/api/flashcards").json()
    assert [d["key"] for d in decks] == [d.key for d in FLASHCARD_DECKS]

    started = client.post(f"/api/sessions/{session_id}/flashcards/page-1")
    assert started.status_code == 200
    data = started.json()
    assert data["position"] == 0
    assert data["card"] is not None

    marked = client.post(f"/api/sessions/{session_id}/flashcards/mark", json={"known": True})
    assert marked.status_code == 200
    data = marked.json()
    assert data["position"] == 1
    assert data["known"] == 1
    assert data["review"] == 0


def test_flashcard_mark_without_run(client, session_id):
    response = client.post(f"/api/sessions/{session_id}/flashcards/mark", json={"known": True})
    assert response.status_code == 409


def test_flashcard_unknown_deck(client, session_id):
    response = client.post(f"/api/sessions/{session_id}/flashcards/page-9")
    assert response.status_code == 404
    assert response.json() == {"error": "Deck 'page-9' not found"}


def test_matching(client, session_id):
    """Test matching a pair and an error"""
    answers = {p.prompt: p.answer for p in MATCHING_PAIRS}

    game = client.post(f"/api/sessions/{session_id}/matching").json()
    assert len(game["prompts"]) == 10
    assert sorted(game["bank"]) == sorted(answers[p] for p in game["prompts"])

    prompt = game["prompts"][0]
    wrong = next(a for a in game["bank"] if a != answers[prompt])
    miss = client.post(
        f"/api/sessions/{session_id}/matching/match",
        json={"prompt": prompt, "answer": wrong},
    ).json()
    assert miss["correct"] is False
    assert miss["game"]["errors"] == 1

    hit = client.post(
        f"/api/sessions/{session_id}/matching/match",
        json={"prompt": prompt, "answer": answers[prompt]},
    ).json()
    assert hit["correct"] is True
    assert hit["game"]["matches"] == {prompt: answers[prompt]}
    assert answers[prompt] not in hit["game"]["bank"]


def test_matching_unknown_prompt(client, session_id):
    client.post(f"/api/sessions/{session_id}/matching")
    response = client.post(
        f"/api/sessions/{session_id}/matching/match",
        json={"prompt": "nope", "answer": "nope"},
    )
    assert response.status_code == 422


def test_rapid_fire(client, session_id):
    """Test answering and advancing a rapid-fire round"""
    answers = {c.question: c.answer for d in FLASHCARD_DECKS for c in d.cards}

    round_ = client.post(f"/api/sessions/{session_id}/rapid-fire").json()
    assert round_["total"] == 20
    assert round_["position"] == 0

    response = client.post(
        f"/api/sessions/{session_id}/rapid-fire/answer",
        json={"answer": answers[round_["question"]]},
    )
    assert response.status_code == 200
    assert response.json()["result"]["correct"] is True

    again = client.post(
        f"/api/sessions/{session_id}/rapid-fire/answer", json={"answer": "x"}
    )
    assert again.status_code == 422

    advanced = client.post(f"/api/sessions/{session_id}/rapid-fire/next").json()
    assert advanced["position"] == 1
    assert advanced["score"] == 1
