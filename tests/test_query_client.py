"""
Tests for the query proxy client and the stale-response guard.
"""

from unittest.mock import Mock

import requests

from proofmaster.query import NO_RESULT, QueryClient, QueryOutcome, ResultSlot, web_url


def client_with(payload=None, error=None):
    session = Mock()
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value.json.return_value = payload
    return QueryClient("http://proxy.test/", session=session), session


class TestQueryClient:
    def test_blank_makes_no_request(self):
        client, session = client_with({"result": "4"})
        assert client.ask("   ") is None
        session.get.assert_not_called()

    def test_result(self):
        client, session = client_with({"result": "4"})
        outcome = client.ask("  2+2 ")
        assert outcome == QueryOutcome(result="4")
        assert outcome.ok

        args, kwargs = session.get.call_args
        assert args[0] == "http://proxy.test/api/query"
        assert kwargs["params"] == {"q": "2+2"}

    def test_error_body(self):
        client, _ = client_with({"result": None, "error": 'Wolfram returned no result for: "x"'})
        outcome = client.ask("x")
        assert outcome.error == 'Wolfram returned no result for: "x"'
        assert not outcome.ok

    def test_missing_result(self):
        client, _ = client_with({})
        assert client.ask("x").error == NO_RESULT

    def test_transport_failure(self):
        client, _ = client_with(error=requests.ConnectionError("refused"))
        assert client.ask("x").error == "Proxy error: refused"


class TestResultSlot:
    def test_latest_response_kept(self):
        slot = ResultSlot()
        ticket = slot.begin()
        assert slot.resolve(ticket, QueryOutcome(result="a"))
        assert slot.outcome.result == "a"

    def test_stale_response_discarded(self):
        slot = ResultSlot()
        first = slot.begin()
        second = slot.begin()

        assert slot.resolve(second, QueryOutcome(result="new"))
        assert not slot.resolve(first, QueryOutcome(result="old"))
        assert slot.outcome.result == "new"

    def test_client_keeps_newest_answer(self):
        client, _ = client_with({"result": "4"})
        client.ask("2+2")
        assert client.latest == QueryOutcome(result="4")

    def test_blank_ask_leaves_slot_alone(self):
        client, _ = client_with({"result": "4"})
        client.ask("2+2")
        client.ask("  ")
        assert client.latest.result == "4"

    def test_overlapping_ask_discards_older_answer(self):
        """A slow first query answered after a second one must not win"""
        session = Mock()
        client = QueryClient("http://proxy.test", session=session)
        replies = {"first": "old", "second": "new"}

        def get(url, params=None, timeout=None):
            query = params["q"]
            if query == "first":
                client.ask("second")
            response = Mock()
            response.json.return_value = {"result": replies[query]}
            return response

        session.get.side_effect = get

        outcome = client.ask("first")

        assert outcome.result == "old"
        assert client.latest.result == "new"
        assert session.get.call_count == 2

    def test_failure_after_newer_ask_is_discarded(self):
        session = Mock()
        client = QueryClient("http://proxy.test", session=session)

        def get(url, params=None, timeout=None):
            if params["q"] == "first":
                client.ask("second")
                raise requests.Timeout("timed out")
            response = Mock()
            response.json.return_value = {"result": "new"}
            return response

        session.get.side_effect = get

        assert client.ask("first").error == "Proxy error: timed out"
        assert client.latest == QueryOutcome(result="new")

    def test_begin_clears_previous_outcome(self):
        slot = ResultSlot()
        slot.resolve(slot.begin(), QueryOutcome(result="a"))
        slot.begin()
        assert slot.outcome is None


def test_web_url():
    assert web_url("2^3") == "https://www.wolframalpha.com/input?i=2%5E3"
