import json
import unittest

from app import app as flask_app
from app import json_to_state, state_to_json
from game import (
    Card,
    Suit,
    cell,
    deal_board,
    empty_board,
    foundation,
    stack,
    validate_board,
)


def _post(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type="application/json")


class TestStateJson(unittest.TestCase):
    def test_given_dealt_board_when_encoding_and_decoding_then_same_board(self):
        b = deal_board(seed=3)
        obj = state_to_json(b)
        self.assertEqual(len(obj["stacks"]), 8)
        self.assertEqual(obj["stacks"][0][0], {"rank": b.stacks[0][0].rank, "suit": b.stacks[0][0].suit.value})
        self.assertEqual(json_to_state(obj), b)

    def test_given_board_with_duplicate_card_when_decoding_then_value_error(self):
        obj = state_to_json(deal_board(seed=3))
        obj["cells"][0] = [{"rank": 1, "suit": "clubs"}]
        with self.assertRaises(ValueError):
            json_to_state(obj)


class TestFlaskAPI(unittest.TestCase):
    def setUp(self):
        self.client = flask_app.test_client()

    def _new(self, seed):
        r = _post(self.client, "/api/new", {"seed": seed})
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertTrue(data["ok"])
        return data["state"]

    def test_given_seed_when_new_game_posted_then_reproducible_deal(self):
        s1 = self._new(123)
        s2 = self._new(123)
        self.assertEqual(s1, s2)
        self.assertEqual([len(p) for p in s1["stacks"]], [7, 7, 7, 7, 6, 6, 6, 6])
        self.assertEqual(s1["cells"], [[], [], [], []])
        s3 = self._new("some text seed")
        self.assertEqual(json_to_state(s3), deal_board(seed="some text seed"))

    def test_given_bad_seed_when_new_game_posted_then_400(self):
        r = _post(self.client, "/api/new", {"seed": [1, 2]})
        self.assertEqual(r.status_code, 400)
        self.assertFalse(r.get_json()["ok"])

    def test_given_non_object_body_when_new_game_posted_then_fresh_deal(self):
        r = self.client.post("/api/new", data=json.dumps([1]), content_type="application/json")
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertTrue(d["ok"])
        self.assertEqual(sum(len(p) for p in d["state"]["stacks"]), 52)

    def test_given_non_object_body_when_moving_then_400(self):
        for url in ("/api/move", "/api/movable", "/api/auto", "/api/click"):
            r = self.client.post(url, data=json.dumps([1]), content_type="application/json")
            self.assertEqual(r.status_code, 400)
            self.assertFalse(r.get_json()["ok"])

    def test_given_non_boolean_auto_when_moving_then_400(self):
        state = self._new(7)
        for auto in ("false", 0, None):
            r = _post(self.client, "/api/move", {"state": state, "src": "s0", "dst": "c0", "auto": auto})
            self.assertEqual(r.status_code, 400)
            self.assertEqual(r.get_json()["error"], "auto must be a boolean")

    def test_given_auto_false_when_moving_then_no_promotion(self):
        state = self._new(7)
        r = _post(self.client, "/api/move", {"state": state, "src": "s0", "dst": "c0", "auto": False})
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertEqual(d["moved"], 1)
        self.assertEqual(d["state"]["cells"][0], [state["stacks"][0][0]])
        self.assertEqual(d["state"]["foundations"], [[], [], [], []])

    def test_given_fresh_deal_when_moving_stack_top_to_cell_then_ok(self):
        state = self._new(7)
        r = _post(self.client, "/api/move", {"state": state, "src": {"kind": "stack", "index": 0}, "dst": "c0"})
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertTrue(d["ok"])
        self.assertEqual(d["moved"], 1)
        self.assertFalse(d["won"])
        board = json_to_state(d["state"])  # still a full deck
        self.assertLessEqual(len(board.stacks[0]), 6)

    def test_given_illegal_move_when_posted_then_400_with_error(self):
        state = self._new(7)
        r = _post(self.client, "/api/move", {"state": state, "src": "f0", "dst": "c0"})
        self.assertEqual(r.status_code, 400)
        d = r.get_json()
        self.assertFalse(d["ok"])
        self.assertEqual(d["error"], "Illegal move")

    def test_given_malformed_request_when_posted_then_400(self):
        state = self._new(7)
        for payload in (
            {"src": "s0", "dst": "c0"},
            {"state": state, "src": "s9", "dst": "c0"},
            {"state": state, "src": {"kind": "pile", "index": 0}, "dst": "c0"},
            {"state": {"cells": []}, "src": "s0", "dst": "c0"},
        ):
            r = _post(self.client, "/api/move", payload)
            self.assertEqual(r.status_code, 400)
            self.assertFalse(r.get_json()["ok"])

    def test_given_state_when_asking_movable_then_count_returned(self):
        state = self._new(7)
        r = _post(self.client, "/api/movable", {"state": state, "src": "s0", "dst": "c0"})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json()["n"], 1)
        r2 = _post(self.client, "/api/movable", {"state": state, "src": "c0", "dst": "s0"})
        self.assertEqual(r2.get_json()["n"], 0)

    def test_given_winnable_finish_when_auto_posted_then_won(self):
        # Everything on the foundations except the four Kings, parked in the cells.
        suits = (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)
        b = empty_board()
        for i, suit in enumerate(suits):
            b = b.with_pile(foundation(i), [Card(r, suit) for r in range(12, 0, -1)])
            b = b.with_pile(cell(i), [Card(13, suit)])
        validate_board(b)
        r = _post(self.client, "/api/auto", {"state": state_to_json(b)})
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertTrue(d["won"])
        self.assertEqual(d["state"]["cells"], [[], [], [], []])

    def test_given_click_sequence_when_posted_then_selection_then_move(self):
        state = self._new(11)
        r1 = _post(self.client, "/api/click", {"state": state, "loc": "s2"})
        d1 = r1.get_json()
        self.assertTrue(d1["ok"])
        self.assertEqual(d1["selected"], {"kind": "stack", "index": 2})
        self.assertIsNone(d1["illegalSrc"])

        r2 = _post(self.client, "/api/click", {"state": d1["state"], "selected": d1["selected"], "loc": "c3"})
        d2 = r2.get_json()
        self.assertIsNone(d2["selected"])
        self.assertIsNone(d2["illegalSrc"])
        self.assertLessEqual(len(json_to_state(d2["state"]).at(stack(2))), 6)

        r3 = _post(self.client, "/api/click", {"state": d2["state"], "selected": "f1", "loc": "c0"})
        d3 = r3.get_json()
        self.assertEqual(d3["illegalSrc"], {"kind": "foundation", "index": 1})


if __name__ == "__main__":
    unittest.main(verbosity=2)
