import json
import os
import unittest
from unittest import mock

import luckylotto.config as config_module
from luckylotto.app import create_app

from .fakes import ScriptedSource


class LottoRoutesTests(unittest.TestCase):
    def setUp(self) -> None:
        env = mock.patch.dict(
            os.environ,
            {
                "FLASK_SECRET_KEY": "test-secret",
                "LOTTO_MAX_NUMBER": "45",
                "LOTTO_TICKET_PRICE": "1000",
                "LOTTO_MAX_TICKETS_PER_PURCHASE": "10",
            },
        )
        env.start()
        self.addCleanup(env.stop)
        config_module.load_settings.cache_clear()
        self.addCleanup(config_module.load_settings.cache_clear)

        self.source = ScriptedSource()
        source_patch = mock.patch("luckylotto.services.tickets.RandomNumberSource", return_value=self.source)
        source_patch.start()
        self.addCleanup(source_patch.stop)

        self.app = create_app()
        self.client = self.app.test_client()

    def _post(self, path: str, payload):
        return self.client.post(path, data=json.dumps(payload), content_type="application/json")

    def test_health_and_config(self) -> None:
        self.assertEqual(self.client.get("/health").get_json(), {"status": "ok"})

        config = self.client.get("/config").get_json()
        self.assertEqual(config["ticket_price"], 1000)
        self.assertEqual(config["ticket_size"], 6)
        self.assertEqual(config["max_tickets_per_purchase"], 10)
        self.assertEqual(config["payouts"]["fifth"], 5000)

    def test_purchase_accumulates_within_session(self) -> None:
        self.source.queue([6, 5, 4, 3, 2, 1])
        response = self._post("/lotto/purchase", {"amount": 1000})
        self.assertEqual(response.status_code, 201)
        payload = response.get_json()
        self.assertEqual(payload["purchased"], [[1, 2, 3, 4, 5, 6]])
        self.assertEqual(payload["purchased_count"], 1)
        self.assertEqual(payload["label"], "총 1개를 구매하였습니다.")

        response = self._post("/lotto/purchase", {"amount": 3000})
        payload = response.get_json()
        self.assertEqual(len(payload["purchased"]), 3)
        self.assertEqual(payload["purchased_count"], 4)

        listing = self.client.get("/lotto/tickets").get_json()
        self.assertEqual(listing["purchased_count"], 4)
        self.assertEqual(listing["tickets"][0], [1, 2, 3, 4, 5, 6])

    def test_invalid_amount_is_reported(self) -> None:
        response = self._post("/lotto/purchase", {"amount": 1500})
        self.assertEqual(response.status_code, 400)
        payload = response.get_json()
        self.assertEqual(payload["error"], "invalid_amount")
        self.assertEqual(payload["message"], "1000원 단위로 입력해주세요.")
        self.assertEqual(self.client.get("/lotto/tickets").get_json()["purchased_count"], 0)

    def test_purchase_limit_is_reported(self) -> None:
        response = self._post("/lotto/purchase", {"amount": 11000})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "purchase_limit_exceeded")

    def test_missing_amount_is_a_bad_request(self) -> None:
        response = self._post("/lotto/purchase", {})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "invalid_request")

    def test_answer_returns_rank_histogram(self) -> None:
        self.source.queue([1, 2, 3, 4, 5, 7], [1, 2, 3, 10, 11, 12])
        self._post("/lotto/purchase", {"amount": 2000})

        response = self._post("/lotto/answer", {"numbers": [1, 2, 3, 4, 5, 6], "bonus": 7})
        self.assertEqual(response.status_code, 200)
        payload = response.get_json()
        counts = {entry["rank"]: entry["count"] for entry in payload["ranks"]}
        self.assertEqual(counts, {"first": 0, "second": 1, "third": 0, "fourth": 0, "fifth": 1})
        self.assertEqual(payload["total_spent"], 2000)
        self.assertEqual(payload["total_payout"], 30_005_000)
        self.assertEqual(payload["benefit_rate"], 1500250.0)
        self.assertEqual(payload["answer"], {"numbers": [1, 2, 3, 4, 5, 6], "bonus": 7})

        again = self.client.get("/lotto/result").get_json()
        self.assertEqual(again, payload)

    def test_rejected_answer_leaves_round_unchanged(self) -> None:
        self._post("/lotto/purchase", {"amount": 1000})

        response = self._post("/lotto/answer", {"numbers": [1, 2, 3, 4, 5, 6], "bonus": 6})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "duplicate_number")

        response = self._post("/lotto/answer", {"numbers": [1, 2, 3, 4, 5, 46], "bonus": 7})
        self.assertEqual(response.get_json()["error"], "out_of_range")

        response = self.client.get("/lotto/result")
        self.assertEqual(response.get_json()["error"], "answer_not_submitted")

    def test_non_object_bodies_are_bad_requests(self) -> None:
        for body in ([1000], "x", 1000, None):
            with self.subTest(body=body):
                response = self._post("/lotto/purchase", body)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.get_json()["error"], "invalid_request")

                response = self._post("/lotto/answer", body)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.get_json()["error"], "invalid_request")
        self.assertEqual(self.client.get("/lotto/tickets").get_json()["purchased_count"], 0)

    def test_malformed_json_is_a_bad_request(self) -> None:
        response = self.client.post("/lotto/purchase", data="{amount", content_type="application/json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "invalid_request")

    def test_wrong_number_count_is_a_bad_request(self) -> None:
        self._post("/lotto/purchase", {"amount": 1000})
        response = self._post("/lotto/answer", {"numbers": [1, 2, 3], "bonus": 7})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "invalid_request")

    def test_answer_without_tickets(self) -> None:
        response = self._post("/lotto/answer", {"numbers": [1, 2, 3, 4, 5, 6], "bonus": 7})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "no_tickets_purchased")

    def test_reset_starts_a_clean_round(self) -> None:
        self.source.queue([1, 2, 3, 4, 5, 6])
        self._post("/lotto/purchase", {"amount": 1000})
        self._post("/lotto/answer", {"numbers": [1, 2, 3, 4, 5, 6], "bonus": 7})

        response = self.client.post("/lotto/reset")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get("/lotto/result").get_json()["error"], "no_tickets_purchased")

        self.source.queue([40, 41, 42, 43, 44, 45])
        self._post("/lotto/purchase", {"amount": 1000})
        payload = self._post("/lotto/answer", {"numbers": [1, 2, 3, 4, 5, 6], "bonus": 7}).get_json()
        self.assertEqual(payload["ticket_count"], 1)
        self.assertEqual(payload["unranked"], 1)
        self.assertEqual(payload["benefit_rate"], 0.0)

    def test_sessions_have_separate_rounds(self) -> None:
        self._post("/lotto/purchase", {"amount": 2000})
        other = self.app.test_client()
        self.assertEqual(other.get("/lotto/tickets").get_json()["purchased_count"], 0)


if __name__ == "__main__":
    unittest.main()
