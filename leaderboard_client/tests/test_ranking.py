import unittest

from shared.ranking import BoardSummary, find_by_id, name_taken, rank, summarize
from shared.types import Participant


class RankingTests(unittest.TestCase):
    def test_rank_orders_by_score_desc(self):
        ranked = rank(
            [
                Participant(id="1", name="Alice", score=1),
                Participant(id="2", name="Bob", score=9),
                Participant(id="3", name="Carol", score=4),
            ]
        )
        self.assertEqual([p.name for p in ranked], ["Bob", "Carol", "Alice"])

    def test_rank_keeps_prior_order_for_ties(self):
        ranked = rank(
            [
                Participant(id="1", name="Alice", score=5),
                Participant(id="2", name="Bob", score=5),
                Participant(id="3", name="Carol", score=6),
            ]
        )
        self.assertEqual([p.name for p in ranked], ["Carol", "Alice", "Bob"])

    def test_name_taken_ignores_case_and_padding(self):
        participants = [Participant(id="1", name="Alice")]
        self.assertTrue(name_taken(participants, "ALICE"))
        self.assertTrue(name_taken(participants, " alice "))
        self.assertFalse(name_taken(participants, "Alicia"))

    def test_find_by_id(self):
        alice = Participant(id="1", name="Alice")
        self.assertIs(find_by_id([alice], "1"), alice)
        self.assertIsNone(find_by_id([alice], "2"))

    def test_from_dict_drops_extra_keys(self):
        participant = Participant.from_dict(
            {"id": "abc", "name": "Alice", "score": 2, "created_at": "2025-01-01"}
        )
        self.assertEqual(participant, Participant(id="abc", name="Alice", score=2))


class SummaryTests(unittest.TestCase):
    def test_empty_board(self):
        self.assertEqual(summarize([]), BoardSummary(participant_count=0, total_points=0, leader=None))

    def test_counts_totals_and_leader(self):
        bob = Participant(id="2", name="Bob", score=9)
        summary = summarize(
            [Participant(id="1", name="Alice", score=1), bob, Participant(id="3", name="Carol", score=4)]
        )
        self.assertEqual(summary.participant_count, 3)
        self.assertEqual(summary.total_points, 14)
        self.assertIs(summary.leader, bob)

    def test_tied_leader_is_first_in_prior_order(self):
        summary = summarize(
            [Participant(id="1", name="Alice", score=5), Participant(id="2", name="Bob", score=5)]
        )
        self.assertEqual(summary.leader.name, "Alice")

    def test_all_zero_scores_still_have_a_leader(self):
        summary = summarize([Participant(id="1", name="Alice")])
        self.assertEqual((summary.participant_count, summary.total_points), (1, 0))
        self.assertEqual(summary.leader.name, "Alice")


if __name__ == "__main__":
    unittest.main()
