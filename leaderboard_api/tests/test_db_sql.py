import unittest

from leaderboard_api.db import SqlDbClient


class SqlDbClientTests(unittest.TestCase):
    """
    Uses SQLite via SQLAlchemy URL for fast/local testing of the SQL client logic.
    """

    def setUp(self):
        self.db = SqlDbClient("sqlite+pysqlite:///:memory:")

    def test_create_and_list(self):
        created = self.db.create_participant("Alice")
        self.assertEqual(created.score, 0)
        listed = self.db.list_participants()
        self.assertEqual(len(listed), 1)
        self.assertEqual(listed[0].id, created.id)
        self.assertEqual(listed[0].name, "Alice")

    def test_list_orders_by_score(self):
        alice = self.db.create_participant("Alice")
        bob = self.db.create_participant("Bob")
        carol = self.db.create_participant("Carol")
        self.db.update_score(bob.id, 9)
        self.db.update_score(alice.id, 3)

        names = [p.name for p in self.db.list_participants()]
        self.assertEqual(names, ["Bob", "Alice", "Carol"])
        self.assertEqual(self.db.list_participants()[2].id, carol.id)

    def test_update_score(self):
        alice = self.db.create_participant("Alice")
        updated = self.db.update_score(alice.id, 5)
        self.assertIsNotNone(updated)
        self.assertEqual(updated.score, 5)
        self.assertIsNone(self.db.update_score("missing", 1))

    def test_delete(self):
        alice = self.db.create_participant("Alice")
        self.assertTrue(self.db.delete_participant(alice.id))
        self.assertFalse(self.db.delete_participant(alice.id))
        self.assertEqual(self.db.list_participants(), [])

    def test_requires_url(self):
        with self.assertRaises(ValueError):
            SqlDbClient("")


if __name__ == "__main__":
    unittest.main()
