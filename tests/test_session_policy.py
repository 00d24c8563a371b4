import unittest

from kthancestor import (
    BACKEND_DIRECT,
    AncestorIndexSession,
    IndexPolicy,
    InvalidStrideError,
    build_index,
)
from tests.helpers import chain_tree, hundred_node_tree, small_tree


class TestIndexPolicy(unittest.TestCase):
    def test_defaults(self):
        policy = IndexPolicy()
        self.assertEqual(policy.as_runtime_dict(), {"stride": 10, "backend": "skip"})

    def test_invalid_stride_rejected_up_front(self):
        with self.assertRaises(InvalidStrideError):
            IndexPolicy(stride=0)

    def test_recommended_stride_tracks_sqrt_of_height(self):
        self.assertEqual(IndexPolicy.recommended(100).stride, 10)
        self.assertEqual(IndexPolicy.recommended(99).stride, 9)
        self.assertEqual(IndexPolicy.recommended(3).stride, 1)
        self.assertEqual(IndexPolicy.recommended(0).stride, 1)


class TestAncestorIndexSession(unittest.TestCase):
    def setUp(self):
        self.session = AncestorIndexSession.build(hundred_node_tree())

    def test_build_uses_default_policy(self):
        self.assertEqual(self.session.stride, 10)
        self.assertEqual(self.session.backend_id, "skip")
        self.assertEqual(self.session.node_count, 100)
        self.assertEqual(self.session.skip_entry_count, 13)

    def test_queries(self):
        self.assertEqual(self.session.kth_parent(96, 90), 6)
        self.assertIsNone(self.session.kth_parent(96, -1))
        r = self.session.explain(96, 90)
        self.assertEqual((r.status, r.ancestor), ("found", 6))

    def test_batch_preserves_order(self):
        answers = self.session.kth_parents([(96, 90), (1, 1), (97, 1), (5000, 0), (4, 0)])
        self.assertEqual(answers, [6, None, 10, None, 4])

    def test_depth_and_membership(self):
        self.assertEqual(self.session.depth(1), 0)
        self.assertEqual(self.session.depth(100), 96)
        self.assertIsNone(self.session.depth(5000))
        self.assertIn(42, self.session)
        self.assertNotIn(5000, self.session)

    def test_direct_backend_session(self):
        session = AncestorIndexSession.build(hundred_node_tree(), IndexPolicy(stride=3, backend=BACKEND_DIRECT))
        self.assertEqual(session.backend_id, BACKEND_DIRECT)
        self.assertEqual(session.kth_parent(96, 90), 6)

    def test_rebuild_returns_new_session_with_same_policy(self):
        session = AncestorIndexSession.build(small_tree(), IndexPolicy(stride=2))
        rebuilt = session.rebuild(chain_tree(30))
        self.assertIsNot(rebuilt, session)
        self.assertIs(rebuilt.policy, session.policy)
        self.assertEqual(rebuilt.kth_parent(30, 29), 1)
        # the first session still answers for its own tree
        self.assertEqual(session.kth_parent(4, 2), 1)
        self.assertNotIn(30, session)

    def test_wrap_existing_index(self):
        session = AncestorIndexSession(build_index(small_tree(), 2))
        self.assertEqual(session.policy.stride, 2)
        self.assertEqual(session.kth_parent(4, 1), 2)

    def test_policy_stride_must_match_index(self):
        with self.assertRaises(ValueError):
            AncestorIndexSession(build_index(small_tree(), 2), IndexPolicy(stride=5))

    def test_build_logs_at_debug(self):
        with self.assertLogs("kthancestor.api.session", level="DEBUG") as cm:
            AncestorIndexSession.build(small_tree())
        self.assertTrue(any("session ready: 4 nodes" in line for line in cm.output))


if __name__ == "__main__":
    unittest.main()
