from unittest import TestCase

from trustlet.models.subscription import Subscription
from trustlet.services.quota import can_collect, review_limit

from tests.support import BOB_TOKEN, add_business, add_reviews, add_subscription, auth, make_app


class CanCollectTests(TestCase):
    def setUp(self):
        self.free = Subscription(owner_user_id="u", plan="free", status="active")
        self.paid = Subscription(owner_user_id="u", plan="paid", status="active")

    def test_free_plan_cap(self):
        self.assertTrue(can_collect(self.free, 0))
        self.assertTrue(can_collect(self.free, 4))
        self.assertFalse(can_collect(self.free, 5))
        self.assertFalse(can_collect(self.free, 6))

    def test_paid_plan_unlimited(self):
        self.assertTrue(can_collect(self.paid, 1000))
        self.assertIsNone(review_limit(self.paid))

    def test_missing_subscription_is_free(self):
        self.assertTrue(can_collect(None, 4))
        self.assertFalse(can_collect(None, 5))
        self.assertEqual(review_limit(None), 5)

    def test_custom_limit(self):
        self.assertTrue(can_collect(self.free, 9, free_limit=10))
        self.assertFalse(can_collect(self.free, 10, free_limit=10))


class SubscriptionEndpointTests(TestCase):
    def setUp(self):
        self.app, self.client, _ = make_app()
        self.db = self.app.state.session_factory()

    def tearDown(self):
        self.db.close()

    def test_implicit_free_plan(self):
        response = self.client.get("/api/subscription", headers=auth(BOB_TOKEN))
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["subscription"]["plan"], "free")
        self.assertEqual(body["subscription"]["status"], "active")
        self.assertTrue(body["can_collect"])
        self.assertEqual(body["review_limit"], 5)
        self.assertEqual(body["total_reviews"], 0)

    def test_free_plan_at_limit(self):
        business = add_business(self.db)
        add_subscription(self.db, plan="free")
        add_reviews(self.db, business.id, [5, 5, 4, 3, 2])

        body = self.client.get("/api/subscription", headers=auth()).json()
        self.assertFalse(body["can_collect"])
        self.assertEqual(body["total_reviews"], 5)

    def test_paid_plan(self):
        business = add_business(self.db)
        add_subscription(self.db, plan="paid")
        add_reviews(self.db, business.id, [5] * 8)

        body = self.client.get("/api/subscription", headers=auth()).json()
        self.assertTrue(body["can_collect"])
        self.assertIsNone(body["review_limit"])
