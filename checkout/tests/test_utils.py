from django.test import SimpleTestCase

from checkout import utils

from .support import SECRET, sign


class PaymentSignatureTests(SimpleTestCase):
    def test_expected_signature_is_deterministic_lowercase_hex(self):
        first = utils.expected_signature(SECRET, "order_1", "pay_1")
        second = utils.expected_signature(SECRET, "order_1", "pay_1")
        self.assertEqual(first, second)
        self.assertEqual(first, sign("order_1", "pay_1"))
        self.assertRegex(first, r"^[0-9a-f]{64}$")

    def test_single_character_changes_alter_signature(self):
        base = utils.expected_signature(SECRET, "order_1", "pay_1")
        self.assertNotEqual(base, utils.expected_signature(SECRET, "order_2", "pay_1"))
        self.assertNotEqual(base, utils.expected_signature(SECRET, "order_1", "pay_2"))
        self.assertNotEqual(base, utils.expected_signature(SECRET + "x", "order_1", "pay_1"))

    def test_verify_accepts_matching_signature(self):
        self.assertTrue(
            utils.verify_payment_signature(
                SECRET, order_id="order_1", payment_id="pay_1", signature=sign("order_1", "pay_1")
            )
        )

    def test_verify_rejects_forged_signature(self):
        forged = sign("order_1", "pay_1", secret="guessed")
        self.assertFalse(
            utils.verify_payment_signature(SECRET, order_id="order_1", payment_id="pay_1", signature=forged)
        )

    def test_missing_pieces_fail_verification(self):
        good = sign("order_1", "pay_1")
        for order_id, payment_id, signature in [
            ("", "pay_1", good),
            ("order_1", None, good),
            ("order_1", "pay_1", ""),
            (None, None, None),
        ]:
            with self.subTest(order_id=order_id, payment_id=payment_id, signature=signature):
                self.assertFalse(
                    utils.verify_payment_signature(
                        SECRET, order_id=order_id, payment_id=payment_id, signature=signature
                    )
                )


class HelperTests(SimpleTestCase):
    def test_generated_document_id_shape(self):
        doc_id = utils.generate_document_id()
        self.assertEqual(len(doc_id), 20)
        self.assertTrue(doc_id.startswith("ORD"))
        self.assertTrue(doc_id.isalnum())
        self.assertNotEqual(doc_id, utils.generate_document_id())

    def test_receipt_label(self):
        self.assertRegex(utils.receipt_label(), r"^receipt_\d{13}$")

    def test_is_non_empty_string(self):
        self.assertTrue(utils.is_non_empty_string(" a "))
        self.assertFalse(utils.is_non_empty_string("   "))
        self.assertFalse(utils.is_non_empty_string(None))
        self.assertFalse(utils.is_non_empty_string(12))

    def test_compose_address(self):
        self.assertEqual(
            utils.compose_address("12 Main St", "Erode", "TN", "638001"),
            "12 Main St, Erode, TN - 638001",
        )
        self.assertEqual(utils.compose_address("", "Erode"), ", Erode")
        self.assertEqual(utils.compose_address(), "")
