from decimal import Decimal

from django.test import SimpleTestCase, override_settings

from ethereum.lib import (
    Denomination,
    PaymentMethod,
    denomination_for_payment_method,
    format_amount,
    from_minor_units,
    get_explorer_url,
    is_configured_address,
    native_to_stable_minor,
    to_minor_units,
)


class EthereumLibTests(SimpleTestCase):
    def test_to_minor_units_native(self):
        self.assertEqual(to_minor_units("1", Denomination.NATIVE), 10**18)
        self.assertEqual(to_minor_units("0.01", Denomination.NATIVE), 10**16)
        self.assertEqual(to_minor_units("0.001", Denomination.NATIVE), 10**15)
        self.assertEqual(
            to_minor_units("1.001", Denomination.NATIVE), 1001000000000000000
        )
        self.assertEqual(to_minor_units("0.0", Denomination.NATIVE), 0)

    def test_to_minor_units_stable_uses_six_decimals(self):
        self.assertEqual(to_minor_units("20", Denomination.STABLE), 20000000)
        self.assertEqual(to_minor_units("0.000001", Denomination.STABLE), 1)
        self.assertEqual(to_minor_units(Decimal("12.5"), Denomination.STABLE), 12500000)

    def test_to_minor_units_rounds_excess_precision(self):
        self.assertEqual(to_minor_units("0.0000015", Denomination.STABLE), 2)
        self.assertEqual(to_minor_units("0.0000014", Denomination.STABLE), 1)

    def test_to_minor_units_handles_uint256_scale(self):
        self.assertEqual(
            to_minor_units("123456789012345.123456789", Denomination.NATIVE),
            123456789012345123456789000000000,
        )

    def test_to_minor_units_with_negatives(self):
        with self.assertRaises(ValueError):
            to_minor_units("-5", Denomination.NATIVE)

    def test_unknown_denomination(self):
        with self.assertRaises(ValueError):
            to_minor_units("1", "GOLD")

    def test_from_minor_units(self):
        self.assertEqual(from_minor_units(10**16, Denomination.NATIVE), Decimal("0.01"))
        self.assertEqual(from_minor_units(20000000, Denomination.STABLE), Decimal("20"))
        self.assertEqual(format_amount(10**16, Denomination.NATIVE), "0.01")
        self.assertEqual(format_amount(10**19, Denomination.NATIVE), "10")
        self.assertEqual(format_amount(0, Denomination.STABLE), "0")

    def test_native_to_stable_at_default_rate(self):
        self.assertEqual(native_to_stable_minor(10**16), 20000000)

    def test_native_to_stable_at_custom_rate(self):
        self.assertEqual(native_to_stable_minor(10**18, rate="1500.5"), 1500500000)

    def test_payment_method_denominations(self):
        self.assertEqual(
            denomination_for_payment_method(PaymentMethod.ETH), Denomination.NATIVE
        )
        self.assertEqual(
            denomination_for_payment_method("CROSS_CHAIN_ETH"), Denomination.NATIVE
        )
        self.assertEqual(denomination_for_payment_method("PYUSD"), Denomination.STABLE)
        with self.assertRaises(ValueError):
            denomination_for_payment_method("BTC")

    @override_settings(WEB3_NETWORK="sepolia")
    def test_explorer_url_for_configured_network(self):
        self.assertEqual(
            get_explorer_url("0xabc"), "https://sepolia.etherscan.io/tx/0xabc"
        )

    def test_explorer_url_per_network(self):
        self.assertEqual(
            get_explorer_url("0xabc", "polygon"), "https://polygonscan.com/tx/0xabc"
        )
        self.assertEqual(
            get_explorer_url("0xabc", "mainnet"), "https://etherscan.io/tx/0xabc"
        )
        self.assertEqual(
            get_explorer_url("0xabc", "unknown"), "http://localhost:4000/tx/0xabc"
        )

    def test_is_configured_address(self):
        self.assertFalse(is_configured_address(""))
        self.assertFalse(is_configured_address(None))
        self.assertFalse(
            is_configured_address("0x0000000000000000000000000000000000000000")
        )
        self.assertTrue(
            is_configured_address("0x5FbDB2315678afecb367f032d93F642f64180aa3")
        )
