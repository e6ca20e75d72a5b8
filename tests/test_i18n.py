"""Unit tests for app.core.i18n.translate."""

import unittest

from app.core.i18n import translate


class TestTranslate(unittest.TestCase):
    def test_exact_match(self) -> None:
        self.assertEqual(translate("Invalid credentials", "id"), "Kredensial tidak valid")
        self.assertEqual(translate("Authorization header required", "id"), "Header Authorization diperlukan")

    def test_prefix_keeps_detail(self) -> None:
        self.assertEqual(
            translate("Failed to create payment: disk full", "id"),
            "Gagal membuat pembayaran: disk full",
        )

    def test_unmapped_passes_through(self) -> None:
        self.assertEqual(translate("CORS: Origin not allowed", "id"), "CORS: Origin not allowed")

    def test_english_locale_is_identity(self) -> None:
        self.assertEqual(translate("Invalid credentials", "en"), "Invalid credentials")


if __name__ == "__main__":
    unittest.main()
