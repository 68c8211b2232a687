import unittest

from ups_xml.services import service_name_for


class ServiceNameTests(unittest.TestCase):
    def test_region_tables(self) -> None:
        self.assertEqual(service_name_for("CA", "01"), "UPS Express")
        self.assertEqual(service_name_for("CA", "14"), "UPS Express Early A.M.")
        self.assertEqual(service_name_for("MX", "54"), "UPS Express Plus")
        self.assertEqual(service_name_for("FR", "07"), "UPS Express")
        self.assertEqual(service_name_for("DE", "08"), "UPS Expedited")

    def test_us_origin_uses_default_table(self) -> None:
        self.assertEqual(service_name_for("US", "03"), "UPS Ground")
        self.assertEqual(service_name_for("US", "01"), "UPS Next Day Air")

    def test_region_miss_falls_back_to_default_table(self) -> None:
        self.assertEqual(service_name_for("CA", "65"), "UPS Saver")
        self.assertEqual(service_name_for("FR", "11"), "UPS Standard")

    def test_other_non_us_table(self) -> None:
        self.assertEqual(service_name_for("JP", "07"), "UPS Express")
        self.assertEqual(service_name_for("JP", "08"), "UPS Worldwide Expedited")

    def test_unknown_code_is_absent(self) -> None:
        self.assertIsNone(service_name_for("US", "99"))
        self.assertIsNone(service_name_for("CA", "99"))
        self.assertIsNone(service_name_for(None, "99"))


if __name__ == "__main__":
    unittest.main()
