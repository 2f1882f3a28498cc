import unittest

from termprompt.core.navigation import NavigationHandler


class NavigationHandlerTests(unittest.TestCase):
    def test_moves_within_bounds(self) -> None:
        nav = NavigationHandler(3)
        self.assertEqual(nav.process_arrow_key(0, "down"), (1, True))
        self.assertEqual(nav.process_arrow_key(2, "up"), (1, True))

    def test_edges_are_no_ops_without_cycling(self) -> None:
        nav = NavigationHandler(3)
        self.assertEqual(nav.process_arrow_key(0, "up"), (0, False))
        self.assertEqual(nav.process_arrow_key(2, "down"), (2, False))

    def test_cyclic_wraps(self) -> None:
        nav = NavigationHandler(3, cyclic=True)
        self.assertEqual(nav.process_arrow_key(0, "up"), (2, True))
        self.assertEqual(nav.process_arrow_key(2, "down"), (0, True))

    def test_empty_list_pins_index(self) -> None:
        nav = NavigationHandler(0, cyclic=True)
        self.assertEqual(nav.process_arrow_key(0, "down"), (0, False))
        self.assertEqual(nav.validate_index(4), 0)

    def test_unknown_direction_is_ignored(self) -> None:
        self.assertEqual(NavigationHandler(3).process_arrow_key(1, "left"), (1, False))

    def test_validate_index_clamps_to_zero(self) -> None:
        nav = NavigationHandler(3)
        self.assertEqual(nav.validate_index(-1), 0)
        self.assertEqual(nav.validate_index(3), 0)
        self.assertEqual(nav.validate_index(2), 2)


if __name__ == "__main__":
    unittest.main()
