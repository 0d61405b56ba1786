import unittest

import numpy as np

from connectfour.utils import (Player, GameResult, is_column_index, parse_int_list,
                               validate_dimensions)


class TestUtils(unittest.TestCase):
    def test_given_players_when_asking_for_opponent_then_swapped(self):
        self.assertIs(Player.ONE.other(), Player.TWO)
        self.assertIs(Player.TWO.other(), Player.ONE)
        with self.assertRaises(ValueError):
            Player.EMPTY.other()

    def test_given_players_when_building_results_then_matching_winner(self):
        self.assertIs(GameResult.win_for(Player.ONE).winner(), Player.ONE)
        self.assertIs(GameResult.win_for(Player.TWO).winner(), Player.TWO)
        self.assertIsNone(GameResult.TIE.winner())
        self.assertTrue(GameResult.TIE.is_game_over())
        self.assertFalse(GameResult.IN_PROGRESS.is_game_over())
        with self.assertRaises(ValueError):
            GameResult.win_for(Player.EMPTY)

    def test_given_dimensions_when_validating_then_small_boards_rejected(self):
        validate_dimensions(4, 4)
        validate_dimensions(6, 7)
        with self.assertRaises(ValueError):
            validate_dimensions(4, 3)

    def test_given_values_when_checking_column_index_then_only_integers_accepted(self):
        self.assertTrue(is_column_index(3))
        self.assertTrue(is_column_index(np.int8(3)))
        self.assertFalse(is_column_index(True))
        self.assertFalse(is_column_index(3.0))
        self.assertFalse(is_column_index("3"))

    def test_given_text_when_parsing_int_list_then_integers_returned(self):
        self.assertEqual(parse_int_list("0, 1,2 ,"), [0, 1, 2])
        self.assertEqual(parse_int_list(""), [])
        with self.assertRaises(ValueError):
            parse_int_list("1,x")


if __name__ == '__main__':
    unittest.main()
