import pytest

from judgekit.games import (
    evaluate_bridge_hand,
    fuse_check,
    is_secure,
    max_pieces,
    next_card,
    snail_outcome,
    unique_problems,
    wire_direction,
)


def test_next_card_sample():
    assert next_card([28, 51, 29], [50, 52]) == 30


def test_next_card_impossible():
    assert next_card([50, 26, 19], [10, 27]) == -1


def test_next_card_result_is_unused_and_in_deck():
    princess, prince = [1, 2, 3], [51, 52]
    card = next_card(princess, prince)
    assert 1 <= card <= 52
    assert card not in princess + prince


def test_next_card_order_independent():
    assert next_card([10, 20, 30], [24, 26]) == next_card([30, 10, 20], [26, 24])


def test_next_card_rejects_wrong_hand_size():
    with pytest.raises(ValueError):
        next_card([1, 2], [3, 4])


@pytest.mark.parametrize("piece", ["r", "Q"])
def test_rook_and_queen_use_smaller_side(piece):
    assert max_pieces(piece, 3, 7) == 3


@pytest.mark.parametrize("piece", ["r", "k", "K", "Q"])
def test_max_pieces_symmetric(piece):
    assert max_pieces(piece, 5, 8) == max_pieces(piece, 8, 5)


def test_knights_fill_half_of_even_board():
    assert max_pieces("k", 4, 6) * 2 == 4 * 6


def test_max_pieces_unknown_piece():
    with pytest.raises(ValueError):
        max_pieces("x", 3, 3)


def test_bridge_bid_suit():
    hand = "KS QS TH 8H 4H AC QC TC 5C KD QD JD 8D".split()
    assert evaluate_bridge_hand(hand) == "BID D"


def test_bridge_no_trump():
    hand = "AC 3C 4C AS 7S 4S AD TD 7D 5D AH 7H 5H".split()
    assert evaluate_bridge_hand(hand) == "BID NO-TRUMP"


def test_bridge_pass():
    hand = "2S 3S 4S 5S 2H 3H 4H 2D 3D 4D 2C 3C 4C".split()
    assert evaluate_bridge_hand(hand) == "PASS"


def test_wire_no_bends():
    assert wire_direction([]) == "+x"


def test_wire_bends_follow_table():
    assert wire_direction(["No", "+y"]) == "+y"
    assert wire_direction(["+y", "+y"]) == "-x"


def test_wire_opposite_bends_cancel():
    assert wire_direction(["+z", "-z"]) == "+x"


def test_wire_unknown_bend():
    with pytest.raises(ValueError):
        wire_direction(["+x"])


def test_snail_success_sample():
    assert snail_outcome(6, 3, 1, 10) == ("success", 3)


def test_snail_failure_sample():
    assert snail_outcome(1, 1, 1, 1) == ("failure", 2)


def test_snail_climbs_out_first_day():
    outcome, day = snail_outcome(5, 10, 1, 50)
    assert outcome == "success"
    assert day == 1


def test_fuse_not_blown_reports_peak():
    capacities = [2, 5, 7]
    assert fuse_check(capacities, [1, 1, 2], 10) == capacities[1]


def test_fuse_blown():
    assert fuse_check([2, 5, 7], [1, 2, 3], 10) is None


def test_fuse_peak_equal_to_limit_is_fine():
    assert fuse_check([4, 6], [1, 2], 10) == 10


def test_fuse_unknown_device():
    with pytest.raises(ValueError):
        fuse_check([1], [2], 10)


def test_secure_when_meeting_only_at_end():
    assert is_secure((0, 3), (3, 0), [(0, 0)], [(0, 0)]) is True


def test_not_secure_when_meeting_on_the_way():
    assert is_secure((0, 2), (0, 0), [(0, 5)], [(0, 0)]) is False


def test_unique_problems_single_winner():
    assert unique_problems([[1, 2, 3], [2, 4], [3, 5, 6]]) == [(3, [5, 6])]


def test_unique_problems_tie_and_sorted():
    result = unique_problems([[9, 1], [4, 7], [1, 4]])
    assert result == [(1, [9]), (2, [7])]


def test_unique_problems_all_shared():
    assert unique_problems([[1], [1], [1]]) == [(1, []), (2, []), (3, [])]